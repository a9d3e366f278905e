"""Assertion helpers for ResponseResult.

Each helper raises AssertionFailure with the specific status, field or
mismatch list that broke the expectation.
"""

from typing import Any

from cat_api_suite.client.models import ResponseResult
from cat_api_suite.errors import AssertionFailure
from cat_api_suite.schema.nodes import SchemaNode
from cat_api_suite.schema.validator import kind_of, validate

_MISSING = object()


def _first_item(response: ResponseResult) -> Any:
    body = response.body
    if isinstance(body, list):
        if not body:
            raise AssertionFailure("Expected a non-empty array body")
        return body[0]
    return body


def _nested_value(obj: Any, path: str) -> Any:
    current = obj
    for part in path.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        elif isinstance(current, list) and part.isdigit() and int(part) < len(current):
            current = current[int(part)]
        else:
            return _MISSING
    return current


def _field(response: ResponseResult, path: str) -> Any:
    value = _nested_value(response.body, path)
    if value is _MISSING:
        raise AssertionFailure(f"Field {path!r} not found in response body")
    return value


def assert_status(response: ResponseResult, expected: int) -> None:
    if response.status != expected:
        raise AssertionFailure(
            f"Expected status {expected} but got {response.status} {response.status_text}".rstrip()
        )


def assert_success(response: ResponseResult) -> None:
    """Require a 2xx response."""
    if not response.ok:
        raise AssertionFailure(
            f"Expected a successful response but got {response.status} {response.status_text}".rstrip()
        )


def assert_error_response(response: ResponseResult, status: int | None = None) -> None:
    """Require a non-2xx response, optionally with a specific status."""
    if response.ok:
        raise AssertionFailure(f"Expected an error response but got {response.status}")
    if status is not None:
        assert_status(response, status)


def assert_is_array(response: ResponseResult) -> None:
    if not isinstance(response.body, list):
        raise AssertionFailure(f"Expected array body but got {kind_of(response.body).value}")


def assert_is_object(response: ResponseResult) -> None:
    if not isinstance(response.body, dict):
        raise AssertionFailure(f"Expected object body but got {kind_of(response.body).value}")


def assert_has_fields(response: ResponseResult, fields: list[str]) -> None:
    """Require every field on the body, or on its first element for arrays."""
    item = _first_item(response)
    if not isinstance(item, dict):
        raise AssertionFailure(f"Expected object but got {kind_of(item).value}")
    missing = [f for f in fields if f not in item]
    if missing:
        raise AssertionFailure(f"Missing fields: {', '.join(missing)}")


def assert_array_length(response: ResponseResult, length: int, operator: str = "equals") -> None:
    """Check the body's length; operator is equals, at_least or at_most."""
    assert_is_array(response)
    actual = len(response.body)
    checks = {
        "equals": actual == length,
        "at_least": actual >= length,
        "at_most": actual <= length,
    }
    if operator not in checks:
        raise ValueError(f"Unknown operator: {operator}")
    if not checks[operator]:
        raise AssertionFailure(f"Expected array length {operator.replace('_', ' ')} {length} but got {actual}")


def assert_field_value(response: ResponseResult, path: str, expected: Any) -> None:
    value = _field(response, path)
    if value != expected:
        raise AssertionFailure(f"Field {path!r}: expected {expected!r} but got {value!r}")


def assert_field_contains(response: ResponseResult, path: str, expected: str) -> None:
    value = _field(response, path)
    if expected not in str(value):
        raise AssertionFailure(f"Field {path!r}: {value!r} does not contain {expected!r}")


def assert_field_type(response: ResponseResult, path: str, expected: str) -> None:
    """Compare a field's JSON kind (object, array, string, integer, number, boolean, null)."""
    kind = kind_of(_field(response, path)).value
    if expected == "number" and kind == "integer":
        return
    if kind != expected:
        raise AssertionFailure(f"Field {path!r}: expected {expected} but got {kind}")


def assert_matches_schema(value: Any, schema: SchemaNode) -> None:
    """Validate ``value`` and fail with every mismatch listed."""
    result = validate(value, schema)
    if not result.valid:
        details = "\n".join(f"  - {e}" for e in result.errors)
        raise AssertionFailure(f"Schema validation failed with {len(result.errors)} error(s):\n{details}")
