"""Recursive structural validation of JSON values against SchemaNode trees.

Errors are accumulated rather than short-circuited so one failing
assertion reports every mismatch at once. Messages are flat: nested and
array-element errors carry no field path or index.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel

from cat_api_suite.schema.nodes import SchemaNode


class JsonKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


class ValidationResult(BaseModel):
    valid: bool
    errors: list[str]


def kind_of(value: Any) -> JsonKind:
    """Classify a decoded JSON value."""
    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if value is None:
        return JsonKind.NULL
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, int):
        return JsonKind.INTEGER
    if isinstance(value, float):
        return JsonKind.INTEGER if value.is_integer() else JsonKind.NUMBER
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def _matches(tag: str, kind: JsonKind) -> bool:
    if tag == "number":
        return kind in (JsonKind.INTEGER, JsonKind.NUMBER)
    return tag == kind.value


def _mismatch(tag: str, kind: JsonKind) -> str:
    return f"Expected {tag} but got {kind.value}"


def _collect(value: Any, schema: SchemaNode, errors: list[str]) -> None:
    kind = kind_of(value)

    if schema.tag == "object":
        if kind is not JsonKind.OBJECT:
            errors.append(_mismatch("object", kind))
            return
        for name in schema.required:
            if name not in value:
                errors.append(f"Missing required field: {name}")
        for name, child in schema.properties.items():
            if name in value:
                _collect(value[name], child, errors)
        return

    if schema.tag == "array":
        if kind is not JsonKind.ARRAY:
            errors.append(_mismatch("array", kind))
            return
        if schema.items is not None:
            for element in value:
                _collect(element, schema.items, errors)
        return

    if not _matches(schema.tag, kind):
        errors.append(_mismatch(schema.tag, kind))


def validate(value: Any, schema: SchemaNode) -> ValidationResult:
    """Check ``value`` against ``schema`` and list every mismatch in traversal order."""
    errors: list[str] = []
    _collect(value, schema, errors)
    return ValidationResult(valid=not errors, errors=errors)
