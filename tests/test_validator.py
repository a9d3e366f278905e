import copy

import pytest
from pydantic import ValidationError

from cat_api_suite.schema.catalog import CATALOG
from cat_api_suite.schema.nodes import SchemaNode, array, boolean, integer, number, obj, string
from cat_api_suite.schema.validator import JsonKind, kind_of, validate

PERSON = obj(
    {
        "name": string(),
        "age": integer(),
        "score": number(),
        "active": boolean(),
        "tags": array(string()),
        "address": obj({"city": string(), "zip": string()}, required=["city"]),
    },
    required=["name", "age"],
)


def _valid_person() -> dict:
    return {
        "name": "Ada",
        "age": 36,
        "score": 9.5,
        "active": True,
        "tags": ["math", "engines"],
        "address": {"city": "London", "zip": "N1"},
    }


class TestKindOf:
    @pytest.mark.parametrize(
        "value, kind",
        [
            ({}, JsonKind.OBJECT),
            ([], JsonKind.ARRAY),
            ("x", JsonKind.STRING),
            (3, JsonKind.INTEGER),
            (3.0, JsonKind.INTEGER),
            (3.5, JsonKind.NUMBER),
            (True, JsonKind.BOOLEAN),
            (None, JsonKind.NULL),
        ],
    )
    def test_classification(self, value, kind):
        assert kind_of(value) is kind

    def test_rejects_non_json(self):
        with pytest.raises(TypeError):
            kind_of(object())


class TestObject:
    def test_conforming_value(self):
        result = validate(_valid_person(), PERSON)
        assert result.valid is True
        assert result.errors == []

    def test_only_required_fields(self):
        assert validate({"name": "Ada", "age": 36}, PERSON).valid

    def test_missing_required_reported_once(self):
        result = validate({"age": 36}, PERSON)
        assert result.valid is False
        assert result.errors == ["Missing required field: name"]

    def test_missing_required_in_declared_order(self):
        result = validate({}, PERSON)
        assert result.errors == ["Missing required field: name", "Missing required field: age"]

    def test_duplicate_required_reported_once(self):
        parsed = SchemaNode.from_json_schema({
            "type": "object",
            "properties": {"id": {"type": "string"}},
            "required": ["id", "name", "id"],
        })
        built = obj({"id": string()}, required=["id", "id"])
        assert parsed.required == ("id", "name")
        assert validate({}, parsed).errors == ["Missing required field: id", "Missing required field: name"]
        assert validate({}, built).errors.count("Missing required field: id") == 1

    def test_required_string_is_rejected(self):
        with pytest.raises(ValidationError):
            SchemaNode(tag="object", required="id")

    def test_array_is_not_an_object(self):
        result = validate([1, 2], PERSON)
        assert result.errors == ["Expected object but got array"]

    def test_null_is_not_an_object(self):
        assert validate(None, PERSON).errors == ["Expected object but got null"]

    def test_not_object_stops_before_required_checks(self):
        result = validate("Ada", PERSON)
        assert len(result.errors) == 1

    def test_undeclared_fields_are_ignored(self):
        value = _valid_person()
        value["extra"] = {"anything": [1, 2]}
        assert validate(value, PERSON).valid


class TestPrimitives:
    def test_each_wrong_property_is_reported(self):
        value = _valid_person()
        value["name"] = 42
        value["age"] = "36"
        value["active"] = "yes"
        result = validate(value, PERSON)
        assert result.errors == [
            "Expected string but got integer",
            "Expected integer but got string",
            "Expected boolean but got string",
        ]

    def test_integer_rejects_fraction(self):
        value = _valid_person()
        value["age"] = 36.6
        assert validate(value, PERSON).errors == ["Expected integer but got number"]

    def test_integer_accepts_whole_float(self):
        value = _valid_person()
        value["age"] = 36.0
        assert validate(value, PERSON).valid

    def test_number_accepts_integer(self):
        value = _valid_person()
        value["score"] = 10
        assert validate(value, PERSON).valid

    def test_boolean_is_not_a_number(self):
        assert validate(True, number()).errors == ["Expected number but got boolean"]
        assert validate(False, integer()).errors == ["Expected integer but got boolean"]

    def test_array_kind_reported_for_lists(self):
        assert validate(["a"], string()).errors == ["Expected string but got array"]

    def test_top_level_primitive(self):
        assert validate("ok", string()).valid


class TestArray:
    def test_non_array(self):
        assert validate({"a": 1}, array(string())).errors == ["Expected array but got object"]

    def test_untyped_items_accept_anything(self):
        assert validate([1, "a", None, {}], array()).valid

    def test_element_errors_concatenate_in_order(self):
        result = validate(["a", 1, "b", 2.5, False], array(string()))
        assert result.errors == [
            "Expected string but got integer",
            "Expected string but got number",
            "Expected string but got boolean",
        ]

    def test_empty_array(self):
        assert validate([], array(integer())).valid

    def test_array_of_objects(self):
        schema = array(obj({"id": integer()}, required=["id"]))
        result = validate([{"id": 1}, {}, {"id": "x"}], schema)
        assert result.errors == ["Missing required field: id", "Expected integer but got string"]


class TestNested:
    def test_errors_are_not_prefixed(self):
        value = _valid_person()
        value["address"] = {"zip": 12345}
        result = validate(value, PERSON)
        assert result.errors == ["Missing required field: city", "Expected string but got integer"]

    def test_deeply_nested_malformed(self):
        schema = obj(
            {
                "level1": obj(
                    {
                        "level2": array(
                            obj({"level3": obj({"leaf": integer()}, required=["leaf"])}, required=["level3"])
                        )
                    },
                    required=["level2"],
                )
            },
            required=["level1"],
        )
        value = {
            "level1": {
                "level2": [
                    {"level3": {"leaf": 1}},
                    {"level3": {"leaf": "one"}},
                    {"level3": []},
                    {},
                    "nope",
                ]
            }
        }
        result = validate(value, schema)
        assert result.errors == [
            "Expected integer but got string",
            "Expected object but got array",
            "Missing required field: level3",
            "Expected object but got string",
        ]

    def test_mixed_errors_accumulate(self):
        value = {"age": "old", "tags": "math", "address": []}
        result = validate(value, PERSON)
        assert result.errors == [
            "Missing required field: name",
            "Expected integer but got string",
            "Expected array but got string",
            "Expected object but got array",
        ]


class TestPurity:
    def test_validate_is_idempotent(self):
        value = {"age": "old", "tags": [1, 2]}
        first = validate(value, PERSON)
        second = validate(value, PERSON)
        assert first == second

    def test_inputs_not_mutated(self):
        value = {"age": "old", "address": {"zip": 1}}
        value_before = copy.deepcopy(value)
        schema_before = PERSON.model_dump()
        validate(value, PERSON)
        assert value == value_before
        assert PERSON.model_dump() == schema_before

    def test_generated_value_conforms(self):
        def generate(schema: SchemaNode):
            if schema.tag == "object":
                return {name: generate(child) for name, child in schema.properties.items()} | {
                    name: "" for name in schema.required if name not in schema.properties
                }
            if schema.tag == "array":
                return [generate(schema.items)] * 2 if schema.items else []
            return {"string": "s", "integer": 1, "number": 1.5, "boolean": False}[schema.tag]

        for schema in [PERSON, *CATALOG.values()]:
            assert validate(generate(schema), schema).valid
