"""Declarative schema trees describing the expected shape of JSON bodies."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

Tag = Literal["object", "array", "string", "integer", "number", "boolean"]


class SchemaNode(BaseModel):
    """One node of a schema tree.

    ``object`` nodes use ``properties`` and ``required``; ``array`` nodes
    use ``items``. Primitive nodes use neither. ``required`` behaves as an
    ordered set: duplicates are dropped, first occurrence wins.

    Trees are shared between validations and must be treated as read-only,
    including the ``properties`` mapping the frozen model cannot guard.
    """

    model_config = ConfigDict(frozen=True)

    tag: Tag
    properties: dict[str, "SchemaNode"] = {}
    required: tuple[str, ...] = ()
    items: "SchemaNode | None" = None

    @field_validator("required", mode="before")
    @classmethod
    def _dedupe_required(cls, value):
        if isinstance(value, str):
            return value
        return tuple(dict.fromkeys(value))

    @classmethod
    def from_json_schema(cls, doc: dict) -> "SchemaNode":
        """Build a tree from a JSON-Schema-style mapping.

        Only ``type``, ``properties``, ``required`` and ``items`` are read;
        keywords such as ``format`` or ``enum`` are ignored.
        """
        tag = doc.get("type")
        if tag is None:
            raise ValueError(f"Schema without a type: {doc!r}")

        properties = {
            name: cls.from_json_schema(child)
            for name, child in doc.get("properties", {}).items()
        }
        items = doc.get("items")
        return cls(
            tag=tag,
            properties=properties,
            required=tuple(doc.get("required", ())),
            items=cls.from_json_schema(items) if items else None,
        )


SchemaNode.model_rebuild()


def obj(properties: dict[str, SchemaNode] | None = None, required: tuple[str, ...] | list[str] = ()) -> SchemaNode:
    return SchemaNode(tag="object", properties=properties or {}, required=tuple(required))


def array(items: SchemaNode | None = None) -> SchemaNode:
    return SchemaNode(tag="array", items=items)


def string() -> SchemaNode:
    return SchemaNode(tag="string")


def integer() -> SchemaNode:
    return SchemaNode(tag="integer")


def number() -> SchemaNode:
    return SchemaNode(tag="number")


def boolean() -> SchemaNode:
    return SchemaNode(tag="boolean")
