"""Response schemas of TheCatAPI, loaded once from catalog.yaml."""

from pathlib import Path

import yaml

from cat_api_suite.schema.nodes import SchemaNode

CATALOG_PATH = Path(__file__).parent / "catalog.yaml"


def load_catalog(file_path: Path = CATALOG_PATH) -> dict[str, SchemaNode]:
    """Parse a YAML file of named JSON-Schema-style documents into schema trees."""
    doc = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    return {name: SchemaNode.from_json_schema(schema) for name, schema in doc.items()}


CATALOG = load_catalog()

IMAGE_SCHEMA = CATALOG["image"]
BREED_SCHEMA = CATALOG["breed"]
CATEGORY_SCHEMA = CATALOG["category"]
FAVOURITE_SCHEMA = CATALOG["favourite"]
VOTE_SCHEMA = CATALOG["vote"]


def get_schema(name: str) -> SchemaNode:
    try:
        return CATALOG[name]
    except KeyError:
        known = ", ".join(sorted(CATALOG))
        raise KeyError(f"Unknown schema {name!r}; known schemas: {known}") from None
