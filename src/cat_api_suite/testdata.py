"""Known ids and query-parameter cases used by the live suite."""

from cat_api_suite.config import QUERY_LIMITS

TEST_IMAGES = {
    "valid": "0XYvRd7oD",
    "invalid": "invalid_id_12345",
}

TEST_BREEDS = {
    "bengal": "beng",
    "abyssinian": "abys",
    "maine_coon": "mcoon",
    "british_shorthair": "bsh",
}

TEST_CATEGORIES = {
    "hats": 1,
    "sunglasses": 4,
    "space": 5,
    "funny": 14,
}

INVALID_BREED_ID = "invalid_breed_xyz"
INVALID_API_KEY = "invalid_api_key_12345"


def boundary_cases(name: str) -> dict[str, dict]:
    """Values at and just outside the documented range of a numeric query param.

    Returns ``{case_id: {name: value}}`` for min, max, min - 1 and max + 1.
    """
    limits = QUERY_LIMITS[name]
    return {
        f"{name}_min": {name: limits["min"]},
        f"{name}_max": {name: limits["max"]},
        f"{name}_below_min": {name: limits["min"] - 1},
        f"{name}_above_max": {name: limits["max"] + 1},
    }


def in_range(name: str, value: int) -> bool:
    limits = QUERY_LIMITS[name]
    return limits["min"] <= value <= limits["max"]


# Combinations the API must accept with a 2xx
QUERY_PARAM_CASES = {
    "limit_mid": {"limit": 5},
    **{f"order_{order.lower()}": {"order": order} for order in QUERY_LIMITS["order"]},
    "page_one": {"page": 1},
    "page_large": {"page": 100},
    "combination_1": {"limit": 10, "page": 0, "order": "RAND"},
    "combination_2": {"limit": 25, "page": 1, "has_breeds": 1},
    "all_at_limits": {
        "limit": QUERY_LIMITS["limit"]["max"],
        "page": QUERY_LIMITS["page"]["min"],
        "order": "RAND",
        "has_breeds": 1,
    },
}

# Malformed inputs the API must answer without a transport failure
ERROR_CASES = {
    "invalid_breed_id": {"breed_ids": INVALID_BREED_ID},
    "invalid_category_id": {"category_ids": "99999"},
    "non_integer_limit": {"limit": "abc"},
    "non_integer_page": {"page": "abc"},
    "negative_limit": {"limit": -5},
    "huge_limit": {"limit": 999999},
    "empty_breed_ids": {"breed_ids": ""},
    "breed_id_symbols": {"breed_ids": "invalid@#$%", "limit": 5},
    "script_injection": {"breed_ids": '<script>alert("test")</script>'},
    "long_query_string": {"breed_ids": ",".join([TEST_BREEDS["bengal"]] * 50), "limit": 1},
}
