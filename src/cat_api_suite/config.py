"""Runtime configuration and endpoint constants for TheCatAPI."""

import os

from pydantic import BaseModel

DEFAULT_BASE_URL = "https://api.thecatapi.com/v1"
DEFAULT_API_KEY = "DEMO-API-KEY"
DEFAULT_TIMEOUT = 30.0

ENDPOINTS = {
    "images.search": "/images/search",
    "images.get": "/images/:image_id",
    "breeds.list": "/breeds",
    "breeds.get": "/breeds/:breed_id",
    "categories.list": "/categories",
    "favourites.list": "/favourites",
    "favourites.create": "/favourites",
    "favourites.delete": "/favourites/:favourite_id",
    "votes.list": "/votes",
    "votes.create": "/votes",
    "votes.delete": "/votes/:vote_id",
}

QUERY_LIMITS = {
    "limit": {"min": 1, "max": 100, "default": 1},
    "page": {"min": 0, "max": 2147483647, "default": 0},
    "order": ["ASC", "DESC", "RAND"],
    "has_breeds": [0, 1],
}


def _default_headers() -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


class ApiConfig(BaseModel):
    """Connection settings for the API under test and the result webhook."""

    base_url: str = DEFAULT_BASE_URL
    api_key: str = DEFAULT_API_KEY
    timeout: float = DEFAULT_TIMEOUT  # seconds
    headers: dict[str, str] = _default_headers()
    debug: bool = False
    slack_webhook_url: str = ""
    slack_channel: str = "#test-results"

    @classmethod
    def from_env(cls) -> "ApiConfig":
        """Build a config from CAT_API_*, DEBUG_API and SLACK_* variables."""
        return cls(
            base_url=os.getenv("CAT_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            api_key=os.getenv("CAT_API_KEY", DEFAULT_API_KEY),
            timeout=float(os.getenv("CAT_API_TIMEOUT", DEFAULT_TIMEOUT)),
            debug=bool(os.getenv("DEBUG_API")),
            slack_webhook_url=os.getenv("SLACK_WEBHOOK_URL", ""),
            slack_channel=os.getenv("SLACK_CHANNEL", "#test-results"),
        )


def endpoint(template: str, **values) -> str:
    """Fill ``:name`` placeholders in an endpoint path.

    ``template`` may be a key of ENDPOINTS or a literal path.
    """
    path = ENDPOINTS.get(template, template)
    for name, value in values.items():
        placeholder = f":{name}"
        if placeholder not in path:
            raise KeyError(f"Endpoint {path!r} has no placeholder {placeholder!r}")
        path = path.replace(placeholder, str(value))
    return path
