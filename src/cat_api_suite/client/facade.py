"""HTTP façade over a requests session.

Turns a RequestDescriptor into a ResponseResult: query serialization,
default header merging, body encoding and JSON-or-text response parsing.
Transport failures surface as TransportError; HTTP error statuses do not.
"""

import json
from collections.abc import Callable
from typing import Any
from urllib.parse import urlencode

import click
import requests

from cat_api_suite.client.models import RequestDescriptor, ResponseResult
from cat_api_suite.config import ApiConfig
from cat_api_suite.errors import TransportError

Sink = Callable[[str], None]


def echo_sink(line: str) -> None:
    """Write a trace line to stderr."""
    click.echo(line, err=True)


def null_sink(line: str) -> None:
    """Discard a trace line."""


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: dict[str, Any] | None, api_key: str | None = None) -> list[tuple[str, str]]:
    """Serialize query params in insertion order, dropping None values."""
    pairs = []
    if api_key:
        pairs.append(("api_key", api_key))
    for key, value in (params or {}).items():
        if value is None:
            continue
        pairs.append((key, _stringify(value)))
    return pairs


class ApiClient:
    """Executes requests against the configured API and normalizes responses."""

    def __init__(
        self,
        config: ApiConfig | None = None,
        session: requests.Session | None = None,
        sink: Sink | None = None,
        api_key: str | None = None,
    ):
        self.config = config or ApiConfig.from_env()
        self.session = session or requests.Session()
        self.sink = sink or echo_sink
        self.api_key = api_key or self.config.api_key

    @property
    def default_headers(self) -> dict[str, str]:
        return {**self.config.headers, "x-api-key": self.api_key}

    def build_url(self, descriptor: RequestDescriptor) -> str:
        url = f"{self.config.base_url}{descriptor.path}"
        query = build_query(descriptor.params, descriptor.api_key)
        if query:
            url = f"{url}?{urlencode(query)}"
        return url

    def execute(self, descriptor: RequestDescriptor) -> ResponseResult:
        """Send the described request and return the normalized response.

        Raises TransportError when no response was received.
        """
        url = self.build_url(descriptor)
        headers = {**self.default_headers, **(descriptor.headers or {})}
        data = self._encode_body(descriptor) if descriptor.carries_body else None

        self.sink(f"[API] {descriptor.method} {url}")
        try:
            response = self.session.request(
                descriptor.method,
                url,
                headers=headers,
                data=data,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            self.sink(f"[API] Request failed: {e}")
            raise TransportError(f"{descriptor.method} {url} failed: {e}", cause=e) from e

        result = ResponseResult(
            status=response.status_code,
            status_text=response.reason or "",
            headers=dict(response.headers),
            body=self._parse_body(response),
        )

        self.sink(f"[API] Response Status: {result.status}")
        if self.config.debug:
            self.sink(f"[API] Response Body: {json.dumps(result.body, indent=2, default=str)}")
        return result

    def get(self, path: str, params: dict[str, Any] | None = None, api_key: str | None = None) -> ResponseResult:
        return self.execute(RequestDescriptor(method="GET", path=path, params=params, api_key=api_key))

    def post(self, path: str, body: dict | list | str | None = None, api_key: str | None = None) -> ResponseResult:
        return self.execute(RequestDescriptor(method="POST", path=path, body=body, api_key=api_key))

    def put(self, path: str, body: dict | list | str | None = None, api_key: str | None = None) -> ResponseResult:
        return self.execute(RequestDescriptor(method="PUT", path=path, body=body, api_key=api_key))

    def patch(self, path: str, body: dict | list | str | None = None, api_key: str | None = None) -> ResponseResult:
        return self.execute(RequestDescriptor(method="PATCH", path=path, body=body, api_key=api_key))

    def delete(self, path: str, body: dict | list | str | None = None, api_key: str | None = None) -> ResponseResult:
        return self.execute(RequestDescriptor(method="DELETE", path=path, body=body, api_key=api_key))

    def _encode_body(self, descriptor: RequestDescriptor) -> str:
        if isinstance(descriptor.body, str):
            return descriptor.body
        return json.dumps(descriptor.body)

    def _parse_body(self, response: requests.Response) -> Any:
        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            try:
                return response.json()
            except ValueError:
                # Unparseable JSON bodies are reported as an empty object
                return {}
        return response.text
