import json
from unittest.mock import MagicMock

import pytest
import requests

from cat_api_suite.client.facade import ApiClient, null_sink
from cat_api_suite.config import ApiConfig


def build_response(status: int = 200, body=None, content_type: str = "application/json", reason: str = "OK", raw: bytes | None = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    if raw is not None:
        resp._content = raw
    elif content_type.startswith("application/json"):
        resp._content = json.dumps(body).encode("utf-8")
    else:
        resp._content = (body or "").encode("utf-8")
    resp.headers["Content-Type"] = content_type
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def config():
    return ApiConfig(base_url="https://api.example.test/v1", api_key="test-key", timeout=5.0)


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(config, session):
    return ApiClient(config=config, session=session, sink=null_sink)


@pytest.fixture
def make_response():
    return build_response
