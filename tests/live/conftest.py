import os

import pytest

from cat_api_suite.client.facade import ApiClient
from cat_api_suite.config import ApiConfig


def pytest_collection_modifyitems(config, items):
    if os.getenv("CAT_API_LIVE"):
        return
    skip = pytest.mark.skip(reason="CAT_API_LIVE not set")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def api():
    return ApiClient(config=ApiConfig.from_env())
