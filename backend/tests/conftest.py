import os

import pytest
from fastapi.testclient import TestClient

# Rate limiting is exercised explicitly in test_rate_limit.py; keep it off otherwise.
os.environ["RATE_LIMIT_ENABLED"] = "false"

from gunghap.main import app  # noqa: E402


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c
