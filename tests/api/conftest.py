"""
Pytest configuration and fixtures for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from shunt.api.main import app


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client"""
    return TestClient(app)
