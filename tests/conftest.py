import random

import pytest
from fastapi.testclient import TestClient

from core.registry import registry
from main import app


@pytest.fixture(autouse=True)
def clean_registry():
    registry.clear()
    yield
    registry.clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
