import pytest
from fastapi.testclient import TestClient

from app.core.security import verify_jwt
from app.main import app

FARMER = {"sub": "farmer-1", "role": "farmer", "email": "farmer@example.com"}
ADMIN = {"sub": "admin-1", "role": "admin", "email": "admin@example.com"}


@pytest.fixture
def client():
    app.dependency_overrides[verify_jwt] = lambda: FARMER
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client():
    app.dependency_overrides[verify_jwt] = lambda: ADMIN
    yield TestClient(app)
    app.dependency_overrides.clear()
