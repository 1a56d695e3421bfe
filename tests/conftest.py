import asyncio

import pytest
from fastapi.testclient import TestClient

from investor_shield_api.app.core.store import build_store
from investor_shield_api.app.main import create_app


API = "/api/v1"


def run(coro):
    """Drive an async service call to completion."""
    return asyncio.run(coro)


@pytest.fixture
def store():
    return build_store(seed=True)


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c


def register(client, email="asha@investors.in", password="secret123", name="Asha Verma"):
    response = client.post(
        f"{API}/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def auth(client):
    """Register a user and return (user, headers)."""
    body = register(client)
    return body["user"], {"Authorization": f"Bearer {body['token']}"}


@pytest.fixture
def headers(auth):
    return auth[1]
