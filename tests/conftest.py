"""Pytest configuration and shared fixtures for superhub tests."""

from uuid import UUID

import pytest

from superhub.auth import PersistentToken

TOKEN_ID = UUID("6f0a3c52-8f0e-4c4b-9d8e-2b7f1c9a4e11")
ACCESS_TOKEN = "c2VjcmV0LWFjY2Vzcy10b2tlbg=="


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents a developer's real SuperHub settings leaking into tests.
    """
    import os

    test_prefixes = ("TEST_", "API_", "SUPERHUB_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def token():
    return PersistentToken(TOKEN_ID, ACCESS_TOKEN)


@pytest.fixture
def resources_payload():
    return {"cpu": 200, "memory": 4096, "disk": 20480}


@pytest.fixture
def external_server_payload(resources_payload):
    return {
        "controlUrl": "https://panel.superhub.host/servers/1a2b3c4d",
        "name": "Survival",
        "identifier": "1a2b3c4d",
        "resourceLimits": resources_payload,
        "featureLimits": {"databases": 2, "backups": 3},
        "suspended": False,
        "nodeId": 3,
        "nestId": 1,
        "eggId": 5,
    }


@pytest.fixture
def server_payload():
    return {
        "id": 5,
        "pteroId": 42,
        "ownerId": 7,
        "state": 1,
        "cost": 350.0,
        "sale": 0.1,
        "freezeCost": None,
        "tariffId": None,
        "domain": "play.example.net",
        "tcpshieldRecord": None,
        "externalServer": None,
        "expiresAt": None,
        "frozenAt": None,
        "createdAt": "2023-03-01T10:00:00Z",
        "updatedAt": "2023-03-02T12:30:00.123456789+03:00",
    }


@pytest.fixture
def node_payload(resources_payload):
    return {
        "id": 3,
        "name": "Moscow #1",
        "hostname": "msk1.superhub.host",
        "components": {"cpu": "AMD Ryzen 9 5950X"},
        "limits": resources_payload,
        "load": 0.42,
        "location": {"country": "Russia", "city": "Moscow", "code": "MSK-1"},
        "prices": {
            "cpu": 10.0,
            "memory": 5.0,
            "disk": 0.5,
            "backups": 0.2,
            "freeDisk": 10,
            "databases": 1.0,
            "multiplier": 1.2,
            "migrationBonus": 0.15,
        },
        "hidden": False,
    }


@pytest.fixture
def user_payload():
    return {
        "id": 7,
        "email": "player@example.net",
        "name": "player",
        "balance": 120.5,
        "discord": {"id": None, "linkBonus": False},
        "vk": {"id": 123456, "linkBonus": True, "feedbackBonus": False},
        "referral": {"bonus": True, "code": "PLAYER7", "userId": None},
        "hasMfaEnabled": True,
        "hadTestServer": False,
        "createdAt": "2022-11-20T08:15:00Z",
        "updatedAt": None,
    }


@pytest.fixture
def payment_payload():
    return {
        "id": "9f86d081884c7d659a2feaa0c55ad015",
        "userId": 7,
        "amount": {"sum": -35.0, "currency": "RUB"},
        "description": None,
        "source": {"type": "SERVER_SERVICE", "id": "5"},
        "mode": "PRODUCTION",
        "completed": True,
        "createdAt": "2023-03-03T00:00:00Z",
        "updatedAt": "2023-03-03T00:00:01Z",
    }
