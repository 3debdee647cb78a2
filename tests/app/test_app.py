"""Teste de ponta a ponta da aplicação ASGI com data store em memória."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app import bootstrap
from config.settings import (
    get_base_settings,
    get_datastore_settings,
    get_server_settings,
    get_sms_settings,
)

_CACHED = (
    get_base_settings,
    get_datastore_settings,
    get_server_settings,
    get_sms_settings,
    bootstrap.get_datastore_session,
    bootstrap.get_heating_sms_use_case,
)


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("DATASTORE_BACKEND", "memory")
    monkeypatch.setenv("SMS_WEBHOOK_VARIANT", "basic")
    for cached in _CACHED:
        cached.cache_clear()

    from app.app import app

    with TestClient(app) as test_client:
        # Garante que a autenticação disparada no startup terminou
        test_client.portal.call(app.state.datastore_session.ensure_authenticated)
        yield test_client

    for cached in _CACHED:
        cached.cache_clear()


def test_sms_webhook_updates_zone_state(client: TestClient) -> None:
    response = client.post(
        "/webhook/sms",
        json={
            "event": "sms:received",
            "payload": {
                "message": 'Temp knt: PÅ\n"Stua2"\nHovedenhet: PÅ 18C',
                "phoneNumber": "+4791234567",
                "receivedAt": "2026-10-18T10:30:00.000+02:00",
            },
        },
    )

    assert response.status_code == 200
    assert response.json()["success"] is True

    store = bootstrap.get_datastore_session().client
    stua2 = store.get_record("heating_state", "stua2")
    assert stua2["temperature"] == 18
    assert stua2["isHeatingOn"] is True
    assert store.get_record("heating_state", "main")["lastCommand"] == ""


def test_wrong_event_is_rejected(client: TestClient) -> None:
    response = client.post("/webhook/sms", json={"event": "other", "payload": {}})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid event type"}


def test_health_and_readiness(client: TestClient) -> None:
    assert client.get("/health").json()["status"] == "healthy"

    ready = client.get("/ready")
    assert ready.status_code == 200
    assert ready.json()["checks"]["datastore"]["status"] == "degraded"
