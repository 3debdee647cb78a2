"""Testes do composition root (validação de startup e factories)."""

from __future__ import annotations

import logging

import pytest

from app import bootstrap
from app.bootstrap.dependencies import (
    create_datastore_client,
    create_datastore_session,
    create_heating_sms_use_case,
)
from app.infra.stores import MemoryDataStore
from config.logging import CorrelationIdFilter
from config.settings import (
    DataStoreSettings,
    get_base_settings,
    get_datastore_settings,
    get_server_settings,
    get_sms_settings,
)

_GETTERS = (get_base_settings, get_datastore_settings, get_server_settings, get_sms_settings)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "ENVIRONMENT",
        "DATASTORE_BACKEND",
        "PB_USERNAME",
        "PB_PASSWORD",
        "SMS_WEBHOOK_VARIANT",
        "SMS_ALLOWED_PHONE_NUMBER",
        "TLS_KEY_B64",
        "TLS_CERT_B64",
    ):
        monkeypatch.delenv(name, raising=False)
    for getter in _GETTERS:
        getter.cache_clear()
    yield
    for getter in _GETTERS:
        getter.cache_clear()


class TestInitializeApp:
    def test_logging_uses_base_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERVICE_NAME", "heating-sms-bridge-test")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        bootstrap.initialize_app()

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        filter_ = next(f for f in root.handlers[0].filters if isinstance(f, CorrelationIdFilter))
        record = logging.LogRecord("x", logging.INFO, "", 0, "msg", (), None)
        filter_.filter(record)
        assert record.service == "heating-sms-bridge-test"


class TestValidateRuntimeSettings:
    def test_development_only_warns(self) -> None:
        # Sem credenciais: erro registrado mas boot permitido
        bootstrap.validate_runtime_settings()

    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")

        with pytest.raises(RuntimeError, match="PB_USERNAME"):
            bootstrap.validate_runtime_settings()

    def test_hardened_without_tls_refuses_to_start(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATASTORE_BACKEND", "memory")
        monkeypatch.setenv("SMS_WEBHOOK_VARIANT", "hardened")
        monkeypatch.setenv("SMS_ALLOWED_PHONE_NUMBER", "+4791234567")

        with pytest.raises(RuntimeError, match="TLS_KEY_B64"):
            bootstrap.validate_runtime_settings()


class TestFactories:
    def test_memory_backend_is_seeded(self) -> None:
        client = create_datastore_client(DataStoreSettings(backend="memory"))

        assert isinstance(client, MemoryDataStore)
        assert client.get_record("heating_state", "sov1") is not None

    def test_pocketbase_backend(self) -> None:
        from api.connectors.pocketbase import PocketBaseHttpClient

        client = create_datastore_client(DataStoreSettings(backend="pocketbase"))

        assert isinstance(client, PocketBaseHttpClient)

    @pytest.mark.asyncio
    async def test_memory_session_authenticates_with_dev_credentials(self) -> None:
        settings = DataStoreSettings(backend="memory", max_retries=2, retry_delay_seconds=0.0)

        session = create_datastore_session(settings)

        assert session.policy.max_attempts == 2
        assert await session.ensure_authenticated() is True

    @pytest.mark.asyncio
    async def test_use_case_uses_configured_collections(self) -> None:
        settings = DataStoreSettings(
            backend="memory",
            collection_messages="sms_log",
            retry_delay_seconds=0.0,
        )
        session = create_datastore_session(settings)
        use_case = create_heating_sms_use_case(session, settings)

        from app.domain.heating import MessageRecord

        result = await use_case.execute(
            MessageRecord(message="Hovedenhet: AV 20C", phone_number="+47", received_at="now")
        )

        store = session.client
        assert store.get_record("sms_log", result.message_id) is not None
        assert store.get_record("heating_state", "main")["temperature"] == 20
