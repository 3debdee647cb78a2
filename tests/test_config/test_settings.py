"""Testes das settings carregadas de variáveis de ambiente."""

from __future__ import annotations

import base64

import pytest

from config.settings import (
    DEFAULT_POCKETBASE_URL,
    DEFAULT_PORT,
    SMS_RECEIVED_EVENT,
    DataStoreSettings,
    ServerSettings,
    SmsWebhookSettings,
    get_base_settings,
    get_datastore_settings,
    get_server_settings,
    get_sms_settings,
)

_ENV_VARS = (
    "ENVIRONMENT",
    "LOG_LEVEL",
    "PORT",
    "HOST",
    "TLS_KEY_B64",
    "TLS_CERT_B64",
    "POCKETBASE_URL",
    "PB_USERNAME",
    "PB_PASSWORD",
    "DATASTORE_BACKEND",
    "DATASTORE_MAX_RETRIES",
    "DATASTORE_RETRY_DELAY_SECONDS",
    "SMS_WEBHOOK_VARIANT",
    "SMS_EVENT_TYPE",
    "SMS_ALLOWED_PHONE_NUMBER",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    for getter in (get_base_settings, get_datastore_settings, get_server_settings, get_sms_settings):
        getter.cache_clear()
    yield
    for getter in (get_base_settings, get_datastore_settings, get_server_settings, get_sms_settings):
        getter.cache_clear()


class TestDefaults:
    def test_defaults(self) -> None:
        datastore = get_datastore_settings()
        server = get_server_settings()
        sms = get_sms_settings()

        assert get_base_settings().environment == "development"
        assert datastore.base_url == DEFAULT_POCKETBASE_URL == "http://pocketbase:8095"
        assert datastore.backend == "pocketbase"
        assert datastore.max_retries == 3
        assert datastore.retry_delay_seconds == 5.0
        assert server.port == DEFAULT_PORT == 3038
        assert sms.variant == "basic"
        assert sms.event_type == SMS_RECEIVED_EVENT == "sms:received"

    def test_pocketbase_requires_credentials(self) -> None:
        errors = get_datastore_settings().validate()
        assert "PB_USERNAME não configurado" in errors
        assert "PB_PASSWORD não configurado" in errors

    def test_memory_backend_needs_no_credentials(self) -> None:
        assert DataStoreSettings(backend="memory").validate() == []


class TestFromEnv:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("PORT", "8443")
        monkeypatch.setenv("PB_USERNAME", "svc@example.com")
        monkeypatch.setenv("PB_PASSWORD", "secret")
        monkeypatch.setenv("SMS_WEBHOOK_VARIANT", "HARDENED")
        monkeypatch.setenv("SMS_ALLOWED_PHONE_NUMBER", " +4791234567 ")

        assert get_base_settings().environment == "production"
        assert get_server_settings().port == 8443
        assert get_datastore_settings().validate() == []
        sms = get_sms_settings()
        assert sms.is_hardened is True
        assert sms.allowed_phone_number == "+4791234567"

    def test_unknown_variant_falls_back_to_basic(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SMS_WEBHOOK_VARIANT", "strict")
        assert get_sms_settings().variant == "basic"


class TestValidation:
    def test_hardened_requires_allowed_number(self) -> None:
        errors = SmsWebhookSettings(variant="hardened").validate()
        assert errors == ["SMS_ALLOWED_PHONE_NUMBER obrigatório na variante hardened"]

    def test_tls_optional_unless_required(self) -> None:
        assert ServerSettings().validate() == []
        errors = ServerSettings().validate(require_tls=True)
        assert "TLS_KEY_B64 não configurado" in errors
        assert "TLS_CERT_B64 não configurado" in errors

    def test_tls_rejects_invalid_base64(self) -> None:
        settings = ServerSettings(
            tls_key_b64="not base64!",
            tls_cert_b64=base64.b64encode(b"cert").decode(),
        )
        assert settings.validate(require_tls=True) == ["TLS_KEY_B64 não é base64 válido"]

    def test_invalid_port(self) -> None:
        assert ServerSettings(port=0).validate() == ["PORT inválida: 0"]
