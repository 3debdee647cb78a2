"""Testes de extração/validação do envelope do gateway SMS."""

from __future__ import annotations

import pytest

from api.normalizers.sms import extract_sms_payload, normalize_inbound_sms, parse_webhook_body
from api.validators.sms import (
    InvalidEventTypeError,
    InvalidJsonError,
    InvalidPayloadError,
    SenderNotAllowedError,
    validate_event_type,
    validate_sender,
)


class TestParseWebhookBody:
    def test_parses_object(self) -> None:
        assert parse_webhook_body(b'{"event": "sms:received"}') == {"event": "sms:received"}

    @pytest.mark.parametrize("raw", [b"{", b"[1, 2]", b"\xff\xfe"])
    def test_rejects_invalid_body(self, raw: bytes) -> None:
        with pytest.raises(InvalidJsonError):
            parse_webhook_body(raw)


class TestExtractPayload:
    def test_extracts_aliases_and_ignores_extra_fields(self) -> None:
        payload = extract_sms_payload(
            {
                "payload": {
                    "message": '"Stua1": AV, --C',
                    "phoneNumber": "+4791234567",
                    "receivedAt": "2026-10-18T10:30:00.000+02:00",
                    "simNumber": 1,
                }
            }
        )

        record = normalize_inbound_sms(payload)

        assert record.message == '"Stua1": AV, --C'
        assert record.phone_number == "+4791234567"
        assert record.to_record() == {
            "message": '"Stua1": AV, --C',
            "phoneNumber": "+4791234567",
            "receivedAt": "2026-10-18T10:30:00.000+02:00",
        }

    def test_missing_payload(self) -> None:
        with pytest.raises(InvalidPayloadError, match="payload_missing"):
            extract_sms_payload({"event": "sms:received"})

    def test_missing_fields_are_listed(self) -> None:
        with pytest.raises(InvalidPayloadError, match="phoneNumber,receivedAt"):
            extract_sms_payload({"payload": {"message": "x"}})


class TestValidators:
    def test_event_type(self) -> None:
        validate_event_type({"event": "sms:received"}, "sms:received")
        with pytest.raises(InvalidEventTypeError):
            validate_event_type({"event": "sms:sent"}, "sms:received")
        with pytest.raises(InvalidEventTypeError):
            validate_event_type({}, "sms:received")

    def test_sender_exact_match(self) -> None:
        validate_sender(" +4791234567 ", "+4791234567")
        with pytest.raises(SenderNotAllowedError):
            validate_sender("+4791234568", "+4791234567")

    def test_empty_allow_list_rejects_everyone(self) -> None:
        with pytest.raises(SenderNotAllowedError):
            validate_sender("+4791234567", "")
