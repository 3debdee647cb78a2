"""Modelos de domínio do aquecimento.

ParsedMessage é transitório (saída do parser). HeatingState e MessageRecord
são os formatos persistidos nas collections `heating_state` e `messages`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from app.constants.heating_sms import Zone


@dataclass(slots=True)
class ParsedMessage:
    """Estado por zona extraído de um SMS do controlador.

    Uma zona é chave de `temperatures` somente se alguma linha foi
    reconhecida para ela. `None` em `temperatures` significa temperatura
    desconhecida (`--C`), nunca zona ausente.
    """

    text: str
    temperatures: dict[Zone, int | None] = field(default_factory=dict)
    is_heating_on: dict[Zone, bool] = field(default_factory=dict)
    is_frost_protection_on: dict[Zone, bool] = field(default_factory=dict)

    @property
    def zones(self) -> list[Zone]:
        """Zonas reconhecidas, na ordem fixa de escrita."""
        return [zone for zone in Zone if zone in self.temperatures]


@dataclass(frozen=True, slots=True)
class HeatingState:
    """Último estado conhecido de uma zona (registro em `heating_state`)."""

    zone: Zone
    temperature: int | None
    is_heating_on: bool
    is_frost_protection_on: bool
    last_command: str
    last_command_success: bool = True

    @property
    def record_id(self) -> str:
        return self.zone.storage_key

    @classmethod
    def from_parsed(cls, parsed: ParsedMessage, zone: Zone) -> HeatingState:
        """Monta o estado da zona a partir da mensagem parseada.

        Proteção contra congelamento não marcada vale False.
        """
        return cls(
            zone=zone,
            temperature=parsed.temperatures.get(zone),
            is_heating_on=parsed.is_heating_on.get(zone, False),
            is_frost_protection_on=parsed.is_frost_protection_on.get(zone, False),
            last_command=parsed.text,
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "temperature": self.temperature,
            "isHeatingOn": self.is_heating_on,
            "isFrostProtectionOn": self.is_frost_protection_on,
            "lastCommand": self.last_command,
            "lastCommandSuccess": self.last_command_success,
        }


@dataclass(frozen=True, slots=True)
class MessageRecord:
    """SMS bruto recebido (registro imutável em `messages`)."""

    message: str
    phone_number: str
    received_at: str

    def to_record(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "phoneNumber": self.phone_number,
            "receivedAt": self.received_at,
        }
