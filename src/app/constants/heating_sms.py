"""Gramática fixa dos SMS do controlador de aquecimento.

O controlador só produz dois dialetos, sempre com os mesmos tokens:

Relatório normal (uma linha por zona):
    Hovedenhet: PÅ 21C T
    "Stua1": AV, --C

Relatório de proteção contra congelamento (cursor de zona por linha):
    Temp knt: PÅ
    "Stua2"
    Hovedenhet: PÅ 18C
"""

from __future__ import annotations

import re
from enum import StrEnum


class Zone(StrEnum):
    """Zonas conhecidas do controlador (ordem fixa de escrita)."""

    MAIN = "main"
    STUA1 = "Stua1"
    STUA2 = "Stua2"
    SOV1 = "Sov1"

    @property
    def storage_key(self) -> str:
        """Id do registro em `heating_state` (sempre minúsculo)."""
        return self.value.lower()


ROOM_ZONES: tuple[Zone, ...] = (Zone.STUA1, Zone.STUA2, Zone.SOV1)

# Tokens
HEATING_ON_TOKEN = "PÅ"
HEATING_OFF_TOKEN = "AV"
UNKNOWN_TEMPERATURE_TOKEN = "--"
FROST_FLAG_TOKEN = "T"
MAIN_UNIT_LABEL = "Hovedenhet"
FROST_PROTECTION_MARKER = "Temp knt: PÅ"

_SWITCH = f"(?P<switch>{HEATING_ON_TOKEN}|{HEATING_OFF_TOKEN})"
_TEMPERATURE = rf"(?P<temperature>-?\d+|{re.escape(UNKNOWN_TEMPERATURE_TOKEN)})C"
_FROST_FLAG = rf"\s*(?P<frost>{FROST_FLAG_TOKEN}?)"
_ROOM_NAMES = "|".join(zone.value for zone in ROOM_ZONES)

# Relatório normal
MAIN_UNIT_LINE = re.compile(rf"{MAIN_UNIT_LABEL}: {_SWITCH}\s+{_TEMPERATURE}{_FROST_FLAG}")
ROOM_LINE = re.compile(rf'"(?P<room>{_ROOM_NAMES})": {_SWITCH}, {_TEMPERATURE}{_FROST_FLAG}')

# Relatório de proteção contra congelamento
FROST_REPORT_VALUE_LINE = re.compile(
    rf'(?P<label>{MAIN_UNIT_LABEL}|"[^"]+"):\s*{_SWITCH}\s+{_TEMPERATURE}'
)


def room_marker(zone: Zone) -> str:
    """Token que move o cursor para a sala (nome entre aspas)."""
    return f'"{zone.value}"'
