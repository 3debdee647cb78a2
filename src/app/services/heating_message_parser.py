"""Parser determinístico dos SMS do controlador de aquecimento.

Função pura: sem I/O, sem estado entre chamadas. Nunca levanta exceção;
linhas não reconhecidas são ignoradas (degradação silenciosa).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.constants.heating_sms import (
    FROST_FLAG_TOKEN,
    FROST_PROTECTION_MARKER,
    FROST_REPORT_VALUE_LINE,
    HEATING_ON_TOKEN,
    MAIN_UNIT_LINE,
    ROOM_LINE,
    ROOM_ZONES,
    UNKNOWN_TEMPERATURE_TOKEN,
    Zone,
    room_marker,
)
from app.domain.heating import ParsedMessage

if TYPE_CHECKING:
    import re


def parse_heating_message(raw_message: str) -> ParsedMessage:
    """Converte o texto bruto do SMS em estado normalizado por zona.

    O dialeto é escolhido por um único discriminador: qualquer linha com o
    marcador de proteção contra congelamento torna a mensagem inteira um
    relatório de congelamento.

    Args:
        raw_message: Texto do SMS exatamente como recebido.

    Returns:
        ParsedMessage com `text` intacto e os mapas por zona.
    """
    parsed = ParsedMessage(text=raw_message)
    lines = (raw_message or "").splitlines()

    if is_frost_protection_report(lines):
        _parse_frost_protection_report(lines, parsed)
    else:
        _parse_status_report(lines, parsed)

    return parsed


def is_frost_protection_report(lines: list[str]) -> bool:
    """True se alguma linha contém o marcador `Temp knt: PÅ`."""
    return any(FROST_PROTECTION_MARKER in line for line in lines)


def parse_temperature(token: str) -> int | None:
    """Converte `-?\\d+` em int; o token `--` vira None (nunca 0)."""
    if token == UNKNOWN_TEMPERATURE_TOKEN:
        return None
    return int(token)


def _parse_status_report(lines: list[str], parsed: ParsedMessage) -> None:
    for line in lines:
        match = MAIN_UNIT_LINE.search(line)
        if match:
            _apply_status_match(parsed, Zone.MAIN, match)
            continue

        match = ROOM_LINE.search(line)
        if match:
            _apply_status_match(parsed, Zone(match.group("room")), match)


def _apply_status_match(parsed: ParsedMessage, zone: Zone, match: re.Match[str]) -> None:
    parsed.is_heating_on[zone] = match.group("switch") == HEATING_ON_TOKEN
    parsed.temperatures[zone] = parse_temperature(match.group("temperature"))
    parsed.is_frost_protection_on[zone] = match.group("frost") == FROST_FLAG_TOKEN


def _parse_frost_protection_report(lines: list[str], parsed: ParsedMessage) -> None:
    # O cursor persiste entre linhas até aparecer outra sala
    cursor = Zone.MAIN

    for line in lines:
        # 1. Atualiza o cursor antes de casar valores na mesma linha
        cursor = _room_in_line(line) or cursor

        # 2. Valores vão para o cursor, não para o rótulo capturado
        match = FROST_REPORT_VALUE_LINE.search(line)
        if match:
            parsed.is_heating_on[cursor] = match.group("switch") == HEATING_ON_TOKEN
            parsed.temperatures[cursor] = parse_temperature(match.group("temperature"))
            continue

        # 3. Marcador de congelamento ativo
        if FROST_PROTECTION_MARKER in line:
            parsed.is_frost_protection_on[cursor] = True


def _room_in_line(line: str) -> Zone | None:
    for zone in ROOM_ZONES:
        if room_marker(zone) in line:
            return zone
    return None
