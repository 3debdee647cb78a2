"""Use case: persistir SMS do controlador e atualizar o estado por zona.

Fluxo (sequencial, por requisição):
1. Cria o MessageRecord em `messages` (sempre, mesmo sem parse útil)
2. Parseia o texto
3. Atualiza `heating_state/<zona>` para cada zona reconhecida, em ordem fixa

Sem rollback: se uma atualização de zona falhar após o registro da mensagem,
o erro propaga e os registros já escritos permanecem.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from app.domain.heating import HeatingState, MessageRecord, ParsedMessage
from app.services.heating_message_parser import parse_heating_message

if TYPE_CHECKING:
    from app.constants.heating_sms import Zone
    from app.sessions.datastore_session import DataStoreSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HeatingSmsResult:
    """Resultado do processamento de um SMS."""

    message_id: str
    parsed: ParsedMessage
    zones_updated: list[Zone] = field(default_factory=list)


class ProcessHeatingSmsUseCase:
    """Orquestra persistência da mensagem, parse e atualização das zonas."""

    def __init__(
        self,
        session: DataStoreSession,
        messages_collection: str = "messages",
        heating_state_collection: str = "heating_state",
    ) -> None:
        self._session = session
        self._messages_collection = messages_collection
        self._heating_state_collection = heating_state_collection

    async def execute(self, inbound: MessageRecord) -> HeatingSmsResult:
        """Executa o fluxo completo.

        Raises:
            Exception: Falha de persistência após esgotar retries.
        """
        created = await self._session.create_record(
            self._messages_collection,
            inbound.to_record(),
        )
        message_id = str(created.get("id", ""))

        parsed = parse_heating_message(inbound.message)
        logger.info(
            "heating_sms_parsed",
            extra={
                "message_id": message_id,
                "zones": [str(zone) for zone in parsed.zones],
                "line_count": len(inbound.message.splitlines()),
            },
        )

        zones_updated: list[Zone] = []
        for zone in parsed.zones:
            state = HeatingState.from_parsed(parsed, zone)
            await self._session.update_record(
                self._heating_state_collection,
                state.record_id,
                state.to_record(),
            )
            zones_updated.append(zone)
            logger.info(
                "zone_state_updated",
                extra={
                    "zone": state.record_id,
                    "temperature": state.temperature,
                    "is_heating_on": state.is_heating_on,
                    "is_frost_protection_on": state.is_frost_protection_on,
                },
            )

        return HeatingSmsResult(
            message_id=message_id,
            parsed=parsed,
            zones_updated=zones_updated,
        )
