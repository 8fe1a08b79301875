from typing import Any, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.command.atomic_seat_ledger_executor import (
    AtomicSeatLedgerExecutor,
)
from src.service.inventory.domain.entity.ticket_entity import Ticket, parse_ticket_id


class UpdateTicketUseCase:
    def __init__(self, seat_ledger_executor: AtomicSeatLedgerExecutor) -> None:
        self.seat_ledger_executor = seat_ledger_executor

    @classmethod
    @inject
    def depends(
        cls,
        seat_ledger_executor: AtomicSeatLedgerExecutor = Depends(
            Provide[Container.seat_ledger_executor]
        ),
    ) -> Self:
        return cls(seat_ledger_executor=seat_ledger_executor)

    @Logger.io
    async def update(self, *, ticket_id: str | UUID, changes: dict[str, Any]) -> Ticket:
        """Overwrite only the supplied fields (same compare-and-swap path as the seat ledger)"""
        ticket = await self.seat_ledger_executor.execute(
            ticket_id=parse_ticket_id(ticket_id),
            mutate=lambda current: current.apply_changes(changes=changes),
            operation='UPDATE',
        )

        Logger.base.info(f'✅ [UPDATE] Ticket {ticket.id} updated: {sorted(changes)}')
        return ticket
