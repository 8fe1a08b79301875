"""
Reserve Seats Use Case - atomic decrement of a ticket's available seats
"""

from typing import Any, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.command.atomic_seat_ledger_executor import (
    AtomicSeatLedgerExecutor,
)
from src.service.inventory.domain.entity.ticket_entity import Ticket, parse_ticket_id
from src.service.inventory.domain.seat_ledger_domain import validate_quantity


class ReserveSeatsUseCase:
    """
    Reserve Seats Use Case

    Flow:
    1. Validate quantity (before touching storage)
    2. Compare-and-swap loop via the executor: decrement seats, derive status
    3. Return the stored ticket

    Never oversells: the decrement is only committed if the row is unchanged
    since it was read, otherwise the check runs again on fresh data.
    """

    def __init__(
        self, seat_ledger_executor: AtomicSeatLedgerExecutor, *, guard_inactive: bool = True
    ) -> None:
        self.seat_ledger_executor = seat_ledger_executor
        self.guard_inactive = guard_inactive

    @classmethod
    @inject
    def depends(
        cls,
        seat_ledger_executor: AtomicSeatLedgerExecutor = Depends(
            Provide[Container.seat_ledger_executor]
        ),
        config_service: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            seat_ledger_executor=seat_ledger_executor,
            guard_inactive=config_service.SEAT_LEDGER_GUARD_INACTIVE,
        )

    @Logger.io
    async def reserve(self, *, ticket_id: str | UUID, quantity: Any) -> Ticket:
        quantity = validate_quantity(quantity)
        parsed_id = parse_ticket_id(ticket_id)
        Logger.base.info(f'🎯 [RESERVE] Reserving {quantity} seat(s) on ticket {parsed_id}')

        ticket = await self.seat_ledger_executor.execute(
            ticket_id=parsed_id,
            mutate=lambda current: current.reserve(
                quantity=quantity, guard_inactive=self.guard_inactive
            ),
            operation='RESERVE',
        )

        Logger.base.info(
            f'✅ [RESERVE] Ticket {parsed_id}: {ticket.available_seats}/{ticket.total_seats} '
            f'seats left ({ticket.status})'
        )
        return ticket
