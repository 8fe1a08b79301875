"""
Release Seats Use Case - atomic increment of a ticket's available seats
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


class ReleaseSeatsUseCase:
    """
    Release Seats Use Case

    With clamp_to_total disabled (default) the counter may exceed totalSeats,
    matching how cancelled bookings were always returned to inventory.
    """

    def __init__(
        self,
        seat_ledger_executor: AtomicSeatLedgerExecutor,
        *,
        clamp_to_total: bool = False,
        guard_inactive: bool = True,
    ) -> None:
        self.seat_ledger_executor = seat_ledger_executor
        self.clamp_to_total = clamp_to_total
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
            clamp_to_total=config_service.SEAT_RELEASE_CLAMP_TO_TOTAL,
            guard_inactive=config_service.SEAT_LEDGER_GUARD_INACTIVE,
        )

    @Logger.io
    async def release(self, *, ticket_id: str | UUID, quantity: Any) -> Ticket:
        quantity = validate_quantity(quantity)
        parsed_id = parse_ticket_id(ticket_id)
        Logger.base.info(f'🔓 [RELEASE] Releasing {quantity} seat(s) on ticket {parsed_id}')

        ticket = await self.seat_ledger_executor.execute(
            ticket_id=parsed_id,
            mutate=lambda current: current.release(
                quantity=quantity,
                clamp_to_total=self.clamp_to_total,
                guard_inactive=self.guard_inactive,
            ),
            operation='RELEASE',
        )

        if ticket.available_seats > ticket.total_seats:
            Logger.base.warning(
                f'⚠️ [RELEASE] Ticket {parsed_id} now has {ticket.available_seats} available '
                f'seats for {ticket.total_seats} total'
            )
        Logger.base.info(
            f'✅ [RELEASE] Ticket {parsed_id}: {ticket.available_seats}/{ticket.total_seats} '
            f'seats available ({ticket.status})'
        )
        return ticket
