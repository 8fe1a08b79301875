import datetime as dt
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

import attrs
from uuid_utils.compat import uuid7

from src.platform.exception.exceptions import InsufficientSeatsError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.inventory.domain.enum.event_type import EventType
from src.service.inventory.domain.enum.ticket_status import TicketStatus
from src.service.inventory.domain.seat_ledger_domain import (
    check_seat_capacity,
    derive_status,
    ensure_tradable,
    validate_quantity,
)
from src.service.inventory.domain.ticket_validator import (
    SEAT_FIELDS,
    check_seat_invariant,
    validate_ticket_fields,
)


@attrs.define
class Ticket:
    id: UUID
    event_name: str
    event_type: EventType
    venue: str
    event_date: dt.date
    time: str
    price: Decimal
    total_seats: int
    available_seats: int
    currency: str = 'USD'
    description: Optional[str] = None
    image_url: Optional[str] = None
    status: TicketStatus = TicketStatus.ACTIVE
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
    version: int = 0

    @classmethod
    @Logger.io
    def create(cls, *, fields: dict[str, Any]) -> 'Ticket':
        """
        Build a new listing from raw fields.

        availableSeats defaults to totalSeats when not supplied.
        """
        validated = validate_ticket_fields(fields, partial=False)
        validated.setdefault('available_seats', validated['total_seats'])
        check_seat_invariant(
            total_seats=validated['total_seats'],
            available_seats=validated['available_seats'],
        )

        now = dt.datetime.now(dt.timezone.utc)
        return cls(
            id=uuid7(),
            **validated,
            created_at=now,
            updated_at=now,
        )

    @Logger.io
    def apply_changes(self, *, changes: dict[str, Any]) -> 'Ticket':
        """Partial overwrite; the merged record must still satisfy the seat invariant"""
        validated = validate_ticket_fields(changes, partial=True)
        updated = attrs.evolve(self, **validated, updated_at=dt.datetime.now(dt.timezone.utc))
        if SEAT_FIELDS & validated.keys():
            check_seat_invariant(
                total_seats=updated.total_seats,
                available_seats=updated.available_seats,
            )
        return updated

    @Logger.io
    def reserve(self, *, quantity: Any, guard_inactive: bool = True) -> 'Ticket':
        quantity = validate_quantity(quantity)
        if guard_inactive:
            ensure_tradable(self.status)
        if quantity > self.available_seats:
            raise InsufficientSeatsError()

        available_seats = self.available_seats - quantity
        return attrs.evolve(
            self,
            available_seats=available_seats,
            status=derive_status(self.status, available_seats),
            updated_at=dt.datetime.now(dt.timezone.utc),
        )

    @Logger.io
    def release(
        self, *, quantity: Any, clamp_to_total: bool = False, guard_inactive: bool = True
    ) -> 'Ticket':
        quantity = validate_quantity(quantity)
        if guard_inactive:
            ensure_tradable(self.status)

        available_seats = self.available_seats + quantity
        if clamp_to_total:
            available_seats = min(available_seats, self.total_seats)
        check_seat_capacity(available_seats)
        return attrs.evolve(
            self,
            available_seats=available_seats,
            status=derive_status(self.status, available_seats),
            updated_at=dt.datetime.now(dt.timezone.utc),
        )


def parse_ticket_id(ticket_id: str | UUID) -> UUID:
    """Malformed ids are indistinguishable from unknown ones"""
    if isinstance(ticket_id, UUID):
        return ticket_id
    try:
        return UUID(ticket_id)
    except (TypeError, ValueError):
        raise NotFoundError('Ticket not found')
