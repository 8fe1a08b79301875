"""
Seat Ledger Domain

Pure seat counter rules shared by reserve and release.
Nothing here touches the database, the caller persists the outcome.
"""

from typing import Any

from src.platform.exception.exceptions import TicketNotTradableError, ValidationError
from src.service.inventory.domain.enum.ticket_status import TicketStatus


# Largest value a 32-bit Integer seat column holds
MAX_SEAT_COUNT = 2**31 - 1


def validate_quantity(quantity: Any) -> int:
    """Quantity must be a positive integer (bools are rejected even though they are ints)"""
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError('quantity must be a positive integer')
    if quantity <= 0:
        raise ValidationError('quantity must be a positive integer')
    if quantity > MAX_SEAT_COUNT:
        raise ValidationError(f'quantity cannot exceed {MAX_SEAT_COUNT}')
    return quantity


def check_seat_capacity(available_seats: int) -> None:
    if available_seats > MAX_SEAT_COUNT:
        raise ValidationError(f'available_seats cannot exceed {MAX_SEAT_COUNT}')


def derive_status(old_status: TicketStatus, available_seats: int) -> TicketStatus:
    """
    Status after a seat counter change.

    active + no seats left  -> sold-out
    sold-out + seats again  -> active
    anything else keeps its status (cancelled/completed are never touched here)
    """
    if old_status == TicketStatus.ACTIVE and available_seats == 0:
        return TicketStatus.SOLD_OUT
    if old_status == TicketStatus.SOLD_OUT and available_seats > 0:
        return TicketStatus.ACTIVE
    return old_status


def ensure_tradable(status: TicketStatus) -> None:
    if status.is_administrative:
        raise TicketNotTradableError(f'Ticket is {status}, seats cannot be changed')
