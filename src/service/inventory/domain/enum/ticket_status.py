"""
Ticket Status Enum

ACTIVE and SOLD_OUT are driven by the seat counter.
CANCELLED and COMPLETED are administrative and only change through update.
"""

from enum import StrEnum


class TicketStatus(StrEnum):
    ACTIVE = 'active'
    SOLD_OUT = 'sold-out'
    CANCELLED = 'cancelled'
    COMPLETED = 'completed'

    @property
    def is_administrative(self) -> bool:
        return self in (TicketStatus.CANCELLED, TicketStatus.COMPLETED)
