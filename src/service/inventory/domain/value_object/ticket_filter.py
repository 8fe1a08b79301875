import datetime as dt
from decimal import Decimal
from typing import Optional

import attrs

from src.service.inventory.domain.enum.event_type import EventType
from src.service.inventory.domain.enum.ticket_status import TicketStatus


@attrs.define(frozen=True)
class TicketFilter:
    """List criteria; every field is optional and an empty filter matches everything"""

    event_type: Optional[EventType] = None
    status: Optional[TicketStatus] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    event_date: Optional[dt.date] = None
