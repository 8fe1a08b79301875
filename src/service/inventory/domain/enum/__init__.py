"""Inventory Domain Enums"""

from src.service.inventory.domain.enum.event_type import EventType
from src.service.inventory.domain.enum.ticket_status import TicketStatus

__all__ = ['EventType', 'TicketStatus']
