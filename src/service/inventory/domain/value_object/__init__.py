"""Inventory Domain Value Objects"""

from src.service.inventory.domain.value_object.ticket_filter import TicketFilter

__all__ = ['TicketFilter']
