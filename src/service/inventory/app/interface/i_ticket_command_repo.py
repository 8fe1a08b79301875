"""
Ticket Command Repository Interface - CQRS Write Side
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.service.inventory.domain.entity.ticket_entity import Ticket


class ITicketCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, ticket: Ticket) -> Ticket:
        """Insert a new ticket row and return the stored record."""
        pass

    @abstractmethod
    async def compare_and_swap(self, *, ticket: Ticket) -> Optional[Ticket]:
        """
        Replace the stored row with `ticket` only if its version still equals `ticket.version`.

        Returns:
            The stored record (version bumped by one), or None when another
            writer changed or removed the row first.
        """
        pass

    @abstractmethod
    async def delete(self, *, ticket_id: UUID) -> bool:
        """Delete by id. Returns False when nothing was deleted."""
        pass
