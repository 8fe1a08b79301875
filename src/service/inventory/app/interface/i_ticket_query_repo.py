"""
Ticket Query Repository Interface - CQRS Read Side
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.inventory.domain.entity.ticket_entity import Ticket
from src.service.inventory.domain.value_object.ticket_filter import TicketFilter


class ITicketQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, ticket_id: UUID) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def list_tickets(self, *, ticket_filter: TicketFilter) -> List[Ticket]:
        """Tickets matching the filter, ordered by event date ascending."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
