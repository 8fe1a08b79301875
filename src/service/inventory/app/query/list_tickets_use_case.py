from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.inventory.domain.entity.ticket_entity import Ticket
from src.service.inventory.domain.value_object.ticket_filter import TicketFilter


class ListTicketsUseCase:
    def __init__(self, ticket_query_repo: ITicketQueryRepo) -> None:
        self.ticket_query_repo = ticket_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(ticket_query_repo=ticket_query_repo)

    @Logger.io
    async def list_tickets(self, *, ticket_filter: TicketFilter) -> List[Ticket]:
        """Tickets matching every supplied criterion, earliest event first"""
        tickets = await self.ticket_query_repo.list_tickets(ticket_filter=ticket_filter)

        Logger.base.info(f'📋 [LIST] Found {len(tickets)} tickets for {ticket_filter}')
        return tickets
