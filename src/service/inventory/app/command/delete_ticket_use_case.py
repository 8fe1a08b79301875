from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.inventory.domain.entity.ticket_entity import parse_ticket_id


class DeleteTicketUseCase:
    def __init__(self, ticket_command_repo: ITicketCommandRepo) -> None:
        self.ticket_command_repo = ticket_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_command_repo: ITicketCommandRepo = Depends(Provide[Container.ticket_command_repo]),
    ) -> Self:
        return cls(ticket_command_repo=ticket_command_repo)

    @Logger.io
    async def delete(self, *, ticket_id: str | UUID) -> None:
        parsed_id = parse_ticket_id(ticket_id)
        if not await self.ticket_command_repo.delete(ticket_id=parsed_id):
            raise NotFoundError('Ticket not found')

        Logger.base.info(f'🗑️ [DELETE] Ticket {parsed_id} deleted')
