from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError

from src.platform.config.di import Container
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.inventory.domain.entity.ticket_entity import Ticket


class CreateTicketUseCase:
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
    async def create(self, *, fields: dict[str, Any]) -> Ticket:
        """
        Validate and persist a new listing.

        Raises:
            ValidationError: missing/invalid field or seat invariant violated (400)
            StorageError: the insert itself failed (500)
        """
        ticket = Ticket.create(fields=fields)

        try:
            saved = await self.ticket_command_repo.create(ticket=ticket)
        except SQLAlchemyError as e:
            raise StorageError() from e

        Logger.base.info(f'✅ [CREATE] Ticket {saved.id} created: {saved.event_name}')
        return saved
