"""
Ticket Command Repository Implementation - CQRS Write Side

Every write is a single statement inside its own transaction.
Updates are conditional on the version the caller observed (compare-and-swap).
"""

from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, Optional
from uuid import UUID

import attrs
from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.inventory.domain.entity.ticket_entity import Ticket
from src.service.inventory.driven_adapter.model.ticket_model import TicketModel
from src.service.inventory.driven_adapter.repo.ticket_model_mapper import (
    entity_to_row,
    model_to_entity,
)


class TicketCommandRepoImpl(ITicketCommandRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @Logger.io
    async def create(self, *, ticket: Ticket) -> Ticket:
        async with self._get_session() as session:
            model = TicketModel(
                id=ticket.id,
                created_at=ticket.created_at,
                version=ticket.version,
                **entity_to_row(ticket),
            )
            session.add(model)
            await session.commit()
            await session.refresh(model)
            return model_to_entity(model)

    @Logger.io
    async def compare_and_swap(self, *, ticket: Ticket) -> Optional[Ticket]:
        async with self._get_session() as session:
            result = await session.execute(
                update(TicketModel)
                .where(TicketModel.id == ticket.id, TicketModel.version == ticket.version)
                .values(**entity_to_row(ticket), version=TicketModel.version + 1)
                .execution_options(synchronize_session=False)
            )
            await session.commit()

            if result.rowcount != 1:  # pyrefly: ignore[missing-attribute]
                Logger.base.debug(
                    f'⚔️ [CAS] Version {ticket.version} of ticket {ticket.id} is stale'
                )
                return None
            return attrs.evolve(ticket, version=ticket.version + 1)

    @Logger.io
    async def delete(self, *, ticket_id: UUID) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                delete(TicketModel)
                .where(TicketModel.id == ticket_id)
                .execution_options(synchronize_session=False)
            )
            await session.commit()
            return result.rowcount > 0  # pyrefly: ignore[missing-attribute]
