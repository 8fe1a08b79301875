"""
Ticket Query Repository Implementation - CQRS Read Side
"""

from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.inventory.domain.entity.ticket_entity import Ticket
from src.service.inventory.domain.value_object.ticket_filter import TicketFilter
from src.service.inventory.driven_adapter.model.ticket_model import TicketModel
from src.service.inventory.driven_adapter.repo.ticket_model_mapper import model_to_entity


class TicketQueryRepoImpl(ITicketQueryRepo):
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
    async def get_by_id(self, *, ticket_id: UUID) -> Optional[Ticket]:
        async with self._get_session() as session:
            result = await session.execute(select(TicketModel).where(TicketModel.id == ticket_id))
            model = result.scalar_one_or_none()
            return model_to_entity(model) if model else None

    @Logger.io
    async def list_tickets(self, *, ticket_filter: TicketFilter) -> List[Ticket]:
        stmt = select(TicketModel)
        if ticket_filter.event_type is not None:
            stmt = stmt.where(TicketModel.event_type == ticket_filter.event_type.value)
        if ticket_filter.status is not None:
            stmt = stmt.where(TicketModel.status == ticket_filter.status.value)
        if ticket_filter.min_price is not None:
            stmt = stmt.where(TicketModel.price >= ticket_filter.min_price)
        if ticket_filter.max_price is not None:
            stmt = stmt.where(TicketModel.price <= ticket_filter.max_price)
        if ticket_filter.event_date is not None:
            stmt = stmt.where(TicketModel.event_date == ticket_filter.event_date)
        stmt = stmt.order_by(TicketModel.event_date.asc(), TicketModel.created_at.asc())

        async with self._get_session() as session:
            result = await session.execute(stmt)
            return [model_to_entity(model) for model in result.scalars().all()]

    @Logger.io
    async def count(self) -> int:
        async with self._get_session() as session:
            result = await session.execute(select(func.count()).select_from(TicketModel))
            return result.scalar_one()
