"""
Conftest for pure unit tests - no external dependencies.

Override session-scoped fixtures to avoid database connections.
"""

from collections.abc import Generator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import attrs
import pytest

from src.service.inventory.domain.entity.ticket_entity import Ticket
from test.inventory_test_constants import DEFAULT_TICKET_FIELDS


@pytest.fixture(scope='session')
def client() -> Generator[MagicMock, None, None]:
    """Mock client for unit tests - no FastAPI app needed"""
    yield MagicMock()


@pytest.fixture
def make_ticket() -> Any:
    """Build a Ticket entity from the default fields, with overrides applied afterwards"""

    def _make(**overrides: Any) -> Ticket:
        return attrs.evolve(Ticket.create(fields=dict(DEFAULT_TICKET_FIELDS)), **overrides)

    return _make


class RepositoryMocks:
    """Query/command repository doubles that behave like a single stored row"""

    def __init__(self, ticket: Ticket | None) -> None:
        self.stored = ticket
        self.query_repo = AsyncMock()
        self.command_repo = AsyncMock()
        self.query_repo.get_by_id = AsyncMock(side_effect=self._get_by_id)
        self.command_repo.compare_and_swap = AsyncMock(side_effect=self._compare_and_swap)

    async def _get_by_id(self, *, ticket_id: Any) -> Ticket | None:
        return self.stored

    async def _compare_and_swap(self, *, ticket: Ticket) -> Ticket | None:
        if self.stored is None or self.stored.version != ticket.version:
            return None
        self.stored = attrs.evolve(ticket, version=ticket.version + 1)
        return self.stored


@pytest.fixture
def repository_mocks(make_ticket: Any) -> RepositoryMocks:
    return RepositoryMocks(make_ticket())
