"""
Seat ledger concurrency tests against a real SQLite database

Many reservations race on one ticket; the count of successes must match the
seats on hand exactly and the stored counter must never go negative.
"""

import asyncio
from collections.abc import AsyncIterator
from typing import Any

import pytest

from src.platform.database.orm_db_setting import Database, dispose_engines
from src.platform.exception.exceptions import InsufficientSeatsError
from src.platform.state.ticket_lock_table import TicketLockTable
from src.service.inventory.app.command.atomic_seat_ledger_executor import (
    AtomicSeatLedgerExecutor,
)
from src.service.inventory.app.command.release_seats_use_case import ReleaseSeatsUseCase
from src.service.inventory.app.command.reserve_seats_use_case import ReserveSeatsUseCase
from src.service.inventory.domain.entity.ticket_entity import Ticket
from src.service.inventory.domain.enum.ticket_status import TicketStatus
from src.service.inventory.driven_adapter.repo.ticket_command_repo_impl import (
    TicketCommandRepoImpl,
)
from src.service.inventory.driven_adapter.repo.ticket_query_repo_impl import TicketQueryRepoImpl
from test.inventory_test_constants import DEFAULT_TICKET_FIELDS


@pytest.fixture
async def repos() -> AsyncIterator[tuple[TicketQueryRepoImpl, TicketCommandRepoImpl]]:
    database = Database()
    yield (
        TicketQueryRepoImpl(session_factory=database.session),
        TicketCommandRepoImpl(session_factory=database.session),
    )
    await dispose_engines()


async def _stored_ticket(
    repos: tuple[TicketQueryRepoImpl, TicketCommandRepoImpl], **overrides: Any
) -> Ticket:
    _, command_repo = repos
    return await command_repo.create(
        ticket=Ticket.create(fields=DEFAULT_TICKET_FIELDS | overrides)
    )


def _executor(
    repos: tuple[TicketQueryRepoImpl, TicketCommandRepoImpl],
    *,
    lock_table: TicketLockTable | None = None,
    max_retries: int = 10,
) -> AtomicSeatLedgerExecutor:
    query_repo, command_repo = repos
    return AtomicSeatLedgerExecutor(
        ticket_query_repo=query_repo,
        ticket_command_repo=command_repo,
        lock_table=lock_table or TicketLockTable(),
        max_retries=max_retries,
    )


@pytest.mark.parametrize(
    ('total_seats', 'quantity', 'attempts'),
    [(10, 1, 25), (10, 3, 8), (7, 2, 6)],
)
async def test_concurrent_reserves_never_oversell(
    repos: tuple[TicketQueryRepoImpl, TicketCommandRepoImpl],
    total_seats: int,
    quantity: int,
    attempts: int,
) -> None:
    ticket = await _stored_ticket(repos, total_seats=total_seats, available_seats=total_seats)
    use_case = ReserveSeatsUseCase(seat_ledger_executor=_executor(repos))

    results = await asyncio.gather(
        *(use_case.reserve(ticket_id=ticket.id, quantity=quantity) for _ in range(attempts)),
        return_exceptions=True,
    )

    successes = [r for r in results if isinstance(r, Ticket)]
    rejections = [r for r in results if isinstance(r, InsufficientSeatsError)]
    assert len(successes) == total_seats // quantity
    assert len(rejections) == attempts - len(successes)

    query_repo, _ = repos
    stored = await query_repo.get_by_id(ticket_id=ticket.id)
    assert stored is not None
    assert stored.available_seats == total_seats % quantity
    expected_status = TicketStatus.SOLD_OUT if stored.available_seats == 0 else TicketStatus.ACTIVE
    assert stored.status == expected_status
    assert stored.version == len(successes)


async def test_independent_lock_tables_fall_back_to_version_check(
    repos: tuple[TicketQueryRepoImpl, TicketCommandRepoImpl],
) -> None:
    """Two executors without a shared lock only have the conditional update between them"""
    ticket = await _stored_ticket(repos, total_seats=6, available_seats=6)
    left = ReserveSeatsUseCase(seat_ledger_executor=_executor(repos, max_retries=50))
    right = ReserveSeatsUseCase(seat_ledger_executor=_executor(repos, max_retries=50))

    results = await asyncio.gather(
        *(
            (left if i % 2 else right).reserve(ticket_id=ticket.id, quantity=1)
            for i in range(10)
        ),
        return_exceptions=True,
    )

    assert sum(isinstance(r, Ticket) for r in results) == 6
    assert sum(isinstance(r, InsufficientSeatsError) for r in results) == 4

    query_repo, _ = repos
    stored = await query_repo.get_by_id(ticket_id=ticket.id)
    assert stored is not None
    assert stored.available_seats == 0
    assert stored.status == TicketStatus.SOLD_OUT


async def test_interleaved_reserve_and_release_keep_the_count(
    repos: tuple[TicketQueryRepoImpl, TicketCommandRepoImpl],
) -> None:
    ticket = await _stored_ticket(repos, total_seats=20, available_seats=10)
    executor = _executor(repos)
    reserve = ReserveSeatsUseCase(seat_ledger_executor=executor)
    release = ReleaseSeatsUseCase(seat_ledger_executor=executor)

    await asyncio.gather(
        *(reserve.reserve(ticket_id=ticket.id, quantity=2) for _ in range(4)),
        *(release.release(ticket_id=ticket.id, quantity=1) for _ in range(5)),
    )

    query_repo, _ = repos
    stored = await query_repo.get_by_id(ticket_id=ticket.id)
    assert stored is not None
    assert stored.available_seats == 10 - 8 + 5
    assert stored.version == 9
