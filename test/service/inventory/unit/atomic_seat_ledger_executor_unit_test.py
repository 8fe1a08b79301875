"""
Unit tests for AtomicSeatLedgerExecutor

Compare-and-swap loop against mocked repositories:
1. Success on first attempt
2. Retry after a lost race, re-reading fresh state
3. ConcurrencyConflictError once retries are exhausted
4. NotFoundError when the ticket is missing
"""

from typing import Any
from unittest.mock import AsyncMock

import attrs
import pytest

from src.platform.exception.exceptions import (
    ConcurrencyConflictError,
    InsufficientSeatsError,
    NotFoundError,
)
from src.platform.state.ticket_lock_table import TicketLockTable
from src.service.inventory.app.command.atomic_seat_ledger_executor import (
    AtomicSeatLedgerExecutor,
)


pytestmark = pytest.mark.unit


def _executor(query_repo: Any, command_repo: Any, max_retries: int = 3) -> AtomicSeatLedgerExecutor:
    return AtomicSeatLedgerExecutor(
        ticket_query_repo=query_repo,
        ticket_command_repo=command_repo,
        lock_table=TicketLockTable(),
        max_retries=max_retries,
    )


class TestAtomicSeatLedgerExecutor:
    @pytest.mark.asyncio
    async def test_first_attempt_wins(self, repository_mocks: Any) -> None:
        ticket = repository_mocks.stored
        executor = _executor(repository_mocks.query_repo, repository_mocks.command_repo)

        stored = await executor.execute(
            ticket_id=ticket.id,
            mutate=lambda current: current.reserve(quantity=2),
            operation='RESERVE',
        )

        assert stored.available_seats == ticket.available_seats - 2
        assert stored.version == ticket.version + 1
        repository_mocks.command_repo.compare_and_swap.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_lost_race_is_retried_on_fresh_state(self, make_ticket: Any) -> None:
        original = make_ticket(total_seats=10, available_seats=10, version=0)
        # Another writer took 7 seats between our read and our write
        fresher = attrs.evolve(original, available_seats=3, version=1)

        query_repo = AsyncMock()
        query_repo.get_by_id = AsyncMock(side_effect=[original, fresher])
        command_repo = AsyncMock()
        command_repo.compare_and_swap = AsyncMock(
            side_effect=[None, attrs.evolve(fresher, available_seats=1, version=2)]
        )
        executor = _executor(query_repo, command_repo)

        stored = await executor.execute(
            ticket_id=original.id,
            mutate=lambda current: current.reserve(quantity=2),
            operation='RESERVE',
        )

        assert stored.available_seats == 1
        assert query_repo.get_by_id.await_count == 2
        second_candidate = command_repo.compare_and_swap.await_args_list[1].kwargs['ticket']
        assert second_candidate.version == 1
        assert second_candidate.available_seats == 1

    @pytest.mark.asyncio
    async def test_domain_error_on_fresh_state_is_not_retried(self, make_ticket: Any) -> None:
        original = make_ticket(available_seats=5, version=0)
        fresher = attrs.evolve(original, available_seats=1, version=1)

        query_repo = AsyncMock()
        query_repo.get_by_id = AsyncMock(side_effect=[original, fresher])
        command_repo = AsyncMock()
        command_repo.compare_and_swap = AsyncMock(return_value=None)
        executor = _executor(query_repo, command_repo)

        with pytest.raises(InsufficientSeatsError):
            await executor.execute(
                ticket_id=original.id,
                mutate=lambda current: current.reserve(quantity=4),
                operation='RESERVE',
            )

        command_repo.compare_and_swap.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_exhausted_retries_raise_conflict(self, make_ticket: Any) -> None:
        ticket = make_ticket()
        query_repo = AsyncMock()
        query_repo.get_by_id = AsyncMock(return_value=ticket)
        command_repo = AsyncMock()
        command_repo.compare_and_swap = AsyncMock(return_value=None)
        executor = _executor(query_repo, command_repo, max_retries=3)

        with pytest.raises(ConcurrencyConflictError) as exc_info:
            await executor.execute(
                ticket_id=ticket.id,
                mutate=lambda current: current.reserve(quantity=1),
                operation='RESERVE',
            )

        assert exc_info.value.status_code == 409
        assert command_repo.compare_and_swap.await_count == 3

    @pytest.mark.asyncio
    async def test_missing_ticket_raises_not_found(self, make_ticket: Any) -> None:
        query_repo = AsyncMock()
        query_repo.get_by_id = AsyncMock(return_value=None)
        command_repo = AsyncMock()
        executor = _executor(query_repo, command_repo)

        with pytest.raises(NotFoundError):
            await executor.execute(
                ticket_id=make_ticket().id,
                mutate=lambda current: current.reserve(quantity=1),
                operation='RESERVE',
            )

        command_repo.compare_and_swap.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_lock_is_released_after_failure(self, make_ticket: Any) -> None:
        query_repo = AsyncMock()
        query_repo.get_by_id = AsyncMock(return_value=None)
        lock_table = TicketLockTable()
        executor = AtomicSeatLedgerExecutor(
            ticket_query_repo=query_repo,
            ticket_command_repo=AsyncMock(),
            lock_table=lock_table,
        )

        with pytest.raises(NotFoundError):
            await executor.execute(
                ticket_id=make_ticket().id,
                mutate=lambda current: current,
                operation='UPDATE',
            )

        assert len(lock_table) == 0
