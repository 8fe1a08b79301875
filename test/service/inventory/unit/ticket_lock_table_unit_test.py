import asyncio

import pytest

from src.platform.state.ticket_lock_table import TicketLockTable


pytestmark = pytest.mark.unit


class TestTicketLockTable:
    @pytest.mark.asyncio
    async def test_same_key_is_serialized(self) -> None:
        lock_table = TicketLockTable()
        events: list[str] = []

        async def worker(name: str) -> None:
            async with lock_table.hold('ticket-1'):
                events.append(f'{name}:enter')
                await asyncio.sleep(0.01)
                events.append(f'{name}:exit')

        await asyncio.gather(worker('a'), worker('b'))

        assert events in (
            ['a:enter', 'a:exit', 'b:enter', 'b:exit'],
            ['b:enter', 'b:exit', 'a:enter', 'a:exit'],
        )

    @pytest.mark.asyncio
    async def test_different_keys_do_not_block_each_other(self) -> None:
        lock_table = TicketLockTable()
        inside = asyncio.Event()

        async def holder() -> None:
            async with lock_table.hold('ticket-1'):
                await asyncio.wait_for(inside.wait(), timeout=1)

        async def other() -> None:
            async with lock_table.hold('ticket-2'):
                inside.set()

        await asyncio.gather(holder(), other())

    @pytest.mark.asyncio
    async def test_unused_locks_are_dropped(self) -> None:
        lock_table = TicketLockTable()

        async with lock_table.hold('ticket-1'):
            assert len(lock_table) == 1

        assert len(lock_table) == 0

    @pytest.mark.asyncio
    async def test_lock_is_released_when_block_raises(self) -> None:
        lock_table = TicketLockTable()

        with pytest.raises(RuntimeError):
            async with lock_table.hold('ticket-1'):
                raise RuntimeError('boom')

        async with lock_table.hold('ticket-1'):
            pass
        assert len(lock_table) == 0
