"""
Per-key asyncio lock table

Serializes seat ledger writes on the same ticket inside one process.
Locks are created on first use and dropped once nobody holds or waits on them,
so the table only ever contains keys with in-flight work.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from src.platform.logging.loguru_io import Logger


class TicketLockTable:
    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        """
        Hold the lock for `key` for the duration of the block.

        Args:
            key: Lock key (e.g., a ticket id)
        """
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                Logger.base.debug(f'🔒 [LOCK] Acquired lock: {key}')
                yield
        finally:
            self._users[key] -= 1
            if not self._users[key]:
                del self._users[key]
                del self._locks[key]
            Logger.base.debug(f'🔓 [LOCK] Released lock: {key}')

    def __len__(self) -> int:
        return len(self._locks)
