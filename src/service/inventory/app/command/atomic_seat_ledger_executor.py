"""
Atomic Seat Ledger Executor

Runs a read-modify-write on one ticket as a compare-and-swap loop:
1. Hold the in-process lock for the ticket
2. Read the current row (with its version)
3. Apply the pure mutation
4. Conditional UPDATE on the observed version, re-read and retry when another writer won
"""

from typing import Callable
from uuid import UUID

from src.platform.exception.exceptions import ConcurrencyConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.state.ticket_lock_table import TicketLockTable
from src.service.inventory.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.inventory.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.inventory.domain.entity.ticket_entity import Ticket


class AtomicSeatLedgerExecutor:
    def __init__(
        self,
        *,
        ticket_query_repo: ITicketQueryRepo,
        ticket_command_repo: ITicketCommandRepo,
        lock_table: TicketLockTable,
        max_retries: int = 10,
    ) -> None:
        self.ticket_query_repo = ticket_query_repo
        self.ticket_command_repo = ticket_command_repo
        self.lock_table = lock_table
        self.max_retries = max_retries

    @Logger.io(truncate_content=True)
    async def execute(
        self, *, ticket_id: UUID, mutate: Callable[[Ticket], Ticket], operation: str
    ) -> Ticket:
        """
        Args:
            ticket_id: Ticket to change
            mutate: Pure function from the current record to the new one; may raise domain errors
            operation: Tag used in log lines (e.g. 'RESERVE')

        Raises:
            NotFoundError: ticket does not exist (or was deleted mid-loop)
            ConcurrencyConflictError: every attempt lost the race
        """
        async with self.lock_table.hold(str(ticket_id)):
            for attempt in range(1, self.max_retries + 1):
                current = await self.ticket_query_repo.get_by_id(ticket_id=ticket_id)
                if current is None:
                    raise NotFoundError('Ticket not found')

                stored = await self.ticket_command_repo.compare_and_swap(ticket=mutate(current))
                if stored is not None:
                    return stored

                Logger.base.warning(
                    f'🔁 [{operation}] Version conflict on ticket {ticket_id} '
                    f'(attempt {attempt}/{self.max_retries})'
                )

        raise ConcurrencyConflictError(
            f'Ticket {ticket_id} is being modified concurrently, please retry'
        )
