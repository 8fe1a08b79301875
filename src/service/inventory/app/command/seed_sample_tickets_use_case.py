"""
Seed Sample Tickets Use Case

Loads demo listings into an empty inventory. Never touches a store that
already holds tickets.
"""

import json
from pathlib import Path
from typing import Any

from src.platform.constant.path import SAMPLE_TICKETS_FILE
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.inventory.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.inventory.domain.entity.ticket_entity import Ticket


def load_sample_tickets(path: Path = SAMPLE_TICKETS_FILE) -> list[dict[str, Any]]:
    with path.open(encoding='utf-8') as f:
        return json.load(f)


class SeedSampleTicketsUseCase:
    def __init__(
        self, ticket_query_repo: ITicketQueryRepo, ticket_command_repo: ITicketCommandRepo
    ) -> None:
        self.ticket_query_repo = ticket_query_repo
        self.ticket_command_repo = ticket_command_repo

    @Logger.io(truncate_content=True)
    async def seed(self, *, samples: list[dict[str, Any]] | None = None) -> int:
        """
        Insert sample tickets when the store is empty.

        Returns:
            Number of tickets inserted (0 when the store already had data)
        """
        if existing := await self.ticket_query_repo.count():
            Logger.base.info(f'⏭️ [SEED] {existing} tickets already stored, skipping sample data')
            return 0

        if samples is None:
            samples = load_sample_tickets()

        for fields in samples:
            await self.ticket_command_repo.create(ticket=Ticket.create(fields=fields))

        Logger.base.info(f'🌱 [SEED] Inserted {len(samples)} sample tickets')
        return len(samples)
