#!/usr/bin/env python3
"""
Database Seed Script
Populate sample ticket listings into the database

Features:
1. Create tables if they do not exist yet
2. Insert the sample listings (only when the ticket table is empty)

Usage:
    python -m script.seed_data
    python -m script.seed_data --file path/to/tickets.json
"""

import argparse
import asyncio
from pathlib import Path

from src.platform.config.di import container
from src.platform.constant.path import SAMPLE_TICKETS_FILE
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engines
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.command.seed_sample_tickets_use_case import (
    SeedSampleTicketsUseCase,
    load_sample_tickets,
)


async def seed(source: Path) -> int:
    await create_db_and_tables()
    try:
        use_case = SeedSampleTicketsUseCase(
            ticket_query_repo=container.ticket_query_repo(),
            ticket_command_repo=container.ticket_command_repo(),
        )
        return await use_case.seed(samples=load_sample_tickets(source))
    finally:
        await dispose_engines()


def main() -> None:
    parser = argparse.ArgumentParser(description='Seed sample ticket listings')
    parser.add_argument(
        '--file',
        type=Path,
        default=SAMPLE_TICKETS_FILE,
        help='JSON list of ticket fields (snake_case keys)',
    )
    args = parser.parse_args()

    inserted = asyncio.run(seed(args.file))
    Logger.base.info(f'🌱 Seed finished: {inserted} tickets inserted')


if __name__ == '__main__':
    main()
