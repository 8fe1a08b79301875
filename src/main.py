"""
Ticket Inventory FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
import uvicorn

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engines
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.command.seed_sample_tickets_use_case import (
    SeedSampleTicketsUseCase,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Ticket Service] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Ticket Service] Dependency injection wired')

    await create_db_and_tables()
    Logger.base.info('🗄️  [Ticket Service] Database tables ready')

    if settings.SEED_SAMPLE_DATA:
        seed_use_case = SeedSampleTicketsUseCase(
            ticket_query_repo=container.ticket_query_repo(),
            ticket_command_repo=container.ticket_command_repo(),
        )
        await seed_use_case.seed()

    Logger.base.info(f'✅ [Ticket Service] Ready on port {settings.PORT}')

    yield

    Logger.base.info('🛑 [Ticket Service] Shutting down...')

    await dispose_engines()

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Ticket Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')


if __name__ == '__main__':
    uvicorn.run('src.main:app', host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
