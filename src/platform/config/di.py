"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.state.ticket_lock_table import TicketLockTable
from src.service.inventory.app.command.atomic_seat_ledger_executor import (
    AtomicSeatLedgerExecutor,
)
from src.service.inventory.driven_adapter.repo.ticket_command_repo_impl import (
    TicketCommandRepoImpl,
)
from src.service.inventory.driven_adapter.repo.ticket_query_repo_impl import TicketQueryRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager, event-loop aware)
    database = providers.Singleton(Database)

    # Repositories (stateless - use session_factory per call)
    ticket_command_repo = providers.Singleton(
        TicketCommandRepoImpl, session_factory=database.provided.session
    )
    ticket_query_repo = providers.Singleton(
        TicketQueryRepoImpl, session_factory=database.provided.session
    )

    # Per-ticket in-process locks, must be shared by every request
    ticket_lock_table = providers.Singleton(TicketLockTable)

    seat_ledger_executor = providers.Singleton(
        AtomicSeatLedgerExecutor,
        ticket_query_repo=ticket_query_repo,
        ticket_command_repo=ticket_command_repo,
        lock_table=ticket_lock_table,
        max_retries=config_service.provided.SEAT_LEDGER_MAX_RETRIES,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
