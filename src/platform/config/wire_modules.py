"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.inventory.app.command import (
    create_ticket_use_case,
    delete_ticket_use_case,
    release_seats_use_case,
    reserve_seats_use_case,
    update_ticket_use_case,
)
from src.service.inventory.app.query import get_ticket_use_case, list_tickets_use_case


WIRE_MODULES: list[ModuleType] = [
    create_ticket_use_case,
    update_ticket_use_case,
    delete_ticket_use_case,
    reserve_seats_use_case,
    release_seats_use_case,
    get_ticket_use_case,
    list_tickets_use_case,
]
