from typing import Any

from src.service.inventory.domain.entity.ticket_entity import Ticket
from src.service.inventory.domain.enum.event_type import EventType
from src.service.inventory.domain.enum.ticket_status import TicketStatus
from src.service.inventory.driven_adapter.model.ticket_model import TicketModel


def model_to_entity(model: TicketModel) -> Ticket:
    return Ticket(
        id=model.id,
        event_name=model.event_name,
        event_type=EventType(model.event_type),
        venue=model.venue,
        event_date=model.event_date,
        time=model.time,
        price=model.price,
        total_seats=model.total_seats,
        available_seats=model.available_seats,
        currency=model.currency,
        description=model.description,
        image_url=model.image_url,
        status=TicketStatus(model.status),
        created_at=model.created_at,
        updated_at=model.updated_at,
        version=model.version,
    )


def entity_to_row(ticket: Ticket) -> dict[str, Any]:
    """Column values for every mutable field (id and created_at excluded)"""
    return {
        'event_name': ticket.event_name,
        'event_type': ticket.event_type.value,
        'venue': ticket.venue,
        'event_date': ticket.event_date,
        'time': ticket.time,
        'price': ticket.price,
        'currency': ticket.currency,
        'total_seats': ticket.total_seats,
        'available_seats': ticket.available_seats,
        'description': ticket.description,
        'image_url': ticket.image_url,
        'status': ticket.status.value,
        'updated_at': ticket.updated_at,
    }
