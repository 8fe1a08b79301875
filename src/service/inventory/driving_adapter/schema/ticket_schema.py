import datetime as dt
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel

from src.service.inventory.domain.entity.ticket_entity import Ticket


# camelCase on the wire, snake_case in the domain
_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TicketCreateRequest(BaseModel):
    """
    Shape/type checks only. Required fields are enforced by the domain validator
    so that create and update report problems the same way.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'eventName': 'Rock Concert 2024',
                'eventType': 'concert',
                'venue': 'Madison Square Garden',
                'date': '2024-12-15',
                'time': '20:00',
                'price': 85,
                'currency': 'USD',
                'totalSeats': 500,
                'availableSeats': 500,
                'description': 'Amazing rock concert featuring top bands',
                'imageUrl': '/images/rock-concert.jpg',
            }
        },
    )

    event_name: Optional[str] = None
    event_type: Optional[str] = None
    venue: Optional[str] = None
    event_date: Optional[dt.date | dt.datetime] = Field(default=None, alias='date')
    time: Optional[str] = None
    price: Optional[Decimal] = None
    currency: Optional[str] = None
    total_seats: Optional[StrictInt] = None
    available_seats: Optional[StrictInt] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    status: Optional[str] = None


class TicketUpdateRequest(TicketCreateRequest):
    """Partial overwrite: only the keys present in the body are applied"""


class SeatQuantityRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={'example': {'quantity': 2}})

    quantity: StrictInt


class TicketResponse(BaseModel):
    model_config = _CAMEL_CONFIG

    id: UUID
    event_name: str
    event_type: str
    venue: str
    event_date: dt.date = Field(alias='date')
    time: str
    price: float
    currency: str
    total_seats: int
    available_seats: int
    description: Optional[str] = None
    image_url: Optional[str] = None
    status: str
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    @classmethod
    def from_entity(cls, ticket: Ticket) -> 'TicketResponse':
        return cls(
            id=ticket.id,
            event_name=ticket.event_name,
            event_type=ticket.event_type.value,
            venue=ticket.venue,
            event_date=ticket.event_date,
            time=ticket.time,
            price=float(ticket.price),
            currency=ticket.currency,
            total_seats=ticket.total_seats,
            available_seats=ticket.available_seats,
            description=ticket.description,
            image_url=ticket.image_url,
            status=ticket.status.value,
            created_at=ticket.created_at,
            updated_at=ticket.updated_at,
        )


class TicketMessageResponse(BaseModel):
    message: str
    ticket: TicketResponse


class MessageResponse(BaseModel):
    message: str
