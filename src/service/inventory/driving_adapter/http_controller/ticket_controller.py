import datetime as dt
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.command.create_ticket_use_case import CreateTicketUseCase
from src.service.inventory.app.command.delete_ticket_use_case import DeleteTicketUseCase
from src.service.inventory.app.command.release_seats_use_case import ReleaseSeatsUseCase
from src.service.inventory.app.command.reserve_seats_use_case import ReserveSeatsUseCase
from src.service.inventory.app.command.update_ticket_use_case import UpdateTicketUseCase
from src.service.inventory.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.inventory.app.query.list_tickets_use_case import ListTicketsUseCase
from src.service.inventory.domain.enum.event_type import EventType
from src.service.inventory.domain.enum.ticket_status import TicketStatus
from src.service.inventory.domain.value_object.ticket_filter import TicketFilter
from src.service.inventory.driving_adapter.schema.ticket_schema import (
    MessageResponse,
    SeatQuantityRequest,
    TicketCreateRequest,
    TicketMessageResponse,
    TicketResponse,
    TicketUpdateRequest,
)


router = APIRouter()


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_tickets(
    event_type: Optional[EventType] = Query(default=None, alias='eventType'),
    ticket_status: Optional[TicketStatus] = Query(default=None, alias='status'),
    min_price: Optional[Decimal] = Query(default=None, alias='minPrice'),
    max_price: Optional[Decimal] = Query(default=None, alias='maxPrice'),
    event_date: Optional[dt.date] = Query(default=None, alias='date'),
    use_case: ListTicketsUseCase = Depends(ListTicketsUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.list_tickets(
        ticket_filter=TicketFilter(
            event_type=event_type,
            status=ticket_status,
            min_price=min_price,
            max_price=max_price,
            event_date=event_date,
        )
    )
    return [TicketResponse.from_entity(ticket) for ticket in tickets]


@router.get('/{ticket_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_ticket(
    ticket_id: str,
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.get(ticket_id=ticket_id)
    return TicketResponse.from_entity(ticket)


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_ticket(
    request: TicketCreateRequest,
    use_case: CreateTicketUseCase = Depends(CreateTicketUseCase.depends),
) -> TicketMessageResponse:
    ticket = await use_case.create(fields=request.model_dump(exclude_unset=True))
    return TicketMessageResponse(
        message='Ticket created successfully', ticket=TicketResponse.from_entity(ticket)
    )


@router.put('/{ticket_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_ticket(
    ticket_id: str,
    request: TicketUpdateRequest,
    use_case: UpdateTicketUseCase = Depends(UpdateTicketUseCase.depends),
) -> TicketMessageResponse:
    ticket = await use_case.update(
        ticket_id=ticket_id, changes=request.model_dump(exclude_unset=True)
    )
    return TicketMessageResponse(
        message='Ticket updated successfully', ticket=TicketResponse.from_entity(ticket)
    )


@router.post('/{ticket_id}/reserve', status_code=status.HTTP_200_OK)
@Logger.io
async def reserve_seats(
    ticket_id: str,
    request: SeatQuantityRequest,
    use_case: ReserveSeatsUseCase = Depends(ReserveSeatsUseCase.depends),
) -> TicketMessageResponse:
    ticket = await use_case.reserve(ticket_id=ticket_id, quantity=request.quantity)
    return TicketMessageResponse(
        message='Seats reserved successfully', ticket=TicketResponse.from_entity(ticket)
    )


@router.post('/{ticket_id}/release', status_code=status.HTTP_200_OK)
@Logger.io
async def release_seats(
    ticket_id: str,
    request: SeatQuantityRequest,
    use_case: ReleaseSeatsUseCase = Depends(ReleaseSeatsUseCase.depends),
) -> TicketMessageResponse:
    ticket = await use_case.release(ticket_id=ticket_id, quantity=request.quantity)
    return TicketMessageResponse(
        message='Seats released successfully', ticket=TicketResponse.from_entity(ticket)
    )


@router.delete('/{ticket_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_ticket(
    ticket_id: str,
    use_case: DeleteTicketUseCase = Depends(DeleteTicketUseCase.depends),
) -> MessageResponse:
    await use_case.delete(ticket_id=ticket_id)
    return MessageResponse(message='Ticket deleted successfully')
