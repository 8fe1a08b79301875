"""
Ticket field validation

Pure functions used by create and update. Input is a dict of snake_case
domain field names (already shaped by the request schema); output is the same
dict with values normalized to domain types. Any problem raises ValidationError.
"""

import datetime as dt
from decimal import Decimal, InvalidOperation
from typing import Any

from src.platform.exception.exceptions import ValidationError
from src.service.inventory.domain.enum.event_type import EventType
from src.service.inventory.domain.enum.ticket_status import TicketStatus
from src.service.inventory.domain.seat_ledger_domain import MAX_SEAT_COUNT


REQUIRED_FIELDS = (
    'event_name',
    'event_type',
    'venue',
    'event_date',
    'time',
    'price',
    'total_seats',
)
OPTIONAL_FIELDS = (
    'available_seats',
    'currency',
    'description',
    'image_url',
    'status',
)
NULLABLE_FIELDS = frozenset({'description', 'image_url'})
SEAT_FIELDS = frozenset({'total_seats', 'available_seats'})

PRICE_QUANTUM = Decimal('0.01')
# Largest value a Numeric(10, 2) column holds
MAX_PRICE = Decimal('99999999.99')


def _non_empty_str(name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f'{name} must be a non-empty string')
    return value


def _optional_str(name: str, value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f'{name} must be a string')
    return value


def _event_type(name: str, value: Any) -> EventType:
    try:
        return EventType(value)
    except ValueError:
        allowed = ', '.join(member.value for member in EventType)
        raise ValidationError(f'{name} must be one of: {allowed}')


def _status(name: str, value: Any) -> TicketStatus:
    try:
        return TicketStatus(value)
    except ValueError:
        allowed = ', '.join(member.value for member in TicketStatus)
        raise ValidationError(f'{name} must be one of: {allowed}')


def _event_date(name: str, value: Any) -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        try:
            return dt.date.fromisoformat(value)
        except ValueError:
            pass
        try:
            return dt.datetime.fromisoformat(value).date()
        except ValueError:
            pass
    raise ValidationError(f'{name} must be a calendar date (YYYY-MM-DD)')


def _price(name: str, value: Any) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal | str):
        raise ValidationError(f'{name} must be a number')
    try:
        price = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f'{name} must be a number')
    if not price.is_finite():
        raise ValidationError(f'{name} must be a number')
    if price < 0:
        raise ValidationError(f'{name} cannot be negative')
    if price > MAX_PRICE:
        raise ValidationError(f'{name} cannot exceed {MAX_PRICE}')
    try:
        quantized = price.quantize(PRICE_QUANTUM)
    except InvalidOperation:
        raise ValidationError(f'{name} must be a number')
    if quantized != price:
        raise ValidationError(f'{name} cannot have more than 2 decimal places')
    return quantized


def _seat_count(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f'{name} must be an integer')
    if value < 0:
        raise ValidationError(f'{name} cannot be negative')
    if value > MAX_SEAT_COUNT:
        raise ValidationError(f'{name} cannot exceed {MAX_SEAT_COUNT}')
    return value


_NORMALIZERS = {
    'event_name': _non_empty_str,
    'event_type': _event_type,
    'venue': _non_empty_str,
    'event_date': _event_date,
    'time': _non_empty_str,
    'price': _price,
    'currency': _non_empty_str,
    'total_seats': _seat_count,
    'available_seats': _seat_count,
    'description': _optional_str,
    'image_url': _optional_str,
    'status': _status,
}


def validate_ticket_fields(fields: dict[str, Any], *, partial: bool) -> dict[str, Any]:
    """
    Validate and normalize ticket fields.

    Args:
        fields: Supplied fields keyed by domain name
        partial: True for update (only supplied fields are checked),
            False for create (required fields must be present)

    Returns:
        Normalized copy of `fields`
    """
    unknown = sorted(set(fields) - set(_NORMALIZERS))
    if unknown:
        raise ValidationError(f'Unknown field(s): {", ".join(unknown)}')

    if not partial:
        missing = [name for name in REQUIRED_FIELDS if fields.get(name) is None]
        if missing:
            raise ValidationError(f'Missing required field(s): {", ".join(missing)}')

    normalized: dict[str, Any] = {}
    for name, value in fields.items():
        if value is None and name not in NULLABLE_FIELDS:
            if partial or name in REQUIRED_FIELDS:
                raise ValidationError(f'{name} cannot be null')
            # Optional with default on create (currency, status, available_seats)
            continue
        normalized[name] = _NORMALIZERS[name](name, value)

    return normalized


def check_seat_invariant(*, total_seats: int, available_seats: int) -> None:
    if available_seats < 0:
        raise ValidationError('available_seats cannot be negative')
    if available_seats > total_seats:
        raise ValidationError('available_seats cannot exceed total_seats')
