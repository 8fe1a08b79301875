class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class InsufficientSeatsError(DomainError):
    def __init__(self, message: str = 'Not enough seats available') -> None:
        super().__init__(message, 400)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class TicketNotTradableError(ConflictError):
    """Seat changes requested on a cancelled or completed listing."""


class ConcurrencyConflictError(ConflictError):
    """Compare-and-swap retries exhausted while other writers kept winning."""


class StorageError(CustomBaseError):
    def __init__(self, message: str = 'Storage failure') -> None:
        super().__init__(message, 500)
