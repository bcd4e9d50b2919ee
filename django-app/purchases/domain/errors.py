"""Domain error codes for the purchases module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    MALFORMED_REQUEST = "MALFORMED_REQUEST"
    EMPTY_PURCHASE = "EMPTY_PURCHASE"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    MISSING_ADULT = "MISSING_ADULT"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class PurchaseRejectedError(DomainError):
    """Raised when a purchase request is rejected before any dispatch."""


class InvalidAccountError(PurchaseRejectedError):
    """Raised when the account ID is missing, non-integer or not positive."""

    def __init__(self, account_id: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Invalid account ID",
        )
        self.account_id = account_id


class MalformedRequestError(PurchaseRejectedError):
    """Raised when the ticket type requests are missing or malformed."""

    def __init__(self, message: str = "Invalid ticket type request") -> None:
        super().__init__(code=ErrorCode.MALFORMED_REQUEST, message=message)


class EmptyPurchaseError(PurchaseRejectedError):
    """Raised when no tickets are requested."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_PURCHASE,
            message="No tickets requested",
        )


class TicketLimitExceededError(PurchaseRejectedError):
    """Raised when a purchase asks for more tickets than allowed."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_LIMIT_EXCEEDED,
            message=f"Cannot purchase more than {limit} tickets at a time",
        )
        self.limit = limit


class MissingAdultError(PurchaseRejectedError):
    """Raised when child or infant tickets are requested without an adult."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_ADULT,
            message="Child or Infant tickets cannot be purchased without at least one Adult ticket",
        )


class TooManyInfantsError(PurchaseRejectedError):
    """Raised when there are more infants than adults to sit them on."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_INFANTS,
            message="Each infant must be accompanied by an adult",
        )
