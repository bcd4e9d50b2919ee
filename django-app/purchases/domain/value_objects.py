"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class TicketType(str, Enum):
    """Ticket categories sold at the box office."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class AccountId:
    """Positive integer identifying the purchasing account."""

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value):
            raise ValueError("Account ID must be an integer")
        if self.value <= 0:
            raise ValueError("Account ID must be greater than zero")


@dataclass(frozen=True)
class TicketTypeRequest:
    """Immutable request for a number of tickets of a single type.

    The count is only checked for being an integer here; whether it is
    positive is a purchase rule enforced by the ticket service.
    """

    ticket_type: TicketType
    no_of_tickets: int

    def __post_init__(self) -> None:
        try:
            ticket_type = TicketType(self.ticket_type)
        except ValueError:
            raise ValueError("type must be ADULT, CHILD, or INFANT") from None
        object.__setattr__(self, "ticket_type", ticket_type)

        if not _is_int(self.no_of_tickets):
            raise ValueError("noOfTickets must be an integer")
