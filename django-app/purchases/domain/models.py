"""Domain models for a single purchase call.

Nothing here is persisted: each object lives for one call to the ticket
service and is discarded afterwards.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from purchases.domain.value_objects import AccountId, TicketType, TicketTypeRequest


@dataclass(frozen=True)
class PurchaseRequest:
    """An account and the ticket type requests it wants to buy."""

    account_id: AccountId
    ticket_type_requests: tuple[TicketTypeRequest, ...] = ()


@dataclass(frozen=True)
class TicketTotals:
    """Ticket counts aggregated per type."""

    adult: int = 0
    child: int = 0
    infant: int = 0

    @property
    def total(self) -> int:
        return self.adult + self.child + self.infant

    def count_for(self, ticket_type: TicketType) -> int:
        return getattr(self, ticket_type.value.lower())

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> "TicketTotals":
        counts = {ticket_type: 0 for ticket_type in TicketType}
        for request in requests:
            counts[request.ticket_type] += request.no_of_tickets
        return cls(
            adult=counts[TicketType.ADULT],
            child=counts[TicketType.CHILD],
            infant=counts[TicketType.INFANT],
        )


@dataclass(frozen=True)
class TicketPolicy:
    """Lookup tables for pricing and seating, plus the per-purchase cap."""

    prices: Mapping[TicketType, int] = field(
        default_factory=lambda: {
            TicketType.ADULT: 25,
            TicketType.CHILD: 15,
            TicketType.INFANT: 0,
        },
        hash=False,
    )
    seated_types: frozenset[TicketType] = frozenset({TicketType.ADULT, TicketType.CHILD})
    max_tickets_per_purchase: int = 25

    def __post_init__(self) -> None:
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))
        object.__setattr__(self, "seated_types", frozenset(self.seated_types))

    def amount_for(self, totals: TicketTotals) -> int:
        """Return the amount to charge for the given totals."""
        return sum(totals.count_for(t) * self.prices.get(t, 0) for t in TicketType)

    def seats_for(self, totals: TicketTotals) -> int:
        """Return the number of seats the given totals occupy."""
        return sum(totals.count_for(t) for t in TicketType if t in self.seated_types)


@dataclass(frozen=True)
class PurchaseResult:
    """Outcome of an accepted purchase, as dispatched to the collaborators."""

    account_id: int
    amount_due: int
    seats_to_reserve: int
    totals: TicketTotals
