from purchases.domain.models import PurchaseRequest, PurchaseResult, TicketPolicy, TicketTotals
from purchases.domain.value_objects import AccountId, TicketType, TicketTypeRequest

__all__ = [
    "PurchaseRequest",
    "PurchaseResult",
    "TicketPolicy",
    "TicketTotals",
    "AccountId",
    "TicketType",
    "TicketTypeRequest",
]
