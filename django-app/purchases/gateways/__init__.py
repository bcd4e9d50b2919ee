from purchases.gateways.interfaces import SeatReservationService, TicketPaymentService
from purchases.gateways.thirdparty import (
    ThirdPartySeatReservationService,
    ThirdPartyTicketPaymentService,
)

__all__ = [
    "SeatReservationService",
    "TicketPaymentService",
    "ThirdPartySeatReservationService",
    "ThirdPartyTicketPaymentService",
]
