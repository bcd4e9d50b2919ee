"""Stand-ins for the external payment and seat booking providers.

The real providers are out of our hands. These implementations accept every
call and only log it, which is what they are assumed to do from the ticket
service's point of view.
"""

import logging

from purchases.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class ThirdPartyTicketPaymentService(TicketPaymentService):
    """Payment provider stand-in that always succeeds."""

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        logger.info("Payment of %s taken from account %s", total_amount_to_pay, account_id)


class ThirdPartySeatReservationService(SeatReservationService):
    """Seat booking stand-in that always succeeds."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        logger.info("Reserved %s seats for account %s", total_seats_to_allocate, account_id)
