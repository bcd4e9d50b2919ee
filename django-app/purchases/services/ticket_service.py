"""Ticket service - all purchase rules live here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors

Nothing is dispatched until every rule has passed. Seats are reserved before
payment is taken.
"""

import logging
from collections.abc import Iterable, Sequence

from purchases.conf import get_ticket_policy
from purchases.domain import (
    AccountId,
    PurchaseRequest,
    PurchaseResult,
    TicketPolicy,
    TicketTotals,
    TicketTypeRequest,
)
from purchases.domain.errors import (
    EmptyPurchaseError,
    InvalidAccountError,
    MalformedRequestError,
    MissingAdultError,
    PurchaseRejectedError,
    TicketLimitExceededError,
    TooManyInfantsError,
)
from purchases.gateways import (
    SeatReservationService,
    ThirdPartySeatReservationService,
    ThirdPartyTicketPaymentService,
    TicketPaymentService,
)
from purchases.signals import tickets_purchased

logger = logging.getLogger(__name__)


def validate_ticket_type_requests(ticket_type_requests: Sequence[object]) -> tuple[TicketTypeRequest, ...]:
    """Check the shape of every request and return them as a tuple.

    Raises:
        MalformedRequestError: If there are no requests, or any request is not
            a ``TicketTypeRequest`` with a positive count.
    """
    if not ticket_type_requests:
        raise MalformedRequestError("At least one ticket type request must be provided")

    for request in ticket_type_requests:
        if not isinstance(request, TicketTypeRequest):
            raise MalformedRequestError("Invalid ticket type request")
        if request.no_of_tickets <= 0:
            raise MalformedRequestError(
                f"Ticket count must be a positive integer. Received: {request.no_of_tickets} "
                f"for {request.ticket_type.value}"
            )
    return tuple(ticket_type_requests)


def calculate_ticket_totals(ticket_type_requests: Iterable[TicketTypeRequest]) -> TicketTotals:
    """Aggregate requested counts per ticket type."""
    return TicketTotals.from_requests(ticket_type_requests)


def validate_ticket_totals(totals: TicketTotals, policy: TicketPolicy) -> None:
    """Apply the purchase rules in order; the first failing rule wins.

    Raises:
        EmptyPurchaseError: If no tickets are requested.
        TicketLimitExceededError: If more than the allowed number is requested.
        MissingAdultError: If child or infant tickets come without an adult.
        TooManyInfantsError: If there are more infants than adults.
    """
    if totals.total == 0:
        raise EmptyPurchaseError()
    if totals.total > policy.max_tickets_per_purchase:
        raise TicketLimitExceededError(policy.max_tickets_per_purchase)
    if totals.adult == 0 and (totals.child > 0 or totals.infant > 0):
        raise MissingAdultError()
    if totals.infant > totals.adult:
        raise TooManyInfantsError()


class TicketService:
    """Service for validating, pricing and dispatching ticket purchases."""

    def __init__(
        self,
        ticket_payment_service: TicketPaymentService,
        seat_reservation_service: SeatReservationService,
        policy: TicketPolicy | None = None,
    ) -> None:
        if ticket_payment_service is None or seat_reservation_service is None:
            raise ValueError("Services cannot be null")
        self._ticket_payment_service = ticket_payment_service
        self._seat_reservation_service = seat_reservation_service
        self._policy = policy if policy is not None else get_ticket_policy()

    def purchase_tickets(self, account_id: int, *ticket_type_requests: TicketTypeRequest) -> PurchaseResult:
        """Validate and price the requests, then reserve seats and take payment.

        Raises:
            InvalidAccountError: If account_id is not a positive integer.
            MalformedRequestError: If the requests are missing or malformed.
            EmptyPurchaseError, TicketLimitExceededError, MissingAdultError,
            TooManyInfantsError: If the totals break a purchase rule.

        Errors raised by the seat reservation or payment services propagate
        unchanged.
        """
        try:
            request = self._build_request(account_id, ticket_type_requests)
            totals = calculate_ticket_totals(request.ticket_type_requests)
            validate_ticket_totals(totals, self._policy)
        except PurchaseRejectedError as exc:
            logger.info("Purchase rejected for account %r: %s", account_id, exc.code.value)
            raise

        result = PurchaseResult(
            account_id=request.account_id.value,
            amount_due=self._policy.amount_for(totals),
            seats_to_reserve=self._policy.seats_for(totals),
            totals=totals,
        )

        self._seat_reservation_service.reserve_seat(result.account_id, result.seats_to_reserve)
        self._ticket_payment_service.make_payment(result.account_id, result.amount_due)

        logger.info(
            "Purchase accepted for account %s: %s seats, amount %s",
            result.account_id,
            result.seats_to_reserve,
            result.amount_due,
        )
        for receiver, error in tickets_purchased.send_robust(sender=self.__class__, result=result):
            if isinstance(error, Exception):
                logger.error(
                    "tickets_purchased receiver %r failed for account %s",
                    receiver,
                    result.account_id,
                    exc_info=error,
                )
        return result

    def _build_request(self, account_id: int, ticket_type_requests: Sequence[object]) -> PurchaseRequest:
        try:
            account = AccountId(account_id)
        except ValueError:
            raise InvalidAccountError(account_id) from None
        return PurchaseRequest(
            account_id=account,
            ticket_type_requests=validate_ticket_type_requests(ticket_type_requests),
        )


def get_ticket_service() -> TicketService:
    """Return a ticket service wired to the third-party providers."""
    return TicketService(
        ticket_payment_service=ThirdPartyTicketPaymentService(),
        seat_reservation_service=ThirdPartySeatReservationService(),
    )
