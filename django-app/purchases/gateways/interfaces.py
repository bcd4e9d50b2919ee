"""Gateway interfaces for the third-party services a purchase depends on.

Gateways must be swappable; the ticket service only ever sees these ABCs.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """Interface for the payment provider."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge the account. Failures are raised, never returned."""
        ...


class SeatReservationService(ABC):
    """Interface for the seat booking provider."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve seats for the account. Failures are raised, never returned."""
        ...
