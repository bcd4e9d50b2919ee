"""Pytest configuration and shared fixtures."""

import pytest

from purchases.gateways import SeatReservationService, TicketPaymentService
from purchases.services import TicketService


class RecordingPaymentService(TicketPaymentService):
    def __init__(self, calls: list) -> None:
        self.calls = calls

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        self.calls.append(("make_payment", account_id, total_amount_to_pay))


class RecordingSeatReservationService(SeatReservationService):
    def __init__(self, calls: list) -> None:
        self.calls = calls

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        self.calls.append(("reserve_seat", account_id, total_seats_to_allocate))


@pytest.fixture
def calls() -> list:
    """Shared call log, so dispatch order can be asserted."""
    return []


@pytest.fixture
def payment_service(calls: list) -> RecordingPaymentService:
    return RecordingPaymentService(calls)


@pytest.fixture
def seat_reservation_service(calls: list) -> RecordingSeatReservationService:
    return RecordingSeatReservationService(calls)


@pytest.fixture
def ticket_service(
    payment_service: RecordingPaymentService,
    seat_reservation_service: RecordingSeatReservationService,
) -> TicketService:
    return TicketService(payment_service, seat_reservation_service)
