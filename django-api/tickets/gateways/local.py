"""In-process gateways that log and record calls instead of reaching out.

They validate their arguments the way the real collaborators do, so a bad
call surfaces as a MALFORMED_ARGUMENT failure.
"""

import logging

from tickets.domain.errors import GatewayError, GatewayFailureKind
from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


def _require_whole_number(value: object, name: str, *, positive: bool = False) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise GatewayError(GatewayFailureKind.MALFORMED_ARGUMENT, f"{name} must be an integer")
    if value < 0 or (positive and value == 0):
        raise GatewayError(GatewayFailureKind.MALFORMED_ARGUMENT, f"{name} is out of range")


class LocalSeatReservationGateway(SeatReservationGateway):
    """Seat reservation gateway that only records reservations."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int]] = []

    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        _require_whole_number(account_id, "account_id", positive=True)
        _require_whole_number(total_seats, "total_seats")
        self.calls.append((account_id, total_seats))
        logger.info("Seats reserved", extra={"account_id": account_id, "total_seats": total_seats})


class LocalPaymentGateway(PaymentGateway):
    """Payment gateway that only records charges."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int]] = []

    def make_payment(self, account_id: int, total_amount: int) -> None:
        _require_whole_number(account_id, "account_id", positive=True)
        _require_whole_number(total_amount, "total_amount")
        self.calls.append((account_id, total_amount))
        logger.info("Payment taken", extra={"account_id": account_id, "total_amount": total_amount})
