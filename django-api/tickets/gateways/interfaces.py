"""Collaborator interfaces (ports).

Gateways must be swappable. Failures are reported as GatewayError with an
explicit GatewayFailureKind.
"""

from abc import ABC, abstractmethod


class SeatReservationGateway(ABC):
    """Interface for the external seat reservation system."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        """Reserve total_seats seats for the account."""
        ...


class PaymentGateway(ABC):
    """Interface for the external payment system."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount: int) -> None:
        """Charge total_amount whole currency units to the account."""
        ...
