"""Unit tests for TicketPurchaseService.

These test error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from decimal import Decimal
from unittest.mock import call, create_autospec

import pytest

from tickets.domain import CalculationResult, Money
from tickets.domain.errors import GatewayError, GatewayFailureKind, PurchaseRejectedError
from tickets.services import TicketCalculationService, TicketPurchaseService


def _service(collaborators, calculation_service=None) -> TicketPurchaseService:
    return TicketPurchaseService(
        payment_gateway=collaborators.payments,
        seat_reservation_gateway=collaborators.seats,
        calculation_service=calculation_service,
    )


def _engine_returning(result: CalculationResult):
    engine = create_autospec(TicketCalculationService, instance=True)
    engine.compute.return_value = result
    return engine


class TestPurchaseTickets:
    """Tests for the happy path."""

    def test_reserves_then_pays(self, collaborators, make_tickets):
        """Seats are reserved before payment, each exactly once."""
        _service(collaborators).purchase_tickets(7, make_tickets(adults=2, children=2))

        assert collaborators.mock_calls == [
            call.seats.reserve_seat(7, 4),
            call.payments.make_payment(7, 80),
        ]

    def test_returns_charged_calculation(self, collaborators, make_tickets):
        result = _service(collaborators).purchase_tickets(1, make_tickets(adults=1, infants=1))
        assert result.total_seats == 1
        assert result.cost == Money(Decimal("25.00"))

    def test_rounds_values_half_away_from_zero(self, collaborators, make_tickets):
        """Fractional values from a substitute engine are rounded for collaborators."""
        engine = _engine_returning(
            CalculationResult.success(total_seats=2.5, cost=Money(Decimal("62.50")))
        )
        _service(collaborators, engine).purchase_tickets(3, make_tickets(adults=3))

        assert collaborators.mock_calls == [
            call.seats.reserve_seat(3, 3),
            call.payments.make_payment(3, 63),
        ]

    def test_calls_are_independent(self, collaborators, make_tickets):
        service = _service(collaborators)
        service.purchase_tickets(1, make_tickets(adults=1))
        service.purchase_tickets(2, make_tickets(adults=2))

        assert collaborators.payments.make_payment.call_args_list == [call(1, 25), call(2, 50)]

    def test_collaborators_are_private(self, collaborators):
        service = _service(collaborators)
        assert not hasattr(service, "payment_gateway")
        assert not hasattr(service, "_payment_gateway")


class TestPurchaseRejections:
    """Tests for PurchaseRejectedError mapping."""

    @pytest.mark.parametrize("account_id", [0, -5, 1.5, "12", None, True])
    def test_invalid_account_id(self, collaborators, make_tickets, account_id):
        """An invalid account is rejected before any collaborator is called."""
        with pytest.raises(PurchaseRejectedError) as excinfo:
            _service(collaborators).purchase_tickets(account_id, make_tickets(adults=1))

        assert excinfo.value.message == "Invalid account ID"
        assert collaborators.mock_calls == []

    def test_business_rejection_joins_reasons(self, collaborators, make_tickets):
        with pytest.raises(PurchaseRejectedError) as excinfo:
            _service(collaborators).purchase_tickets(1, make_tickets(adults=1, children=2))

        assert excinfo.value.message == (
            "Invalid purchase: Child or infant tickets can only be purchased "
            "up to the same number of adult ones."
        )
        assert collaborators.mock_calls == []

    def test_multiple_reasons_are_joined(self, collaborators, make_tickets):
        engine = _engine_returning(CalculationResult(errors=("first", "second")))
        with pytest.raises(PurchaseRejectedError) as excinfo:
            _service(collaborators, engine).purchase_tickets(1, make_tickets(adults=1))

        assert excinfo.value.message == "Invalid purchase: first, second"

    def test_malformed_calculation_result(self, collaborators, make_tickets):
        engine = _engine_returning(CalculationResult(total_seats=2))
        with pytest.raises(PurchaseRejectedError) as excinfo:
            _service(collaborators, engine).purchase_tickets(1, make_tickets(adults=2))

        assert excinfo.value.message == "Invalid calculation result"
        assert collaborators.mock_calls == []

    def test_empty_requests_are_wrapped(self, collaborators):
        """The engine's contract error does not leak across the service boundary."""
        with pytest.raises(PurchaseRejectedError) as excinfo:
            _service(collaborators).purchase_tickets(1, [])

        assert excinfo.value.message == "Failed to process ticket purchase"

    def test_unexpected_error_is_wrapped(self, collaborators, make_tickets):
        engine = create_autospec(TicketCalculationService, instance=True)
        engine.compute.side_effect = RuntimeError("boom")

        with pytest.raises(PurchaseRejectedError) as excinfo:
            _service(collaborators, engine).purchase_tickets(1, make_tickets(adults=1))

        assert excinfo.value.message == "Failed to process ticket purchase"
        assert isinstance(excinfo.value.__cause__, RuntimeError)


class TestCollaboratorFailures:
    """Tests for translate-or-propagate of gateway errors."""

    def test_malformed_reservation_is_rejected(self, collaborators, make_tickets):
        collaborators.seats.reserve_seat.side_effect = GatewayError(
            GatewayFailureKind.MALFORMED_ARGUMENT, "bad seats"
        )
        with pytest.raises(PurchaseRejectedError) as excinfo:
            _service(collaborators).purchase_tickets(1, make_tickets(adults=1))

        assert excinfo.value.message == "Invalid seat reservation request"
        collaborators.payments.make_payment.assert_not_called()

    def test_malformed_payment_is_rejected(self, collaborators, make_tickets):
        collaborators.payments.make_payment.side_effect = GatewayError(
            GatewayFailureKind.MALFORMED_ARGUMENT, "bad amount"
        )
        with pytest.raises(PurchaseRejectedError) as excinfo:
            _service(collaborators).purchase_tickets(1, make_tickets(adults=1))

        assert excinfo.value.message == "Invalid payment request"

    def test_unavailable_reservation_propagates(self, collaborators, make_tickets):
        failure = GatewayError(GatewayFailureKind.UNAVAILABLE, "seat system down")
        collaborators.seats.reserve_seat.side_effect = failure

        with pytest.raises(GatewayError) as excinfo:
            _service(collaborators).purchase_tickets(1, make_tickets(adults=1))

        assert excinfo.value is failure
        collaborators.payments.make_payment.assert_not_called()

    def test_unavailable_payment_propagates_without_compensation(
        self, collaborators, make_tickets
    ):
        """A reservation is not undone when payment fails afterwards."""
        failure = GatewayError(GatewayFailureKind.UNAVAILABLE, "payments down")
        collaborators.payments.make_payment.side_effect = failure

        with pytest.raises(GatewayError) as excinfo:
            _service(collaborators).purchase_tickets(1, make_tickets(adults=1))

        assert excinfo.value is failure
        collaborators.seats.reserve_seat.assert_called_once_with(1, 1)

    @pytest.mark.parametrize("failure", [ConnectionError("net down"), TimeoutError("slow")])
    def test_infrastructure_payment_failure_propagates(self, collaborators, make_tickets, failure):
        """Failures that are not GatewayErrors leave the service untouched."""
        collaborators.payments.make_payment.side_effect = failure

        with pytest.raises(type(failure)) as excinfo:
            _service(collaborators).purchase_tickets(1, make_tickets(adults=1))

        assert excinfo.value is failure

    def test_infrastructure_reservation_failure_propagates(self, collaborators, make_tickets):
        failure = ConnectionError("seat system unreachable")
        collaborators.seats.reserve_seat.side_effect = failure

        with pytest.raises(ConnectionError) as excinfo:
            _service(collaborators).purchase_tickets(1, make_tickets(adults=1))

        assert excinfo.value is failure
        collaborators.payments.make_payment.assert_not_called()
