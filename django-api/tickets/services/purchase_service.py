"""Ticket purchase service - reserves and charges a validated purchase.

Services:
- Depend only on interfaces (gateways)
- Validate the purchaser identifier
- Delegate business rules to the calculation service
- Map every user-facing failure to PurchaseRejectedError

Collaborator failures other than a malformed argument are not ours to
explain and propagate unchanged. A payment failure after a successful
reservation is not compensated.
"""

import logging
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from tickets.domain.errors import GatewayError, PurchaseRejectedError
from tickets.domain.models import CalculationResult
from tickets.domain.value_objects import WHOLE_UNIT, AccountId, TicketCategoryRequest
from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway
from tickets.services.calculation_service import TicketCalculationService

logger = logging.getLogger(__name__)


def _round_half_up(value: int | float | Decimal) -> int:
    return int(Decimal(value).quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP))


class TicketPurchaseService:
    """Service for purchasing tickets."""

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        seat_reservation_gateway: SeatReservationGateway,
        calculation_service: TicketCalculationService | None = None,
    ) -> None:
        self.__payment_gateway = payment_gateway
        self.__seat_reservation_gateway = seat_reservation_gateway
        if calculation_service is None:
            calculation_service = TicketCalculationService()
        self.__calculation_service = calculation_service

    def purchase_tickets(
        self, account_id: int, requests: Sequence[TicketCategoryRequest]
    ) -> CalculationResult:
        """Reserve seats and take payment for a ticket purchase.

        Returns the calculation the purchase was charged for.

        Raises:
            PurchaseRejectedError: If the account or tickets are invalid, or a
                collaborator rejects its arguments.
            Exception: Any other collaborator failure, unchanged.
        """
        try:
            account, result, total_seats, total_amount = self.__prepare(account_id, requests)
            self.__reserve_seats(account, total_seats)
            self.__take_payment(account, total_amount)
        except PurchaseRejectedError as exc:
            logger.warning(
                "Ticket purchase rejected",
                extra={"account_id": account_id, "reason": exc.message},
            )
            raise

        logger.info(
            "Ticket purchase completed",
            extra={"account_id": account.value, "total_seats": total_seats, "amount": total_amount},
        )
        return result

    def __prepare(
        self, account_id: int, requests: Sequence[TicketCategoryRequest]
    ) -> tuple[AccountId, CalculationResult, int, int]:
        """Validate the purchase and work out what to reserve and charge.

        Nothing raised here comes from a collaborator, so unexpected errors
        are reported as a failed purchase.
        """
        try:
            try:
                account = AccountId(account_id)
            except ValueError as exc:
                raise PurchaseRejectedError("Invalid account ID") from exc

            result = self.__calculation_service.compute(requests)
            if result.errors:
                raise PurchaseRejectedError(f"Invalid purchase: {', '.join(result.errors)}")
            if not result.is_valid:
                raise PurchaseRejectedError("Invalid calculation result")

            return account, result, _round_half_up(result.total_seats), result.cost.to_whole_units()
        except PurchaseRejectedError:
            raise
        except Exception as exc:
            logger.exception("Ticket purchase failed", extra={"account_id": account_id})
            raise PurchaseRejectedError("Failed to process ticket purchase") from exc

    def __reserve_seats(self, account: AccountId, total_seats: int) -> None:
        try:
            self.__seat_reservation_gateway.reserve_seat(account.value, total_seats)
        except Exception as exc:
            if isinstance(exc, GatewayError) and exc.is_malformed_argument:
                raise PurchaseRejectedError("Invalid seat reservation request") from exc
            _log_collaborator_failure("seat reservation", account, exc)
            raise

    def __take_payment(self, account: AccountId, total_amount: int) -> None:
        try:
            self.__payment_gateway.make_payment(account.value, total_amount)
        except Exception as exc:
            if isinstance(exc, GatewayError) and exc.is_malformed_argument:
                raise PurchaseRejectedError("Invalid payment request") from exc
            _log_collaborator_failure("payment", account, exc)
            raise


def _log_collaborator_failure(collaborator: str, account: AccountId, exc: Exception) -> None:
    logger.error(
        "Collaborator failed during ticket purchase",
        extra={"account_id": account.value, "collaborator": collaborator, "error": type(exc).__name__},
    )
