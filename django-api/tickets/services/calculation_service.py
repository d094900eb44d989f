"""Ticket calculation service - the business rules for a purchase.

The service:
- Sums requested quantities per category
- Enforces the per-purchase ticket bounds
- Caps child and infant tickets by the number of adult tickets
- Prices the purchase and counts the seats it occupies

Business rule violations are returned as rejected results. Only a missing or
empty request list raises.
"""

import logging
from collections.abc import Sequence
from decimal import Decimal

from tickets.domain.errors import InvalidInputError
from tickets.domain.models import CalculationResult
from tickets.domain.value_objects import Money, TicketCategory, TicketCategoryRequest

logger = logging.getLogger(__name__)

MIN_TICKETS = 1
MAX_TICKETS = 25

TICKET_PRICES: dict[TicketCategory, Money] = {
    TicketCategory.ADULT: Money(Decimal("25.00")),
    TicketCategory.CHILD: Money(Decimal("15.00")),
    TicketCategory.INFANT: Money(Decimal("0.00")),
}

# Infants sit on an adult's lap.
SEATED_CATEGORIES = frozenset({TicketCategory.ADULT, TicketCategory.CHILD})

TICKET_COUNT_REASON = f"please request between {MIN_TICKETS} and {MAX_TICKETS} tickets in total"
ACCOMPANIMENT_REASON = (
    "Child or infant tickets can only be purchased up to the same number of adult ones."
)


class TicketCalculationService:
    """Validates ticket requests and computes seats and cost."""

    def compute(self, requests: Sequence[TicketCategoryRequest] | None) -> CalculationResult:
        """Return the calculation result for a list of ticket requests.

        Raises:
            InvalidInputError: If requests is None, not a list, or empty.
        """
        if not requests or not isinstance(requests, (list, tuple)):
            raise InvalidInputError()

        counts = self._count_by_category(requests)
        adults = counts[TicketCategory.ADULT]
        accompanying = counts[TicketCategory.CHILD] + counts[TicketCategory.INFANT]
        total = adults + accompanying

        if (
            total < MIN_TICKETS
            or total > MAX_TICKETS
            or any(request.quantity < 0 for request in requests)
        ):
            logger.debug("Rejected ticket count", extra={"total": total})
            return CalculationResult.rejected(TICKET_COUNT_REASON)

        # Covers both a purchase with no adults and one with too few.
        if accompanying > adults:
            logger.debug(
                "Rejected unaccompanied tickets",
                extra={"adults": adults, "accompanying": accompanying},
            )
            return CalculationResult.rejected(ACCOMPANIMENT_REASON)

        total_seats = sum(counts[category] for category in SEATED_CATEGORIES)
        cost = Money.zero()
        for category, quantity in counts.items():
            cost = cost + TICKET_PRICES[category].times(quantity)

        logger.debug("Computed tickets", extra={"total_seats": total_seats, "cost": str(cost)})
        return CalculationResult.success(total_seats=total_seats, cost=cost)

    def _count_by_category(
        self, requests: Sequence[TicketCategoryRequest]
    ) -> dict[TicketCategory, int]:
        counts = {category: 0 for category in TicketCategory}
        for request in requests:
            counts[request.category] += request.quantity
        return counts
