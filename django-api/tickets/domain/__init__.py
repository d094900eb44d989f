from tickets.domain.models import CalculationResult
from tickets.domain.value_objects import AccountId, Money, TicketCategory, TicketCategoryRequest

__all__ = [
    "CalculationResult",
    "TicketCategory",
    "TicketCategoryRequest",
    "AccountId",
    "Money",
]
