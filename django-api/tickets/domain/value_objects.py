"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Self

from tickets.domain.errors import ConstructionError

WHOLE_UNIT = Decimal("1")


class TicketCategory(Enum):
    """Closed set of ticket categories."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @classmethod
    def parse(cls, value: "TicketCategory | str") -> Self:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        raise ConstructionError(f"Unknown ticket category: {value!r}")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class TicketCategoryRequest:
    """A number of tickets requested for one category."""

    category: TicketCategory
    quantity: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", TicketCategory.parse(self.category))
        if not _is_int(self.quantity):
            raise ConstructionError("Ticket quantity must be an integer")
        if self.quantity < 0:
            raise ConstructionError("Ticket quantity cannot be negative")


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=Decimal("0.00"))

    def __add__(self, other: "Money") -> "Money":
        return Money(amount=self.amount + other.amount)

    def times(self, quantity: int) -> "Money":
        return Money(amount=self.amount * quantity)

    def to_whole_units(self) -> int:
        """Round half away from zero to a whole currency unit."""
        return int(self.amount.quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP))

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class AccountId:
    """Purchaser identifier; only well-formedness is checked."""

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value) or self.value <= 0:
            raise ValueError("Account ID must be a positive integer")
