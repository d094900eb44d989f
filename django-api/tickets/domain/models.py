"""Domain models for ticket calculations.

These are pure domain objects with no API input rules and no persistence.
"""

from dataclasses import dataclass
from typing import Self

from tickets.domain.value_objects import Money


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of a ticket calculation.

    Either a success (no errors, seats and cost set) or a rejection
    (errors set, no seats, no cost).
    """

    errors: tuple[str, ...] = ()
    total_seats: int | None = None
    cost: Money | None = None

    @classmethod
    def success(cls, total_seats: int, cost: Money) -> Self:
        return cls(errors=(), total_seats=total_seats, cost=cost)

    @classmethod
    def rejected(cls, reason: str) -> Self:
        return cls(errors=(reason,))

    @property
    def is_success(self) -> bool:
        return not self.errors and self.total_seats is not None and self.cost is not None

    @property
    def is_valid(self) -> bool:
        """True when exactly one of the success / rejection shapes holds."""
        rejected = bool(self.errors) and self.total_seats is None and self.cost is None
        return self.is_success or rejected
