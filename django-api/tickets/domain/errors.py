"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_TICKET_REQUEST = "INVALID_TICKET_REQUEST"
    INVALID_INPUT = "INVALID_INPUT"
    PURCHASE_REJECTED = "PURCHASE_REJECTED"
    COLLABORATOR_FAILURE = "COLLABORATOR_FAILURE"


class GatewayFailureKind(Enum):
    """How a collaborator failed.

    MALFORMED_ARGUMENT means the call itself was invalid and is reported to
    the purchaser. UNAVAILABLE is an infrastructure failure on the far side.
    """

    MALFORMED_ARGUMENT = "MALFORMED_ARGUMENT"
    UNAVAILABLE = "UNAVAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ConstructionError(DomainError):
    """Raised when a ticket request is built from a bad category or quantity."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_TICKET_REQUEST, message=message)


class InvalidInputError(DomainError):
    """Raised when the calculation engine receives no ticket requests."""

    def __init__(self, message: str = "Invalid ticket request") -> None:
        super().__init__(code=ErrorCode.INVALID_INPUT, message=message)


class PurchaseRejectedError(DomainError):
    """The single user-facing error raised by the purchase service."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.PURCHASE_REJECTED, message=message)


class GatewayError(DomainError):
    """Raised by seat reservation and payment collaborators."""

    def __init__(self, kind: GatewayFailureKind, message: str) -> None:
        super().__init__(code=ErrorCode.COLLABORATOR_FAILURE, message=message)
        self.kind = kind

    @property
    def is_malformed_argument(self) -> bool:
        return self.kind is GatewayFailureKind.MALFORMED_ARGUMENT
