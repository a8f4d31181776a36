from enum import Enum


class DomainError(Exception):
    """Base exception for domain errors."""


class RejectionReason(Enum):
    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    NO_TICKET_REQUESTS = "NO_TICKET_REQUESTS"
    MALFORMED_REQUEST = "MALFORMED_REQUEST"
    INVALID_TICKET_COUNT = "INVALID_TICKET_COUNT"
    NO_TICKETS = "NO_TICKETS"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    ADULT_REQUIRED = "ADULT_REQUIRED"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_SEAT_COUNT = "INVALID_SEAT_COUNT"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase request fails validation or a business rule."""

    def __init__(self, reason: RejectionReason, message: str) -> None:
        self.reason = reason
        self.message = message
        super().__init__(message)
