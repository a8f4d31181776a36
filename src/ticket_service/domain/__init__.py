"""Domain layer - ticket values and purchase rules."""

from ticket_service.domain.exceptions import (
    DomainError,
    InvalidPurchaseError,
    RejectionReason,
)
from ticket_service.domain.models import (
    ADULT_PRICE,
    CHILD_PRICE,
    INFANT_PRICE,
    MAX_TICKETS_PER_PURCHASE,
    PurchaseDecision,
    TicketCounts,
    TicketRequest,
    TicketType,
)
from ticket_service.domain.rules import decide_purchase


__all__ = [
    "ADULT_PRICE",
    "CHILD_PRICE",
    "INFANT_PRICE",
    "MAX_TICKETS_PER_PURCHASE",
    "DomainError",
    "InvalidPurchaseError",
    "PurchaseDecision",
    "RejectionReason",
    "TicketCounts",
    "TicketRequest",
    "TicketType",
    "decide_purchase",
]
