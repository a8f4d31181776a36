"""Purchase validation, aggregation and pricing rules.

Every check raises ``InvalidPurchaseError`` with a distinct reason, so callers
can tell rules apart without parsing messages.
"""

from collections.abc import Sequence
from typing import Any

from ticket_service.domain.exceptions import InvalidPurchaseError, RejectionReason
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


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_account_id(account_id: Any) -> None:
    if not _is_int(account_id) or account_id <= 0:
        raise InvalidPurchaseError(
            RejectionReason.INVALID_ACCOUNT,
            "accountId must be an integer > 0",
        )


def validate_requests(requests: Sequence[Any] | None) -> None:
    if not requests:
        raise InvalidPurchaseError(
            RejectionReason.NO_TICKET_REQUESTS,
            "No ticket requests provided",
        )

    for request in requests:
        if not isinstance(request, TicketRequest):
            raise InvalidPurchaseError(
                RejectionReason.MALFORMED_REQUEST,
                "Each request must have a type and number of tickets",
            )
        # already checked by TicketRequest unless construction was bypassed
        if not isinstance(request.ticket_type, TicketType):
            raise InvalidPurchaseError(
                RejectionReason.MALFORMED_REQUEST,
                f"Unknown ticket type: {request.ticket_type!r}",
            )
        if not _is_int(request.count) or request.count < 0:
            raise InvalidPurchaseError(
                RejectionReason.INVALID_TICKET_COUNT,
                "Ticket counts must be integers >= 0",
            )


def count_tickets(requests: Sequence[TicketRequest]) -> TicketCounts:
    adults = children = infants = 0

    for request in requests:
        match request.ticket_type:
            case TicketType.ADULT:
                adults += request.count
            case TicketType.CHILD:
                children += request.count
            case TicketType.INFANT:
                infants += request.count

    return TicketCounts(adults=adults, children=children, infants=infants)


def check_business_rules(counts: TicketCounts) -> None:
    """Apply the per-purchase rules in order; the first violation wins."""
    total = counts.total

    if total == 0:
        raise InvalidPurchaseError(
            RejectionReason.NO_TICKETS,
            "At least one ticket must be purchased",
        )

    if total > MAX_TICKETS_PER_PURCHASE:
        raise InvalidPurchaseError(
            RejectionReason.TOO_MANY_TICKETS,
            f"Cannot purchase more than {MAX_TICKETS_PER_PURCHASE} tickets at a time",
        )

    if (counts.children > 0 or counts.infants > 0) and counts.adults == 0:
        raise InvalidPurchaseError(
            RejectionReason.ADULT_REQUIRED,
            "Child and Infant tickets require at least one Adult ticket",
        )

    # infants sit on an adult's lap, one per adult
    if counts.infants > counts.adults:
        raise InvalidPurchaseError(
            RejectionReason.TOO_MANY_INFANTS,
            "Each infant must be accompanied by an adult (infants <= adults)",
        )


def calculate_amount(counts: TicketCounts) -> int:
    total = counts.adults * ADULT_PRICE + counts.children * CHILD_PRICE + counts.infants * INFANT_PRICE
    if not _is_int(total) or total < 0:
        raise InvalidPurchaseError(
            RejectionReason.INVALID_AMOUNT,
            "Calculated amount must be a non-negative integer",
        )
    return total


def calculate_seats(counts: TicketCounts) -> int:
    # infants do not get a seat
    seats = counts.adults + counts.children
    if not _is_int(seats) or seats < 0:
        raise InvalidPurchaseError(
            RejectionReason.INVALID_SEAT_COUNT,
            "Calculated seats must be a non-negative integer",
        )
    return seats


def decide_purchase(account_id: Any, requests: Sequence[Any] | None) -> PurchaseDecision:
    """Validate a purchase and work out what to charge and how many seats to hold.

    Raises:
        InvalidPurchaseError: On the first failing check.
    """
    validate_account_id(account_id)
    validate_requests(requests)

    counts = count_tickets(requests)  # type: ignore[arg-type]
    check_business_rules(counts)

    return PurchaseDecision(
        counts=counts,
        total_amount=calculate_amount(counts),
        total_seats=calculate_seats(counts),
    )
