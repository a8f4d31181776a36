"""Application layer - the purchase service and its collaborator interfaces."""

from ticket_service.application.ports import (
    PaymentGateway,
    RefundingPaymentGateway,
    SeatReservationGateway,
)
from ticket_service.application.services import TicketService


__all__ = [
    "PaymentGateway",
    "RefundingPaymentGateway",
    "SeatReservationGateway",
    "TicketService",
]
