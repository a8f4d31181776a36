import structlog

from ticket_service.application.ports import PaymentGateway, SeatReservationGateway
from ticket_service.application.services import TicketService
from ticket_service.config import Settings
from ticket_service.config import settings as default_settings
from ticket_service.infrastructure.gateways import (
    LoggingPaymentGateway,
    LoggingSeatReservationGateway,
)
from ticket_service.logging import configure_logging


logger = structlog.get_logger()


def create_ticket_service(
    settings: Settings | None = None,
    payment_gateway: PaymentGateway | None = None,
    seat_gateway: SeatReservationGateway | None = None,
    configure: bool = True,
) -> TicketService:
    """Build a TicketService from settings, falling back to the in-process gateways."""
    settings = settings or default_settings

    if configure:
        configure_logging(
            level=settings.log_level,
            log_format=settings.log_format,
        )

    service = TicketService(
        payment_gateway=payment_gateway or LoggingPaymentGateway(),
        seat_gateway=seat_gateway or LoggingSeatReservationGateway(),
        atomic=settings.atomic_purchase,
        metrics_enabled=settings.metrics_enabled,
    )

    logger.info(
        "ticket_service_created",
        log_level=settings.log_level,
        atomic_purchase=settings.atomic_purchase,
        metrics_enabled=settings.metrics_enabled,
        default_payment_gateway=payment_gateway is None,
        default_seat_gateway=seat_gateway is None,
    )

    return service
