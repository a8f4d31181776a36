"""Shared pytest fixtures for ticket service tests."""

import logging
from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
import structlog
from prometheus_client import REGISTRY

from ticket_service.application.ports import RefundingPaymentGateway, SeatReservationGateway
from ticket_service.application.services import TicketService
from ticket_service.domain.models import TicketRequest, TicketType


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo any logging configuration a test applied."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    structlog.reset_defaults()
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def calls() -> MagicMock:
    """Parent mock recording collaborator calls across both gateways in order."""
    return MagicMock()


@pytest.fixture
def mock_payment_gateway(calls: MagicMock) -> MagicMock:
    """Create mock payment gateway that supports refunds."""
    gateway = MagicMock(spec=RefundingPaymentGateway)
    calls.attach_mock(gateway.make_payment, "make_payment")
    calls.attach_mock(gateway.refund_payment, "refund_payment")
    return gateway


@pytest.fixture
def mock_seat_gateway(calls: MagicMock) -> MagicMock:
    """Create mock seat reservation gateway."""
    gateway = MagicMock(spec=SeatReservationGateway)
    calls.attach_mock(gateway.reserve_seat, "reserve_seat")
    return gateway


@pytest.fixture
def service(mock_payment_gateway: MagicMock, mock_seat_gateway: MagicMock) -> TicketService:
    """Create TicketService with mocked collaborators."""
    return TicketService(mock_payment_gateway, mock_seat_gateway)


@pytest.fixture
def atomic_service(mock_payment_gateway: MagicMock, mock_seat_gateway: MagicMock) -> TicketService:
    """Create TicketService that refunds payment when seat reservation fails."""
    return TicketService(mock_payment_gateway, mock_seat_gateway, atomic=True)


def adults(count: int) -> TicketRequest:
    return TicketRequest(TicketType.ADULT, count)


def children(count: int) -> TicketRequest:
    return TicketRequest(TicketType.CHILD, count)


def infants(count: int) -> TicketRequest:
    return TicketRequest(TicketType.INFANT, count)


def sample_value(name: str, labels: dict[str, str] | None = None) -> float:
    """Read a metric from the default registry, treating missing samples as zero."""
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0
