"""In-process collaborators used when no real payment or seat system is wired in.

They validate their arguments the way the external systems do, log every call
and remember it, which is enough for local runs and demos.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import structlog

from ticket_service.application.ports import RefundingPaymentGateway, SeatReservationGateway


logger = structlog.get_logger()


@dataclass(frozen=True)
class GatewayCall:
    operation: str
    account_id: int
    value: int
    called_at: datetime = field(default_factory=lambda: datetime.now(UTC))


def _check_account_id(account_id: int) -> None:
    if isinstance(account_id, bool) or not isinstance(account_id, int):
        raise TypeError("accountId must be an integer")
    if account_id <= 0:
        raise ValueError("accountId must be greater than zero")


def _check_quantity(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if value < 0:
        raise ValueError(f"{name} cannot be negative")


class LoggingPaymentGateway(RefundingPaymentGateway):
    def __init__(self) -> None:
        self.calls: list[GatewayCall] = []

    def make_payment(self, account_id: int, amount: int) -> None:
        _check_account_id(account_id)
        _check_quantity("amount", amount)
        self.calls.append(GatewayCall("make_payment", account_id, amount))
        logger.info("payment_taken", account_id=account_id, amount=amount)

    def refund_payment(self, account_id: int, amount: int) -> None:
        _check_account_id(account_id)
        _check_quantity("amount", amount)
        self.calls.append(GatewayCall("refund_payment", account_id, amount))
        logger.info("payment_returned", account_id=account_id, amount=amount)


class LoggingSeatReservationGateway(SeatReservationGateway):
    def __init__(self) -> None:
        self.calls: list[GatewayCall] = []

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        _check_account_id(account_id)
        _check_quantity("seat_count", seat_count)
        self.calls.append(GatewayCall("reserve_seat", account_id, seat_count))
        logger.info("seats_held", account_id=account_id, seat_count=seat_count)
