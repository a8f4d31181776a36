import structlog
from ulid import ULID

from ticket_service.application.ports import PaymentGateway, SeatReservationGateway
from ticket_service.domain.exceptions import InvalidPurchaseError
from ticket_service.domain.models import PurchaseDecision, TicketRequest, TicketType
from ticket_service.domain.rules import decide_purchase
from ticket_service.infrastructure.metrics import (
    TICKET_PURCHASES_TOTAL,
    TICKET_REVENUE_TOTAL,
    TICKETS_SOLD_TOTAL,
    track_purchase_duration,
)


logger = structlog.get_logger()


class TicketService:
    """Validates and prices a ticket purchase, then takes payment and reserves seats.

    Payment is always requested before seats. By default a failed seat
    reservation leaves the payment in place; with ``atomic=True`` the payment
    is refunded before the seat error is re-raised.
    """

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        seat_gateway: SeatReservationGateway,
        atomic: bool = False,
        metrics_enabled: bool = True,
    ) -> None:
        if atomic and not callable(getattr(payment_gateway, "refund_payment", None)):
            raise ValueError("atomic purchases need a payment gateway that supports refund_payment")

        self._payment_gateway = payment_gateway
        self._seat_gateway = seat_gateway
        self._atomic = atomic
        self._metrics_enabled = metrics_enabled

    def purchase_tickets(self, account_id: int, *requests: TicketRequest) -> None:
        """Buy ``requests`` for ``account_id``.

        Raises:
            InvalidPurchaseError: If the account or requests break any rule.
                Nothing is charged or reserved in that case.
        """
        if self._metrics_enabled:
            self._timed_purchase(account_id, requests)
        else:
            self._purchase(account_id, requests)

    @track_purchase_duration
    def _timed_purchase(self, account_id: int, requests: tuple[TicketRequest, ...]) -> None:
        self._purchase(account_id, requests)

    def _purchase(self, account_id: int, requests: tuple[TicketRequest, ...]) -> None:
        log = logger.bind(purchase_id=str(ULID()), account_id=account_id)

        try:
            decision = decide_purchase(account_id, requests)
        except InvalidPurchaseError as e:
            log.warning("purchase_rejected", reason=e.reason.value, message=e.message)
            self._record_outcome("rejected", e.reason.value)
            raise

        log.info(
            "purchase_priced",
            adults=decision.counts.adults,
            children=decision.counts.children,
            infants=decision.counts.infants,
            total_amount=decision.total_amount,
            total_seats=decision.total_seats,
        )

        try:
            self._payment_gateway.make_payment(account_id, decision.total_amount)
        except Exception:
            self._record_outcome("failed", "PAYMENT_FAILED")
            raise
        log.info("payment_requested", step="1/2", amount=decision.total_amount)

        try:
            self._seat_gateway.reserve_seat(account_id, decision.total_seats)
        except Exception as e:
            self._record_outcome("failed", "SEAT_RESERVATION_FAILED")
            if self._atomic:
                self._refund(account_id, decision, e, log)
            raise
        log.info("seats_requested", step="2/2", seat_count=decision.total_seats)

        self._record_sale(decision)
        log.info("purchase_completed", total_amount=decision.total_amount, total_seats=decision.total_seats)

    def _refund(
        self,
        account_id: int,
        decision: PurchaseDecision,
        seat_error: Exception,
        log: structlog.stdlib.BoundLogger,
    ) -> None:
        try:
            self._payment_gateway.refund_payment(account_id, decision.total_amount)  # type: ignore[attr-defined]
        except Exception as refund_error:
            log.error(
                "payment_refund_failed",
                amount=decision.total_amount,
                error=str(refund_error),
                exc_info=True,
            )
            seat_error.add_note(f"Refund of {decision.total_amount} also failed: {refund_error!r}")
            return
        log.info("payment_refunded", amount=decision.total_amount, error=str(seat_error))

    def _record_outcome(self, status: str, reason: str) -> None:
        if self._metrics_enabled:
            TICKET_PURCHASES_TOTAL.labels(status=status, reason=reason).inc()

    def _record_sale(self, decision: PurchaseDecision) -> None:
        if not self._metrics_enabled:
            return
        TICKET_PURCHASES_TOTAL.labels(status="completed", reason="").inc()
        TICKETS_SOLD_TOTAL.labels(ticket_type=TicketType.ADULT.value).inc(decision.counts.adults)
        TICKETS_SOLD_TOTAL.labels(ticket_type=TicketType.CHILD.value).inc(decision.counts.children)
        TICKETS_SOLD_TOTAL.labels(ticket_type=TicketType.INFANT.value).inc(decision.counts.infants)
        TICKET_REVENUE_TOTAL.inc(decision.total_amount)
