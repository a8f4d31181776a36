"""Collaborator interfaces.

The service only needs objects with these methods; subclassing is optional.
"""

from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge ``amount`` to the account. Raises on failure."""
        ...


class RefundingPaymentGateway(PaymentGateway):
    @abstractmethod
    def refund_payment(self, account_id: int, amount: int) -> None:
        """Return a previously charged ``amount`` to the account."""
        ...


class SeatReservationGateway(ABC):
    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Hold ``seat_count`` seats for the account. Raises on failure."""
        ...
