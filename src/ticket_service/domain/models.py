from dataclasses import dataclass
from enum import Enum


ADULT_PRICE = 25
CHILD_PRICE = 15
INFANT_PRICE = 0

MAX_TICKETS_PER_PURCHASE = 25


class TicketType(Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class TicketRequest:
    """A request for ``count`` tickets of a single category."""

    ticket_type: TicketType
    count: int

    def __post_init__(self) -> None:
        if isinstance(self.ticket_type, str):
            try:
                object.__setattr__(self, "ticket_type", TicketType(self.ticket_type))
            except ValueError:
                raise ValueError(f"Unknown ticket type: {self.ticket_type!r}") from None
        elif not isinstance(self.ticket_type, TicketType):
            raise TypeError("Ticket type must be a TicketType or its name")

        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError("Number of tickets must be an integer")
        if self.count < 0:
            raise ValueError("Number of tickets cannot be negative")


@dataclass(frozen=True)
class TicketCounts:
    adults: int = 0
    children: int = 0
    infants: int = 0

    @property
    def total(self) -> int:
        return self.adults + self.children + self.infants


@dataclass(frozen=True)
class PurchaseDecision:
    counts: TicketCounts
    total_amount: int
    total_seats: int
