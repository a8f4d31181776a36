import time
from collections.abc import Callable
from functools import wraps

from prometheus_client import Counter, Histogram


TICKET_PURCHASES_TOTAL = Counter(
    "ticket_purchases_total",
    "Total number of ticket purchase requests",
    ["status", "reason"],
)

TICKETS_SOLD_TOTAL = Counter(
    "tickets_sold_total",
    "Total tickets sold",
    ["ticket_type"],
)

TICKET_REVENUE_TOTAL = Counter(
    "ticket_revenue_total",
    "Total amount charged for tickets, in whole pounds",
)

PURCHASE_DURATION_SECONDS = Histogram(
    "purchase_duration_seconds",
    "Ticket purchase processing duration",
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)


def track_purchase_duration[**P, R](
    func: Callable[P, R],
) -> Callable[P, R]:
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            duration = time.perf_counter() - start
            PURCHASE_DURATION_SECONDS.observe(duration)

    return wrapper
