"""
Dashboard statistics derived from the order store
"""
from datetime import datetime
from decimal import Decimal
from typing import Callable, Iterable

from models.cart import to_money
from models.order import Order, OrderStatus, DashboardStats

DEFAULT_PREP_MINUTES = 15
BASELINE_AVG_PREP_MINUTES = 18


def compute_dashboard_stats(orders: Iterable[Order], now: datetime) -> DashboardStats:
    """Summarize ``orders`` as seen at ``now``.

    Today means the local calendar day of ``now``. The average prep time
    covers served orders of any day and falls back to a fixed baseline when
    nothing has been served yet.
    """
    orders = list(orders)
    today = now.date()

    todays_orders = [order for order in orders if order.created_at.date() == today]
    revenue = sum((order.total_amount for order in todays_orders), Decimal("0"))
    active = [order for order in orders if not order.status.is_terminal]

    served = [order for order in orders if order.status is OrderStatus.SERVED]
    if served:
        prep_minutes = [
            order.estimated_time_minutes if order.estimated_time_minutes is not None
            else DEFAULT_PREP_MINUTES
            for order in served
        ]
        avg_prep = sum(prep_minutes) / len(prep_minutes)
    else:
        avg_prep = float(BASELINE_AVG_PREP_MINUTES)

    return DashboardStats(
        total_orders_today=len(todays_orders),
        total_revenue_today=to_money(revenue),
        active_order_count=len(active),
        avg_prep_time_minutes=avg_prep
    )


class StatsAggregator:
    # Recomputes the stats from the store on every call

    def __init__(self, order_store, clock: Callable[[], datetime] = datetime.now):
        self.order_store = order_store
        self.clock = clock

    def compute(self) -> DashboardStats:
        return compute_dashboard_stats(self.order_store.all_orders(), self.clock())
