"""
Dashboard service - admin statistics and order listings
"""
from typing import Dict, Any

from core.stats import StatsAggregator
from storage.order_store import OrderStore

RECENT_ORDER_LIMIT = 5
ACTIVE_ORDER_LIMIT = 4


class DashboardService:

    def __init__(self, order_store: OrderStore, aggregator: StatsAggregator):
        self.order_store = order_store
        self.aggregator = aggregator

    def get_stats(self) -> Dict[str, Any]:
        return {
            "success": True,
            "stats": self.aggregator.compute().to_dict()
        }

    def get_dashboard(self) -> Dict[str, Any]:
        # Stats plus the latest orders and a short list of open ones
        return {
            "success": True,
            "stats": self.aggregator.compute().to_dict(),
            "recent_orders": [order.to_dict() for order in self.order_store.recent(RECENT_ORDER_LIMIT)],
            "active_orders": [
                order.to_dict() for order in self.order_store.get_active()[:ACTIVE_ORDER_LIMIT]
            ]
        }
