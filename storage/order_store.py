"""
In-memory order registry
"""
import logging
from dataclasses import replace
from datetime import datetime
from threading import RLock
from typing import Callable, Iterable, List, Optional

from models.order import Order, OrderStatus
from core.errors import DuplicateOrderError, IllegalTransitionError, OrderNotFoundError
from core.lifecycle import check_transition, can_transition

logger = logging.getLogger(__name__)

StatusListener = Callable[[Order], None]


class OrderStore:
    # Authoritative collection of placed orders, most recent first

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self.clock = clock
        self._orders: List[Order] = []
        self._by_id = {}
        self._listeners: List[StatusListener] = []
        self._lock = RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)

    def subscribe(self, listener: StatusListener) -> None:
        # Listeners are called with a snapshot after every applied status change
        with self._lock:
            self._listeners.append(listener)

    def unsubscribe(self, listener: StatusListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def seed(self, orders: Iterable[Order]) -> None:
        # Load historical orders, keeping the given display order
        with self._lock:
            for order in orders:
                if order.id in self._by_id:
                    raise DuplicateOrderError(f"Order {order.id} already exists")
                self._orders.append(order)
                self._by_id[order.id] = order

    def insert(self, order: Order) -> Order:
        with self._lock:
            if order.id in self._by_id:
                raise DuplicateOrderError(f"Order {order.id} already exists")
            stored = replace(order)
            self._orders.insert(0, stored)
            self._by_id[stored.id] = stored
            logger.info("Order %s placed (%s)", stored.id, stored.total_amount)
            return replace(stored)

    def update_status(self, order_id: str, new_status: OrderStatus) -> Order:
        """Apply a manual status change.

        Forward moves may skip steps; cancelled is reachable from any open
        status. Raises OrderNotFoundError or IllegalTransitionError.
        """
        with self._lock:
            order = self._by_id.get(order_id)
            if order is None:
                raise OrderNotFoundError(f"Order {order_id} not found")
            try:
                check_transition(order_id, order.status, new_status)
            except IllegalTransitionError as e:
                logger.warning("Rejected status change: %s", e)
                raise
            return self._apply(order, new_status)

    def advance_if_current(self, order_id: str, expected: OrderStatus,
                           target: OrderStatus,
                           should_apply: Optional[Callable[[], bool]] = None) -> Optional[Order]:
        # Timed step; returns None instead of failing when the order moved on
        # or when should_apply, checked under the store lock, says no
        with self._lock:
            if should_apply is not None and not should_apply():
                return None
            order = self._by_id.get(order_id)
            if order is None or order.status is not expected:
                return None
            if not can_transition(order.status, target):
                return None
            return self._apply(order, target)

    def get_by_id(self, order_id: str) -> Optional[Order]:
        with self._lock:
            order = self._by_id.get(order_id)
            return replace(order) if order else None

    def get_active(self) -> List[Order]:
        with self._lock:
            return [replace(order) for order in self._orders if not order.status.is_terminal]

    def all_orders(self) -> List[Order]:
        with self._lock:
            return [replace(order) for order in self._orders]

    def recent(self, limit: int = 5) -> List[Order]:
        with self._lock:
            return [replace(order) for order in self._orders[:limit]]

    def _apply(self, order: Order, new_status: OrderStatus) -> Order:
        # Caller holds the lock; updated_at never moves backwards
        previous = order.status
        order.status = new_status
        order.updated_at = max(self.clock(), order.updated_at)
        logger.info("Order %s: %s -> %s", order.id, previous.value, new_status.value)

        snapshot = replace(order)
        for listener in list(self._listeners):
            listener(replace(snapshot))
        return snapshot
