"""
Timed order progression

Each tracked order gets one pending timer that moves it a single step along
pending -> confirmed -> preparing -> ready -> served. Any status change on
the order, manual or automatic, replaces that timer.
"""
import logging
import random
import threading
from functools import partial
from typing import Any, Callable, Dict, Optional, Set

from models.order import Order, OrderStatus
from .lifecycle import next_status, status_rank

logger = logging.getLogger(__name__)


class ThreadingScheduler:
    """Runs callbacks on daemon threading.Timer threads"""

    def schedule(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class StatusSimulator:
    # Schedules automatic status steps for orders being observed

    def __init__(self, order_store, scheduler: Optional[Any] = None,
                 rng: Optional[random.Random] = None,
                 min_delay: float = 8.0, max_delay: float = 15.0):
        if min_delay > max_delay:
            raise ValueError("min_delay must not exceed max_delay")
        self.order_store = order_store
        self.scheduler = scheduler or ThreadingScheduler()
        self.rng = rng or random.Random()
        self.min_delay = min_delay
        self.max_delay = max_delay

        self._lock = threading.Lock()
        self._tracked: Set[str] = set()
        self._timers: Dict[str, Any] = {}
        self._scheduled_from: Dict[str, OrderStatus] = {}
        self._closed = False
        order_store.subscribe(self._on_status_change)

    def track(self, order_id: str) -> bool:
        # Start auto-advancing an order; False if it is unknown or finished
        order = self.order_store.get_by_id(order_id)
        if order is None or order.status.is_terminal:
            return False
        with self._lock:
            if self._closed:
                return False
            self._tracked.add(order_id)
            self._reschedule(order)

        # Catch a status change that landed between the read above and the
        # order being tracked; later changes arrive through the listener
        latest = self.order_store.get_by_id(order_id)
        if latest is not None:
            self._on_status_change(latest)
        return True

    def untrack(self, order_id: str) -> None:
        with self._lock:
            self._forget(order_id)

    def is_tracking(self, order_id: str) -> bool:
        with self._lock:
            return order_id in self._tracked

    @property
    def pending_timers(self) -> int:
        with self._lock:
            return len(self._timers)

    def shutdown(self) -> None:
        with self._lock:
            self._closed = True
            for order_id in list(self._tracked):
                self._forget(order_id)
        # Unsubscribing waits on the store lock, so a step already being
        # applied finishes before this returns and none start afterwards
        self.order_store.unsubscribe(self._on_status_change)
        logger.debug("Status simulator stopped")

    def _on_status_change(self, order: Order) -> None:
        with self._lock:
            if order.id not in self._tracked:
                return
            if order.status.is_terminal:
                self._forget(order.id)
                return
            scheduled_from = self._scheduled_from.get(order.id)
            if scheduled_from is not None and status_rank(scheduled_from) >= status_rank(order.status):
                # already scheduled from this status or a later one
                return
            self._reschedule(order)

    def _reschedule(self, order: Order) -> None:
        # Caller holds self._lock
        self._cancel(order.id)
        target = next_status(order.status)
        if target is None:
            return
        delay = self.rng.uniform(self.min_delay, self.max_delay)
        callback = partial(self._fire, order.id, order.status, target)
        self._timers[order.id] = self.scheduler.schedule(delay, callback)
        self._scheduled_from[order.id] = order.status

    def _forget(self, order_id: str) -> None:
        # Caller holds self._lock
        self._tracked.discard(order_id)
        self._scheduled_from.pop(order_id, None)
        self._cancel(order_id)

    def _cancel(self, order_id: str) -> None:
        timer = self._timers.pop(order_id, None)
        if timer is not None:
            timer.cancel()

    def _is_open(self) -> bool:
        # Called by the store with its lock held; lock order is store -> simulator
        with self._lock:
            return not self._closed

    def _fire(self, order_id: str, expected: OrderStatus, target: OrderStatus) -> None:
        updated = self.order_store.advance_if_current(
            order_id, expected, target, should_apply=self._is_open
        )
        if updated is None:
            logger.debug("Discarded stale step %s -> %s for order %s",
                         expected.value, target.value, order_id)
