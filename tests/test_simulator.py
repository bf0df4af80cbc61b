"""
Tests for timed order progression
"""
import random
import unittest
from decimal import Decimal

from core.simulator import StatusSimulator
from models.cart import CartLine
from models.order import Order, OrderStatus
from storage.order_store import OrderStore
from helpers import FakeClock, ManualScheduler, make_item


class RacingStore(OrderStore):
    """Store that changes an order right after handing out a snapshot of it"""

    change_on_next_read = None

    def get_by_id(self, order_id):
        snapshot = super().get_by_id(order_id)
        if self.change_on_next_read is not None:
            status, self.change_on_next_read = self.change_on_next_read, None
            self.update_status(order_id, status)
        return snapshot


class TestStatusSimulator(unittest.TestCase):

    def setUp(self):
        self.clock = FakeClock()
        self.store = OrderStore(self.clock)
        self.scheduler = ManualScheduler()
        self.simulator = StatusSimulator(self.store, self.scheduler, random.Random(5), 8.0, 15.0)
        self.store.insert(Order(
            id="ORD-1",
            lines=(CartLine(make_item(), 1),),
            status=OrderStatus.PENDING,
            total_amount=Decimal("10.00"),
            created_at=self.clock.now,
            updated_at=self.clock.now
        ))

    def status(self):
        return self.store.get_by_id("ORD-1").status

    def test_track_schedules_one_step_within_delay_range(self):
        self.assertTrue(self.simulator.track("ORD-1"))
        pending = self.scheduler.pending()
        self.assertEqual(len(pending), 1)
        self.assertTrue(8.0 <= pending[0].delay <= 15.0)

    def test_track_unknown_or_finished_order(self):
        self.assertFalse(self.simulator.track("missing"))
        self.store.update_status("ORD-1", OrderStatus.SERVED)
        self.assertFalse(self.simulator.track("ORD-1"))
        self.assertEqual(self.scheduler.pending(), [])

    def test_walks_every_step_until_served(self):
        self.simulator.track("ORD-1")
        observed = [self.status()]

        while self.scheduler.pending():
            self.clock.advance(seconds=10)
            self.scheduler.fire_next()
            observed.append(self.status())

        self.assertEqual(observed, [
            OrderStatus.PENDING, OrderStatus.CONFIRMED, OrderStatus.PREPARING,
            OrderStatus.READY, OrderStatus.SERVED
        ])
        self.assertFalse(self.simulator.is_tracking("ORD-1"))
        self.assertEqual(self.simulator.pending_timers, 0)

    def test_manual_move_replaces_the_pending_timer(self):
        self.simulator.track("ORD-1")
        first = self.scheduler.pending()[0]

        self.store.update_status("ORD-1", OrderStatus.PREPARING)

        self.assertTrue(first.cancelled)
        pending = self.scheduler.pending()
        self.assertEqual(len(pending), 1)
        pending[0].fire()
        self.assertEqual(self.status(), OrderStatus.READY)

    def test_stale_timer_after_manual_serve_changes_nothing(self):
        self.simulator.track("ORD-1")
        self.scheduler.fire_next()
        self.scheduler.fire_next()
        self.assertEqual(self.status(), OrderStatus.PREPARING)
        stale = self.scheduler.pending()[0]

        self.clock.advance(minutes=1)
        self.store.update_status("ORD-1", OrderStatus.SERVED)
        served_at = self.store.get_by_id("ORD-1").updated_at

        self.clock.advance(minutes=1)
        stale.fire()

        order = self.store.get_by_id("ORD-1")
        self.assertEqual(order.status, OrderStatus.SERVED)
        self.assertEqual(order.updated_at, served_at)

    def test_cancel_stops_progression(self):
        self.simulator.track("ORD-1")
        self.store.update_status("ORD-1", OrderStatus.CANCELLED)

        self.assertEqual(self.scheduler.pending(), [])
        self.assertFalse(self.simulator.is_tracking("ORD-1"))

    def test_untrack_cancels_timer(self):
        self.simulator.track("ORD-1")
        timer = self.scheduler.pending()[0]

        self.simulator.untrack("ORD-1")
        self.assertTrue(timer.cancelled)

        self.store.update_status("ORD-1", OrderStatus.CONFIRMED)
        self.assertEqual(self.scheduler.pending(), [])

    def test_shutdown_cancels_everything_and_ignores_late_timers(self):
        self.simulator.track("ORD-1")
        timer = self.scheduler.pending()[0]

        self.simulator.shutdown()
        self.assertTrue(timer.cancelled)

        timer.fire()
        self.assertEqual(self.status(), OrderStatus.PENDING)
        self.assertFalse(self.simulator.track("ORD-1"))

    def test_untracked_orders_are_not_scheduled(self):
        self.store.update_status("ORD-1", OrderStatus.CONFIRMED)
        self.assertEqual(self.scheduler.calls, [])

    def test_status_change_while_tracking_starts_is_picked_up(self):
        store = RacingStore(self.clock)
        scheduler = ManualScheduler()
        simulator = StatusSimulator(store, scheduler, random.Random(5))
        store.insert(Order(
            id="ORD-2",
            lines=(CartLine(make_item(), 1),),
            status=OrderStatus.PENDING,
            total_amount=Decimal("10.00"),
            created_at=self.clock.now,
            updated_at=self.clock.now
        ))

        store.change_on_next_read = OrderStatus.CONFIRMED
        self.assertTrue(simulator.track("ORD-2"))

        pending = scheduler.pending()
        self.assertEqual(len(pending), 1)
        pending[0].fire()
        self.assertEqual(store.get_by_id("ORD-2").status, OrderStatus.PREPARING)
        self.assertEqual(len(scheduler.pending()), 1)

    def test_rejects_inverted_delay_range(self):
        with self.assertRaises(ValueError):
            StatusSimulator(OrderStore(), ManualScheduler(), min_delay=10, max_delay=5)


if __name__ == '__main__':
    unittest.main()
