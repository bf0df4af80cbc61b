"""
Basic tests for the assembled ordering system
"""
import random
import unittest

from core.ordering_system import OrderingSystem
from helpers import FakeClock, ManualScheduler


class TestOrderingSystem(unittest.TestCase):
    """Test cases for OrderingSystem"""

    def setUp(self):
        """Build a system with demo orders and a manual timer"""
        self.clock = FakeClock()
        self.scheduler = ManualScheduler()
        self.system = OrderingSystem(
            clock=self.clock,
            rng=random.Random(1),
            scheduler=self.scheduler,
            auto_advance=True,
            checkout_delay=0,
            seed_demo_orders=True
        )
        self.session_id = "test_session"

    def tearDown(self):
        """Cancel pending timers"""
        self.system.shutdown()

    def test_initialization(self):
        """Test that the system initializes correctly"""
        self.assertIsNotNone(self.system.order_store)
        self.assertIsNotNone(self.system.menu_service)
        self.assertIsNotNone(self.system.cart_service)
        self.assertIsNotNone(self.system.order_service)
        self.assertIsNotNone(self.system.dashboard_service)
        self.assertEqual(len(self.system.order_store), 3)

    def test_demo_dashboard(self):
        stats = self.system.get_dashboard()["stats"]

        self.assertEqual(stats["total_orders_today"], 3)
        self.assertEqual(stats["total_revenue_today"], 257.94)
        self.assertEqual(stats["active_order_count"], 3)
        self.assertEqual(stats["avg_prep_time_minutes"], 18)

    def test_clear_empty_cart(self):
        result = self.system.clear_cart(self.session_id)
        self.assertTrue(result["success"])
        self.assertEqual(result["removed_items"], 0)

    def test_process_empty_cart_order(self):
        result = self.system.place_order(self.session_id)
        self.assertFalse(result["success"])
        self.assertIn("empty", result["error"])

    def test_order_flow_end_to_end(self):
        self.system.add_to_cart(self.session_id, "main-1", 2)
        self.system.add_to_cart(self.session_id, "starter-1")
        placed = self.system.place_order(self.session_id, "12")
        order_id = placed["order_id"]

        self.assertTrue(placed["success"])
        self.assertEqual(placed["total_amount"], 194.97)
        self.assertEqual(self.system.get_cart_details(self.session_id)["cart_items"], [])

        # The customer's timer moves the order to confirmed, the kitchen takes it from there
        self.scheduler.fire_next()
        self.assertEqual(self.system.track_order(order_id)["order"]["status"], "confirmed")
        self.assertTrue(self.system.apply_kitchen_action(order_id, "ready")["success"])
        self.assertTrue(self.system.apply_kitchen_action(order_id, "serve")["success"])
        self.assertFalse(self.system.cancel_order(order_id)["success"])

        self.assertEqual(self.system.get_dashboard()["stats"]["total_orders_today"], 4)
        self.assertNotIn(order_id, [order["id"] for order in self.system.get_active_orders()])

    def test_shutdown_cancels_timers(self):
        self.system.add_to_cart(self.session_id, "main-1")
        self.system.place_order(self.session_id)
        self.assertEqual(len(self.scheduler.pending()), 1)

        self.system.shutdown()
        self.assertEqual(self.scheduler.pending(), [])

    def test_context_manager(self):
        with OrderingSystem(scheduler=ManualScheduler(), checkout_delay=0,
                            seed_demo_orders=False) as system:
            self.assertEqual(len(system.order_store), 0)
        self.assertTrue(system.simulator is None or system.simulator.pending_timers == 0)

    def test_auto_advance_disabled(self):
        system = OrderingSystem(auto_advance=False, checkout_delay=0, seed_demo_orders=False)
        system.add_to_cart(self.session_id, "drink-1")
        self.assertTrue(system.place_order(self.session_id)["success"])
        self.assertIsNone(system.simulator)


if __name__ == '__main__':
    unittest.main()
