"""
Tests for the cart reducer and the Cart wrapper
"""
import random
import unittest
from decimal import Decimal

from core.cart import Cart
from core.cart_reducer import (
    CartState, AddItem, RemoveItem, SetQuantity, SetInstructions, ClearCart, reduce_cart
)
from core.errors import EmptyCartError, ItemUnavailableError
from models.order import OrderStatus
from helpers import FakeClock, make_item


class TestCartReducer(unittest.TestCase):
    """The reducer is pure: every case starts from an explicit state"""

    def setUp(self):
        self.pasta = make_item("main-3", "32.99")
        self.cake = make_item("dessert-1", "14.99")

    def test_repeat_add_merges_into_one_line(self):
        state = reduce_cart(CartState(), AddItem(self.pasta, 1, "no cheese"))
        state = reduce_cart(state, AddItem(self.pasta, 2, "extra cheese"))

        self.assertEqual(len(state.lines), 1)
        self.assertEqual(state.lines[0].quantity, 3)
        self.assertEqual(state.lines[0].special_instructions, "no cheese")

    def test_add_keeps_insertion_order(self):
        state = reduce_cart(CartState(), AddItem(self.cake))
        state = reduce_cart(state, AddItem(self.pasta))
        state = reduce_cart(state, AddItem(self.cake))

        self.assertEqual([line.menu_item.id for line in state.lines], ["dessert-1", "main-3"])

    def test_add_with_non_positive_quantity_counts_as_one(self):
        state = reduce_cart(CartState(), AddItem(self.pasta, 0))
        state = reduce_cart(state, AddItem(self.pasta, -4))

        self.assertEqual(state.lines[0].quantity, 2)

    def test_add_unavailable_item_is_rejected(self):
        sold_out = make_item("main-4", "64.99", is_available=False)
        with self.assertRaises(ItemUnavailableError):
            reduce_cart(CartState(), AddItem(sold_out))

    def test_set_quantity_zero_removes_line(self):
        state = reduce_cart(CartState(), AddItem(self.pasta, 2))
        state = reduce_cart(state, SetQuantity("main-3", 0))
        self.assertEqual(state.lines, ())

    def test_set_quantity_replaces_value(self):
        state = reduce_cart(CartState(), AddItem(self.pasta, 2))
        state = reduce_cart(state, SetQuantity("main-3", 5))
        self.assertEqual(state.lines[0].quantity, 5)

    def test_commands_on_missing_line_leave_state_alone(self):
        state = reduce_cart(CartState(), AddItem(self.pasta))

        for command in (RemoveItem("nope"), SetQuantity("nope", 3), SetInstructions("nope", "x")):
            self.assertEqual(reduce_cart(state, command), state)

    def test_clear(self):
        state = reduce_cart(CartState(), AddItem(self.pasta))
        self.assertEqual(reduce_cart(state, ClearCart()), CartState())

    def test_no_line_ever_has_non_positive_quantity(self):
        rng = random.Random(7)
        items = [self.pasta, self.cake]
        state = CartState()

        for _ in range(500):
            item = rng.choice(items)
            if rng.random() < 0.5:
                state = reduce_cart(state, AddItem(item, rng.randint(-3, 3)))
            else:
                state = reduce_cart(state, SetQuantity(item.id, rng.randint(-3, 3)))
            self.assertTrue(all(line.quantity >= 1 for line in state.lines))
            self.assertEqual(len({line.menu_item.id for line in state.lines}), len(state.lines))


class TestCart(unittest.TestCase):

    def setUp(self):
        self.clock = FakeClock()
        self.cart = Cart(clock=self.clock, rng=random.Random(42))
        self.ribeye = make_item("main-1", "89.99")
        self.arancini = make_item("starter-1", "14.99")

    def test_totals_follow_every_mutation(self):
        self.cart.add_item(self.ribeye, 2)
        self.cart.add_item(self.arancini)
        self.assertEqual(self.cart.total_items, 3)
        self.assertEqual(self.cart.total_amount, Decimal("194.97"))

        self.cart.set_quantity("main-1", 1)
        self.assertEqual(self.cart.total_amount, Decimal("104.98"))

        self.cart.remove_item("starter-1")
        self.assertEqual(self.cart.total_items, 1)
        self.assertEqual(self.cart.total_amount, Decimal("89.99"))

    def test_line_operations_report_missing_lines(self):
        self.assertFalse(self.cart.remove_item("main-1"))
        self.assertFalse(self.cart.set_quantity("main-1", 2))
        self.assertFalse(self.cart.set_instructions("main-1", "rare"))

        self.cart.add_item(self.ribeye)
        self.assertTrue(self.cart.set_instructions("main-1", "rare"))
        self.assertEqual(self.cart.lines[0].special_instructions, "rare")

    def test_summary_adds_tax(self):
        self.cart.add_item(self.ribeye, 2)
        self.cart.add_item(self.arancini)

        summary = self.cart.summary(Decimal("0.08"))
        self.assertEqual(summary.subtotal, Decimal("194.97"))
        self.assertEqual(summary.tax, Decimal("15.60"))
        self.assertEqual(summary.grand_total, Decimal("210.57"))

    def test_checkout_empty_cart_fails_without_side_effects(self):
        with self.assertRaises(EmptyCartError):
            self.cart.checkout("4")
        self.assertEqual(self.cart.lines, ())
        self.assertIsNone(self.cart.current_order_id)

    def test_checkout_builds_pending_order_and_clears_cart(self):
        self.cart.add_item(self.ribeye, 2, "medium rare")
        self.cart.add_item(self.arancini)

        order = self.cart.checkout("12", "Ada")

        self.assertTrue(order.id.startswith("ORD-"))
        self.assertEqual(order.status, OrderStatus.PENDING)
        self.assertEqual(order.total_amount, Decimal("194.97"))
        self.assertEqual(order.table_number, "12")
        self.assertEqual(order.customer_name, "Ada")
        self.assertEqual(order.created_at, self.clock.now)
        self.assertEqual(order.updated_at, order.created_at)
        self.assertTrue(15 <= order.estimated_time_minutes < 30)
        self.assertEqual(self.cart.lines, ())
        self.assertEqual(self.cart.current_order_id, order.id)

    def test_blank_table_and_name_are_stored_as_none(self):
        self.cart.add_item(self.ribeye)
        order = self.cart.checkout("", "")
        self.assertIsNone(order.table_number)
        self.assertIsNone(order.customer_name)

    def test_order_is_not_affected_by_later_cart_changes(self):
        self.cart.add_item(self.ribeye)
        order = self.cart.checkout()

        self.cart.add_item(self.ribeye, 5)
        self.cart.add_item(self.arancini)
        self.cart.set_quantity("main-1", 9)

        self.assertEqual(len(order.lines), 1)
        self.assertEqual(order.lines[0].quantity, 1)
        self.assertEqual(order.total_amount, Decimal("89.99"))

    def test_estimates_are_repeatable_with_a_seeded_rng(self):
        first = Cart(clock=self.clock, rng=random.Random(3))
        second = Cart(clock=self.clock, rng=random.Random(3))
        for cart in (first, second):
            cart.add_item(self.ribeye)

        self.assertEqual(first.checkout().estimated_time_minutes,
                         second.checkout().estimated_time_minutes)

    def test_independent_carts_never_share_an_order_id(self):
        clock = FakeClock()
        ids = set()
        for _ in range(1000):
            cart = Cart(clock=clock)
            cart.add_item(self.ribeye)
            ids.add(cart.checkout().id)

        self.assertEqual(len(ids), 1000)

    def test_build_order_leaves_cart_until_marked_placed(self):
        self.cart.add_item(self.ribeye, 2)

        order = self.cart.build_order("3")
        self.assertEqual(self.cart.total_items, 2)
        self.assertIsNone(self.cart.current_order_id)

        self.cart.mark_placed(order)
        self.assertEqual(self.cart.lines, ())
        self.assertEqual(self.cart.current_order_id, order.id)


if __name__ == '__main__':
    unittest.main()
