"""
Cart - the in-progress selection for one session
"""
import logging
import random
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional, Tuple

from models.cart import CartLine, CartSummary, to_money
from models.menu import MenuItem
from models.order import Order, OrderStatus
from .cart_reducer import (
    CartState, CartCommand, AddItem, RemoveItem, SetQuantity,
    SetInstructions, ClearCart, reduce_cart
)
from .errors import EmptyCartError
from .ids import OrderIdGenerator

logger = logging.getLogger(__name__)

MIN_ESTIMATE_MINUTES = 15
MAX_ESTIMATE_MINUTES = 30


class Cart:
    # Stateful wrapper around reduce_cart; one instance per session

    def __init__(self, id_generator: Optional[OrderIdGenerator] = None,
                 clock: Callable[[], datetime] = datetime.now,
                 rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.clock = clock
        self.id_generator = id_generator or OrderIdGenerator(self.rng, clock)
        self.state = CartState()
        self.current_order_id: Optional[str] = None

    def dispatch(self, command: CartCommand) -> CartState:
        self.state = reduce_cart(self.state, command)
        return self.state

    @property
    def lines(self) -> Tuple[CartLine, ...]:
        return self.state.lines

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self.state.lines)

    @property
    def total_amount(self) -> Decimal:
        return to_money(sum((line.line_total for line in self.state.lines), Decimal("0")))

    def has_item(self, item_id: str) -> bool:
        return self.state.find_line(item_id) is not None

    def add_item(self, menu_item: MenuItem, quantity: int = 1,
                 special_instructions: Optional[str] = None) -> CartLine:
        self.dispatch(AddItem(menu_item, quantity, special_instructions))
        return self.state.find_line(menu_item.id)

    def remove_item(self, item_id: str) -> bool:
        # Returns False when the line was not in the cart
        present = self.has_item(item_id)
        self.dispatch(RemoveItem(item_id))
        return present

    def set_quantity(self, item_id: str, quantity: int) -> bool:
        present = self.has_item(item_id)
        self.dispatch(SetQuantity(item_id, quantity))
        return present

    def set_instructions(self, item_id: str, instructions: Optional[str]) -> bool:
        present = self.has_item(item_id)
        self.dispatch(SetInstructions(item_id, instructions))
        return present

    def clear(self) -> None:
        self.dispatch(ClearCart())

    def summary(self, tax_rate: Decimal = Decimal("0.08")) -> CartSummary:
        subtotal = self.total_amount
        tax = to_money(subtotal * Decimal(tax_rate))
        return CartSummary(
            total_lines=len(self.state.lines),
            total_items=self.total_items,
            subtotal=subtotal,
            tax=tax,
            grand_total=subtotal + tax
        )

    def build_order(self, table_number: Optional[str] = None,
                    customer_name: Optional[str] = None) -> Order:
        # Snapshot the lines into a pending order; the cart is left as is
        if not self.state.lines:
            raise EmptyCartError("Your cart is empty")

        now = self.clock()
        order = Order(
            id=self.id_generator.next_id(),
            lines=self.state.lines,
            status=OrderStatus.PENDING,
            total_amount=self.total_amount,
            created_at=now,
            updated_at=now,
            table_number=table_number or None,
            customer_name=customer_name or None,
            estimated_time_minutes=self.rng.randrange(MIN_ESTIMATE_MINUTES, MAX_ESTIMATE_MINUTES)
        )
        return order

    def mark_placed(self, order: Order) -> None:
        # Empty the cart once its order has been accepted
        self.clear()
        self.current_order_id = order.id
        logger.debug("Checked out cart into order %s (%d items)", order.id, order.total_items)

    def checkout(self, table_number: Optional[str] = None,
                 customer_name: Optional[str] = None) -> Order:
        # Build the order and empty the cart in one step
        order = self.build_order(table_number, customer_name)
        self.mark_placed(order)
        return order
