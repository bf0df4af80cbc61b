"""
Order service - handles checkout, tracking and kitchen status changes
"""
import logging
import threading
from datetime import datetime
from typing import Callable, Dict, Any, List, Optional

from models.order import Order, OrderStatus, ORDER_STATUS_STEPS
from core.errors import InvalidOperation, OrderNotFoundError
from core.lifecycle import status_rank
from core.simulator import StatusSimulator
from storage.order_store import OrderStore
from .cart_service import CartService

logger = logging.getLogger(__name__)

KITCHEN_ACTIONS = {
    "accept": OrderStatus.PREPARING,
    "ready": OrderStatus.READY,
    "serve": OrderStatus.SERVED,
    "cancel": OrderStatus.CANCELLED,
}

# Open orders waiting longer than this are flagged on the kitchen board
URGENT_AFTER_MINUTES = 15


class OrderService:
    # Business logic for placing orders and moving them through the kitchen

    def __init__(self, order_store: OrderStore, cart_service: CartService,
                 simulator: Optional[StatusSimulator] = None,
                 checkout_delay: float = 1.0,
                 clock: Callable[[], datetime] = datetime.now):
        self.order_store = order_store
        self.cart_service = cart_service
        self.simulator = simulator
        self.checkout_delay = checkout_delay
        self.clock = clock

    def place_order(self, session_id: str, table_number: Optional[str] = None,
                    customer_name: Optional[str] = None,
                    cancel_event: Optional[threading.Event] = None) -> Dict[str, Any]:
        """Turn the session's cart into a pending order.

        Waits ``checkout_delay`` seconds first. Setting ``cancel_event``
        during that wait abandons the checkout and leaves the cart as it was.
        """
        cart = self.cart_service.get_cart(session_id)
        if not cart.lines:
            return {
                "success": False,
                "error": "Your cart is empty"
            }

        event = cancel_event or threading.Event()
        if self.checkout_delay > 0:
            event.wait(self.checkout_delay)
        if event.is_set():
            logger.info("Checkout cancelled for session %s", session_id)
            return {
                "success": False,
                "cancelled": True,
                "error": "Checkout was cancelled"
            }

        try:
            order = cart.build_order(table_number, customer_name)
            order = self.order_store.insert(order)
        except InvalidOperation as e:
            return {
                "success": False,
                "error": str(e)
            }

        cart.mark_placed(order)
        if self.simulator is not None:
            self.simulator.track(order.id)

        return {
            "success": True,
            "order_id": order.id,
            "order": order.to_dict(),
            "estimated_time": order.estimated_time_minutes,
            "total_amount": float(order.total_amount),
            "message": f"Order placed successfully! Order ID: {order.id}"
        }

    def get_order_details(self, order_id: str) -> Dict[str, Any]:
        order = self.order_store.get_by_id(order_id)
        if order is None:
            return {
                "success": False,
                "not_found": True,
                "error": f"Order {order_id} not found"
            }
        return {
            "success": True,
            "order": order.to_dict()
        }

    def track_order(self, order_id: Optional[str] = None,
                    session_id: Optional[str] = None) -> Dict[str, Any]:
        # Progress view; falls back to the session's most recent order
        if order_id is None and session_id is not None:
            order_id = self.cart_service.get_cart(session_id).current_order_id

        order = self.order_store.get_by_id(order_id) if order_id else None
        if order is None:
            return {
                "success": False,
                "not_found": True,
                "error": "Order not found"
            }

        return {
            "success": True,
            "order": order.to_dict(),
            "steps": [step.to_dict() for step in ORDER_STATUS_STEPS],
            "current_step": status_rank(order.status),
            "estimated_time": (
                None if order.status is OrderStatus.SERVED else order.estimated_time_minutes
            )
        }

    def update_order_status(self, order_id: str, status: str) -> Dict[str, Any]:
        # Staff status change; may skip forward steps but never go back
        try:
            new_status = OrderStatus(status)
        except ValueError:
            return {
                "success": False,
                "error": f"Unknown order status: {status}"
            }

        try:
            order = self.order_store.update_status(order_id, new_status)
        except InvalidOperation as e:
            return {
                "success": False,
                "not_found": isinstance(e, OrderNotFoundError),
                "error": str(e)
            }

        return {
            "success": True,
            "order": order.to_dict(),
            "message": f"Order {order_id} updated to {new_status.value}"
        }

    def cancel_order(self, order_id: str) -> Dict[str, Any]:
        return self.update_order_status(order_id, OrderStatus.CANCELLED.value)

    def apply_kitchen_action(self, order_id: str, action: str) -> Dict[str, Any]:
        # accept / ready / serve / cancel buttons on the kitchen board
        target = KITCHEN_ACTIONS.get(action)
        if target is None:
            return {
                "success": False,
                "error": f"Unknown kitchen action: {action}"
            }
        return self.update_order_status(order_id, target.value)

    def stop_tracking(self, order_id: str) -> None:
        # Called when whoever watches the order goes away
        if self.simulator is not None:
            self.simulator.untrack(order_id)

    def end_session(self, session_id: str) -> None:
        # Forget the session's cart and stop advancing the order it was watching
        cart = self.cart_service.discard_session(session_id)
        if cart is not None and cart.current_order_id:
            self.stop_tracking(cart.current_order_id)

    def get_active_orders(self) -> List[Dict[str, Any]]:
        return [order.to_dict() for order in self.order_store.get_active()]

    def get_kitchen_board(self) -> Dict[str, Any]:
        # Active orders grouped into the three kitchen columns
        now = self.clock()
        board = {"new": [], "in_progress": [], "ready": []}

        for order in self.order_store.get_active():
            if order.status is OrderStatus.PENDING:
                column = "new"
            elif order.status is OrderStatus.READY:
                column = "ready"
            else:
                column = "in_progress"
            entry = order.to_dict()
            entry["elapsed_minutes"] = self._elapsed_minutes(order, now)
            entry["urgent"] = column != "ready" and entry["elapsed_minutes"] > URGENT_AFTER_MINUTES
            board[column].append(entry)

        return {
            "success": True,
            "columns": board,
            "counts": {column: len(orders) for column, orders in board.items()}
        }

    @staticmethod
    def _elapsed_minutes(order: Order, now: datetime) -> int:
        return max(int((now - order.created_at).total_seconds() // 60), 0)
