"""
Cart service - handles cart operations
"""
from decimal import Decimal
from threading import Lock
from typing import Callable, Dict, Any, Optional

from core.cart import Cart
from core.errors import InvalidOperation, UnknownItemError
from storage.menu_catalog import MenuCatalog


class CartService:
    # Keeps one live cart per session and reports results as plain dictionaries

    def __init__(self, catalog: MenuCatalog, cart_factory: Callable[[], Cart] = Cart,
                 tax_rate: Decimal = Decimal("0.08")):
        self.catalog = catalog
        self.cart_factory = cart_factory
        self.tax_rate = Decimal(tax_rate)
        self._carts: Dict[str, Cart] = {}
        self._lock = Lock()

    def get_cart(self, session_id: str) -> Cart:
        # Create the session's cart on first use
        with self._lock:
            cart = self._carts.get(session_id)
            if cart is None:
                cart = self._carts[session_id] = self.cart_factory()
            return cart

    def discard_session(self, session_id: str) -> Optional[Cart]:
        # Drop the session's cart and hand it back, if it had one
        with self._lock:
            return self._carts.pop(session_id, None)

    def add_to_cart(self, session_id: str, item_id: str, quantity: int = 1,
                    special_instructions: Optional[str] = None) -> Dict[str, Any]:
        # Add a menu item, merging with an existing line for the same item
        try:
            menu_item = self.catalog.get_item(item_id)
            if menu_item is None:
                raise UnknownItemError(f"Menu item {item_id} not found")

            line = self.get_cart(session_id).add_item(menu_item, quantity, special_instructions)
            return {
                "success": True,
                "line": line.to_dict(),
                "message": f"{menu_item.name} added to your cart.",
                "summary": self._summary(session_id)
            }

        except InvalidOperation as e:
            return {
                "success": False,
                "error": str(e)
            }

    def remove_from_cart(self, session_id: str, item_id: str) -> Dict[str, Any]:
        # Removing a line that is not there is not an error
        removed = self.get_cart(session_id).remove_item(item_id)
        return {
            "success": True,
            "removed": removed,
            "message": "Item removed from your cart." if removed else "Item was not in your cart.",
            "summary": self._summary(session_id)
        }

    def update_quantity(self, session_id: str, item_id: str, quantity: int) -> Dict[str, Any]:
        # A quantity of zero or less removes the line
        if not self.get_cart(session_id).set_quantity(item_id, quantity):
            return {
                "success": False,
                "error": f"Item {item_id} is not in your cart"
            }
        return {
            "success": True,
            "removed": quantity <= 0,
            "summary": self._summary(session_id)
        }

    def update_instructions(self, session_id: str, item_id: str,
                            instructions: Optional[str]) -> Dict[str, Any]:
        if not self.get_cart(session_id).set_instructions(item_id, instructions):
            return {
                "success": False,
                "error": f"Item {item_id} is not in your cart"
            }
        return {
            "success": True,
            "message": "Special instructions updated."
        }

    def clear_cart(self, session_id: str) -> Dict[str, Any]:
        cart = self.get_cart(session_id)
        removed_lines = len(cart.lines)
        cart.clear()
        return {
            "success": True,
            "removed_items": removed_lines,
            "message": "Your cart has been emptied."
        }

    def get_cart_details(self, session_id: str) -> Dict[str, Any]:
        # Current lines, totals and the last order placed from this cart
        cart = self.get_cart(session_id)
        lines = [line.to_dict() for line in cart.lines]
        message = f"You have {cart.total_items} item(s) in your cart." if lines else "Your cart is empty."

        return {
            "success": True,
            "cart_items": lines,
            "summary": self._summary(session_id),
            "current_order_id": cart.current_order_id,
            "message": message
        }

    def _summary(self, session_id: str) -> Dict[str, Any]:
        return self.get_cart(session_id).summary(self.tax_rate).to_dict()
