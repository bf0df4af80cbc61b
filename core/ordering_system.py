"""
OrderingSystem - wires the store, catalog, simulator and services together
"""
import random
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional

import config
from storage.menu_catalog import MenuCatalog
from storage.order_store import OrderStore
from storage.seed import build_demo_orders
from services.menu_service import MenuService
from services.cart_service import CartService
from services.order_service import OrderService
from services.dashboard_service import DashboardService
from .cart import Cart
from .ids import OrderIdGenerator
from .simulator import StatusSimulator
from .stats import StatsAggregator


def _setting(override, default):
    return default if override is None else override


class OrderingSystem:
    # Owns every piece of shared state; build one per process and shut it down when done

    def __init__(self, catalog: Optional[MenuCatalog] = None,
                 clock: Callable[[], datetime] = datetime.now,
                 rng: Optional[random.Random] = None,
                 scheduler: Optional[Any] = None,
                 auto_advance: Optional[bool] = None,
                 checkout_delay: Optional[float] = None,
                 seed_demo_orders: Optional[bool] = None,
                 tax_rate: Optional[Decimal] = None,
                 min_step_delay: Optional[float] = None,
                 max_step_delay: Optional[float] = None):
        self.clock = clock
        self.rng = rng or random.Random()

        # Storage
        self.catalog = catalog or MenuCatalog()
        self.order_store = OrderStore(clock)
        if _setting(seed_demo_orders, config.SEED_DEMO_ORDERS):
            self.order_store.seed(build_demo_orders(self.catalog, clock()))

        # Timed progression
        if _setting(auto_advance, config.AUTO_ADVANCE_ENABLED):
            self.simulator = StatusSimulator(
                self.order_store, scheduler, self.rng,
                _setting(min_step_delay, config.AUTO_ADVANCE_MIN_SECONDS),
                _setting(max_step_delay, config.AUTO_ADVANCE_MAX_SECONDS)
            )
        else:
            self.simulator = None

        # Services
        self.id_generator = OrderIdGenerator(self.rng, clock)
        self.menu_service = MenuService(self.catalog)
        self.cart_service = CartService(
            self.catalog, self._new_cart,
            _setting(tax_rate, config.TAX_RATE)
        )
        self.order_service = OrderService(
            self.order_store, self.cart_service, self.simulator,
            _setting(checkout_delay, config.CHECKOUT_DELAY_SECONDS),
            clock
        )
        self.dashboard_service = DashboardService(
            self.order_store, StatsAggregator(self.order_store, clock)
        )

    def _new_cart(self) -> Cart:
        return Cart(self.id_generator, self.clock, self.rng)

    def shutdown(self) -> None:
        # Cancel every pending status timer
        if self.simulator is not None:
            self.simulator.shutdown()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.shutdown()

    # === Menu ===
    def list_menu(self, category: Optional[str] = None) -> Dict[str, Any]:
        return self.menu_service.list_menu(category)

    # === Cart ===
    def add_to_cart(self, session_id: str, item_id: str, quantity: int = 1,
                    special_instructions: Optional[str] = None) -> Dict[str, Any]:
        return self.cart_service.add_to_cart(session_id, item_id, quantity, special_instructions)

    def remove_from_cart(self, session_id: str, item_id: str) -> Dict[str, Any]:
        return self.cart_service.remove_from_cart(session_id, item_id)

    def update_quantity(self, session_id: str, item_id: str, quantity: int) -> Dict[str, Any]:
        return self.cart_service.update_quantity(session_id, item_id, quantity)

    def update_instructions(self, session_id: str, item_id: str,
                            instructions: Optional[str]) -> Dict[str, Any]:
        return self.cart_service.update_instructions(session_id, item_id, instructions)

    def clear_cart(self, session_id: str) -> Dict[str, Any]:
        return self.cart_service.clear_cart(session_id)

    def get_cart_details(self, session_id: str) -> Dict[str, Any]:
        return self.cart_service.get_cart_details(session_id)

    # === Orders ===
    def place_order(self, session_id: str, table_number: Optional[str] = None,
                    customer_name: Optional[str] = None) -> Dict[str, Any]:
        return self.order_service.place_order(session_id, table_number, customer_name)

    def get_order_details(self, order_id: str) -> Dict[str, Any]:
        return self.order_service.get_order_details(order_id)

    def track_order(self, order_id: Optional[str] = None,
                    session_id: Optional[str] = None) -> Dict[str, Any]:
        return self.order_service.track_order(order_id, session_id)

    def update_order_status(self, order_id: str, status: str) -> Dict[str, Any]:
        return self.order_service.update_order_status(order_id, status)

    def cancel_order(self, order_id: str) -> Dict[str, Any]:
        return self.order_service.cancel_order(order_id)

    def stop_tracking(self, order_id: str) -> None:
        self.order_service.stop_tracking(order_id)

    def end_session(self, session_id: str) -> None:
        self.order_service.end_session(session_id)

    # === Kitchen / admin ===
    def get_active_orders(self) -> List[Dict[str, Any]]:
        return self.order_service.get_active_orders()

    def get_kitchen_board(self) -> Dict[str, Any]:
        return self.order_service.get_kitchen_board()

    def apply_kitchen_action(self, order_id: str, action: str) -> Dict[str, Any]:
        return self.order_service.apply_kitchen_action(order_id, action)

    def get_dashboard(self) -> Dict[str, Any]:
        return self.dashboard_service.get_dashboard()
