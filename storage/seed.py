"""
Demo orders loaded at startup
"""
from datetime import datetime, timedelta
from decimal import Decimal
from typing import List

from models.cart import CartLine
from models.order import Order, OrderStatus
from .menu_catalog import MenuCatalog


def build_demo_orders(catalog: MenuCatalog, now: datetime) -> List[Order]:
    # A few open orders so the kitchen and admin views have something to show
    item = catalog.get_item
    if any(item(item_id) is None for item_id in ("main-1", "starter-1", "main-3", "dessert-1")):
        return []

    return [
        Order(
            id="ORD-ABC123",
            lines=(CartLine(item("main-1"), 2), CartLine(item("starter-1"), 1)),
            status=OrderStatus.PREPARING,
            table_number="12",
            total_amount=Decimal("194.97"),
            created_at=now - timedelta(minutes=15),
            updated_at=now - timedelta(minutes=10),
            estimated_time_minutes=20
        ),
        Order(
            id="ORD-DEF456",
            lines=(CartLine(item("main-3"), 1),),
            status=OrderStatus.PENDING,
            table_number="7",
            total_amount=Decimal("32.99"),
            created_at=now - timedelta(minutes=2),
            updated_at=now - timedelta(minutes=2),
            estimated_time_minutes=18
        ),
        Order(
            id="ORD-GHI789",
            lines=(CartLine(item("dessert-1"), 2),),
            status=OrderStatus.READY,
            table_number="3",
            total_amount=Decimal("29.98"),
            created_at=now - timedelta(minutes=25),
            updated_at=now,
            estimated_time_minutes=12
        ),
    ]
