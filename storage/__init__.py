"""
Storage package for the restaurant ordering system
Contains the in-memory menu catalog and order store
"""

from .menu_catalog import MenuCatalog, DEFAULT_MENU
from .order_store import OrderStore
from .seed import build_demo_orders

__all__ = [
    'MenuCatalog', 'DEFAULT_MENU',
    'OrderStore', 'build_demo_orders'
]
