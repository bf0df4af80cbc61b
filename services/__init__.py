"""
Services package for the restaurant ordering system
Contains business logic services
"""

from .menu_service import MenuService
from .cart_service import CartService
from .order_service import OrderService, KITCHEN_ACTIONS
from .dashboard_service import DashboardService

__all__ = [
    'MenuService', 'CartService', 'OrderService', 'KITCHEN_ACTIONS', 'DashboardService'
]
