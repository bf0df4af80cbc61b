"""
Models package for the restaurant ordering system
Contains data models and type definitions
"""

from .menu import MenuItem, MenuCategory
from .cart import CartLine, CartSummary, to_money
from .order import Order, OrderStatus, OrderStatusStep, ORDER_STATUS_STEPS, DashboardStats

__all__ = [
    'MenuItem', 'MenuCategory',
    'CartLine', 'CartSummary', 'to_money',
    'Order', 'OrderStatus', 'OrderStatusStep', 'ORDER_STATUS_STEPS', 'DashboardStats'
]
