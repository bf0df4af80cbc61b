"""
UI package for the restaurant ordering system
Contains console interfaces for customers, kitchen staff and admins
"""

from .simple_ui import SimpleOrderUI
from .kitchen_ui import KitchenUI, AdminUI

__all__ = [
    'SimpleOrderUI', 'KitchenUI', 'AdminUI'
]
