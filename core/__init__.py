"""
Core package for the restaurant ordering system
Contains the cart, order lifecycle and statistics logic
"""

from .errors import (
    InvalidOperation, EmptyCartError, ItemUnavailableError, UnknownItemError,
    OrderNotFoundError, DuplicateOrderError, IllegalTransitionError
)
from .lifecycle import ORDER_STATUS_SEQUENCE, can_transition, next_status

__all__ = [
    'InvalidOperation', 'EmptyCartError', 'ItemUnavailableError', 'UnknownItemError',
    'OrderNotFoundError', 'DuplicateOrderError', 'IllegalTransitionError',
    'ORDER_STATUS_SEQUENCE', 'can_transition', 'next_status'
]
