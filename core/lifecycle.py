"""
Order lifecycle rules - which status changes are legal
"""
from typing import Optional, Tuple

from models.order import OrderStatus
from .errors import IllegalTransitionError

ORDER_STATUS_SEQUENCE: Tuple[OrderStatus, ...] = (
    OrderStatus.PENDING,
    OrderStatus.CONFIRMED,
    OrderStatus.PREPARING,
    OrderStatus.READY,
    OrderStatus.SERVED,
)


def status_rank(status: OrderStatus) -> int:
    # Position on the forward path; cancelled has no rank
    if status is OrderStatus.CANCELLED:
        return -1
    return ORDER_STATUS_SEQUENCE.index(status)


def next_status(status: OrderStatus) -> Optional[OrderStatus]:
    # The single step the automatic simulation would take next
    if status.is_terminal:
        return None
    return ORDER_STATUS_SEQUENCE[status_rank(status) + 1]


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    # Staff may skip forward steps or cancel, never go back or reopen
    if current.is_terminal:
        return False
    if target is OrderStatus.CANCELLED:
        return True
    return status_rank(target) > status_rank(current)


def check_transition(order_id: str, current: OrderStatus, target: OrderStatus) -> None:
    if current.is_terminal:
        raise IllegalTransitionError(
            f"Order {order_id} is already {current.value} and cannot change"
        )
    if not can_transition(current, target):
        raise IllegalTransitionError(
            f"Order {order_id} cannot move from {current.value} to {target.value}"
        )
