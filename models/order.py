"""
Order related data models
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Dict, Any, Tuple
from enum import Enum

from .cart import CartLine


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY = "ready"
    SERVED = "served"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.SERVED, OrderStatus.CANCELLED)


@dataclass(frozen=True)
class OrderStatusStep:
    """Progress step shown while tracking an order"""
    status: OrderStatus
    label: str
    description: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "status": self.status.value,
            "label": self.label,
            "description": self.description
        }


ORDER_STATUS_STEPS: Tuple[OrderStatusStep, ...] = (
    OrderStatusStep(OrderStatus.PENDING, "Order Placed", "Waiting for confirmation"),
    OrderStatusStep(OrderStatus.CONFIRMED, "Confirmed", "Order accepted by kitchen"),
    OrderStatusStep(OrderStatus.PREPARING, "Preparing", "Chef is cooking your order"),
    OrderStatusStep(OrderStatus.READY, "Ready", "Your order is ready"),
    OrderStatusStep(OrderStatus.SERVED, "Served", "Enjoy your meal!"),
)


@dataclass
class Order:
    """Order data model

    Lines and total are a snapshot taken at checkout; only status and
    updated_at change after the order is placed.
    """
    id: str
    lines: Tuple[CartLine, ...]
    status: OrderStatus
    total_amount: Decimal
    created_at: datetime
    updated_at: datetime
    table_number: Optional[str] = None
    customer_name: Optional[str] = None
    estimated_time_minutes: Optional[int] = None

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "lines": [line.to_dict() for line in self.lines],
            "status": self.status.value,
            "table_number": self.table_number,
            "customer_name": self.customer_name,
            "total_amount": float(self.total_amount),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "estimated_time_minutes": self.estimated_time_minutes
        }


@dataclass
class DashboardStats:
    """Admin dashboard statistics, derived on demand"""
    total_orders_today: int
    total_revenue_today: Decimal
    active_order_count: int
    avg_prep_time_minutes: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "total_orders_today": self.total_orders_today,
            "total_revenue_today": float(self.total_revenue_today),
            "active_order_count": self.active_order_count,
            "avg_prep_time_minutes": round(self.avg_prep_time_minutes)
        }
