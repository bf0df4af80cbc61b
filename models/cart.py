"""
Cart related data models
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Dict, Any

from .menu import MenuItem

CENTS = Decimal("0.01")


def to_money(value) -> Decimal:
    # Round any amount to whole cents
    return Decimal(value).quantize(CENTS)


@dataclass(frozen=True)
class CartLine:
    """Cart line data model"""
    menu_item: MenuItem
    quantity: int
    special_instructions: Optional[str] = None

    @property
    def line_total(self) -> Decimal:
        return to_money(self.menu_item.price * self.quantity)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "menu_item": self.menu_item.to_dict(),
            "quantity": self.quantity,
            "special_instructions": self.special_instructions,
            "line_total": float(self.line_total)
        }


@dataclass
class CartSummary:
    """Cart summary data model"""
    total_lines: int
    total_items: int
    subtotal: Decimal
    tax: Decimal
    grand_total: Decimal

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "total_lines": self.total_lines,
            "total_items": self.total_items,
            "subtotal": float(self.subtotal),
            "tax": float(self.tax),
            "grand_total": float(self.grand_total)
        }
