"""
Menu related data models
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Any
from enum import Enum


class MenuCategory(Enum):
    STARTERS = "starters"
    MAINS = "mains"
    DRINKS = "drinks"
    DESSERTS = "desserts"


@dataclass(frozen=True)
class MenuItem:
    """Menu item data model"""
    id: str
    name: str
    description: str
    price: Decimal
    category: MenuCategory
    is_veg: bool = False
    is_available: bool = True

    def __post_init__(self):
        if self.price < 0:
            raise ValueError(f"Menu item {self.id} has a negative price")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": float(self.price),
            "category": self.category.value,
            "is_veg": self.is_veg,
            "is_available": self.is_available
        }
