"""
Static menu catalog
"""
from decimal import Decimal
from typing import Iterable, List, Optional, Union

from models.menu import MenuItem, MenuCategory

ALL_CATEGORIES = "all"

DEFAULT_MENU: List[MenuItem] = [
    MenuItem("starter-1", "Truffle Arancini", "Crispy risotto balls with black truffle",
             Decimal("14.99"), MenuCategory.STARTERS, is_veg=True),
    MenuItem("starter-2", "Burrata Salad", "Creamy burrata, heirloom tomatoes, basil oil",
             Decimal("16.99"), MenuCategory.STARTERS, is_veg=True),
    MenuItem("starter-3", "Seared Scallops", "Hokkaido scallops with cauliflower puree",
             Decimal("22.99"), MenuCategory.STARTERS),
    MenuItem("main-1", "Wagyu Ribeye", "12oz A5 Wagyu with bone marrow butter",
             Decimal("89.99"), MenuCategory.MAINS),
    MenuItem("main-2", "Miso Glazed Black Cod", "Sake-marinated cod with bok choy",
             Decimal("42.99"), MenuCategory.MAINS),
    MenuItem("main-3", "Wild Mushroom Pasta", "Fresh tagliatelle with porcini",
             Decimal("32.99"), MenuCategory.MAINS, is_veg=True),
    MenuItem("main-4", "Lobster Thermidor", "Whole lobster in brandy cream sauce",
             Decimal("64.99"), MenuCategory.MAINS, is_available=False),
    MenuItem("drink-1", "Yuzu Spritz", "Yuzu, elderflower, sparkling water",
             Decimal("9.99"), MenuCategory.DRINKS, is_veg=True),
    MenuItem("drink-2", "Espresso Martini", "Vodka, fresh espresso, coffee liqueur",
             Decimal("15.99"), MenuCategory.DRINKS, is_veg=True),
    MenuItem("dessert-1", "Molten Chocolate Cake", "Warm chocolate fondant",
             Decimal("14.99"), MenuCategory.DESSERTS, is_veg=True),
    MenuItem("dessert-2", "Vanilla Bean Creme Brulee", "Madagascar vanilla custard",
             Decimal("11.99"), MenuCategory.DESSERTS, is_veg=True),
]


class MenuCatalog:
    # Read-only menu lookups by id, category and availability

    def __init__(self, items: Optional[Iterable[MenuItem]] = None):
        self._items = list(DEFAULT_MENU if items is None else items)
        self._by_id = {item.id: item for item in self._items}

    def categories(self) -> List[str]:
        return [ALL_CATEGORIES] + [category.value for category in MenuCategory]

    def find_items(self, category: Union[str, MenuCategory, None] = None,
                   available_only: bool = False) -> List[MenuItem]:
        # None or "all" means every category; an unknown category matches nothing
        if category in (None, ALL_CATEGORIES):
            items = list(self._items)
        else:
            try:
                wanted = MenuCategory(category)
            except ValueError:
                return []
            items = [item for item in self._items if item.category is wanted]

        if available_only:
            items = [item for item in items if item.is_available]
        return items

    def get_item(self, item_id: str) -> Optional[MenuItem]:
        return self._by_id.get(item_id)
