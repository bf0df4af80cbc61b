"""
Menu service - handles menu browsing
"""
from typing import Dict, Any, Optional

from storage.menu_catalog import MenuCatalog


class MenuService:
    # Read-only menu queries for the presentation layer

    def __init__(self, catalog: MenuCatalog):
        self.catalog = catalog

    def list_menu(self, category: Optional[str] = None, available_only: bool = False) -> Dict[str, Any]:
        # Menu items for one category, or all of them
        items = self.catalog.find_items(category, available_only)
        return {
            "success": True,
            "category": category or "all",
            "categories": self.catalog.categories(),
            "items": [item.to_dict() for item in items],
            "total_found": len(items)
        }

    def get_item(self, item_id: str) -> Optional[Dict[str, Any]]:
        item = self.catalog.get_item(item_id)
        return item.to_dict() if item else None
