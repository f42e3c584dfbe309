"""Menu item repository."""

from dataclasses import asdict
from typing import Any, Dict

from domain.menu_item.entity import MenuItem
from domain.shared.business_id import MENU_ITEM_PREFIX
from infrastructure.persistence.repositories.base import DocumentRepository


class MenuItemRepository(DocumentRepository[MenuItem]):
    collection_name = "menu_items"
    id_field = "menu_item_id"
    id_prefix = MENU_ITEM_PREFIX

    def to_document(self, menu_item: MenuItem) -> Dict[str, Any]:
        return asdict(menu_item)

    def from_document(self, doc: Dict[str, Any]) -> MenuItem:
        return MenuItem(
            menu_item_id=doc["menu_item_id"],
            name=doc.get("name"),
            restaurant_id=doc.get("restaurant_id"),
            description=doc.get("description"),
            ingredient_ids=doc.get("ingredient_ids") or [],
            image_url=doc.get("image_url"),
        )
