"""Menu repository."""

from dataclasses import asdict
from typing import Any, Dict

from domain.menu.entity import Menu
from domain.shared.business_id import MENU_PREFIX
from infrastructure.persistence.repositories.base import DocumentRepository


class MenuRepository(DocumentRepository[Menu]):
    collection_name = "menus"
    id_field = "menu_id"
    id_prefix = MENU_PREFIX

    def to_document(self, menu: Menu) -> Dict[str, Any]:
        doc = asdict(menu)
        doc["active_days"] = [day.value for day in menu.active_days]
        return doc

    def from_document(self, doc: Dict[str, Any]) -> Menu:
        return Menu(
            menu_id=doc["menu_id"],
            name=doc.get("name"),
            restaurant_id=doc.get("restaurant_id"),
            description=doc.get("description"),
            active_days=doc.get("active_days") or [],
            start_time=doc.get("start_time"),
            end_time=doc.get("end_time"),
            menu_section_ids=doc.get("menu_section_ids") or [],
        )
