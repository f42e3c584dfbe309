"""Menu section repository."""

from dataclasses import asdict
from typing import Any, Dict

from domain.menu_section.entity import MenuSection, SectionItem
from domain.shared.business_id import MENU_SECTION_PREFIX
from infrastructure.persistence.repositories.base import DocumentRepository


class MenuSectionRepository(DocumentRepository[MenuSection]):
    collection_name = "menu_sections"
    id_field = "menu_section_id"
    id_prefix = MENU_SECTION_PREFIX

    def to_document(self, section: MenuSection) -> Dict[str, Any]:
        return asdict(section)

    def from_document(self, doc: Dict[str, Any]) -> MenuSection:
        return MenuSection(
            menu_section_id=doc["menu_section_id"],
            title=doc.get("title"),
            restaurant_id=doc.get("restaurant_id"),
            description=doc.get("description"),
            start_time=doc.get("start_time"),
            end_time=doc.get("end_time"),
            items=[
                SectionItem(
                    menu_item_id=item.get("menu_item_id"),
                    name=item.get("name"),
                    price=item.get("price"),
                    description=item.get("description"),
                    image_url=item.get("image_url"),
                    order=item.get("order"),
                )
                for item in doc.get("items") or []
            ],
        )
