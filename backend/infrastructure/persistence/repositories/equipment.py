"""Equipment repository."""

from dataclasses import asdict
from typing import Any, Dict

from domain.equipment.entity import Equipment
from domain.shared.business_id import EQUIPMENT_PREFIX
from infrastructure.persistence.repositories.base import DocumentRepository


class EquipmentRepository(DocumentRepository[Equipment]):
    collection_name = "equipment"
    id_field = "equipment_id"
    id_prefix = EQUIPMENT_PREFIX

    def to_document(self, equipment: Equipment) -> Dict[str, Any]:
        return asdict(equipment)

    def from_document(self, doc: Dict[str, Any]) -> Equipment:
        return Equipment(
            equipment_id=doc["equipment_id"],
            name=doc.get("name"),
            image_url=doc.get("image_url"),
        )
