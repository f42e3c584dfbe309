"""Allergy repository."""

from dataclasses import asdict
from typing import Any, Dict

from domain.allergy.entity import Allergy
from domain.shared.business_id import ALLERGY_PREFIX
from infrastructure.persistence.repositories.base import DocumentRepository


class AllergyRepository(DocumentRepository[Allergy]):
    collection_name = "allergies"
    id_field = "allergy_id"
    id_prefix = ALLERGY_PREFIX

    def to_document(self, allergy: Allergy) -> Dict[str, Any]:
        return asdict(allergy)

    def from_document(self, doc: Dict[str, Any]) -> Allergy:
        return Allergy(
            allergy_id=doc["allergy_id"],
            name=doc.get("name"),
            logo_url=doc.get("logo_url"),
        )
