"""Restaurant repository."""

from dataclasses import asdict
from typing import Any, Dict

from domain.restaurant.entity import Restaurant
from domain.shared.business_id import RESTAURANT_PREFIX
from infrastructure.persistence.repositories.base import DocumentRepository


class RestaurantRepository(DocumentRepository[Restaurant]):
    collection_name = "restaurants"
    id_field = "restaurant_id"
    id_prefix = RESTAURANT_PREFIX

    def to_document(self, restaurant: Restaurant) -> Dict[str, Any]:
        return asdict(restaurant)

    def from_document(self, doc: Dict[str, Any]) -> Restaurant:
        return Restaurant(
            restaurant_id=doc["restaurant_id"],
            name=doc.get("name"),
            created_by=doc.get("created_by"),
            associated_users=doc.get("associated_users") or [],
            description=doc.get("description"),
            address=doc.get("address"),
            phone=doc.get("phone"),
            email=doc.get("email"),
            website=doc.get("website"),
        )
