"""Ingredient repository."""

from dataclasses import asdict
from typing import Any, Dict

from domain.ingredient.entity import Ingredient
from domain.shared.business_id import INGREDIENT_PREFIX
from infrastructure.persistence.repositories.base import DocumentRepository


class IngredientRepository(DocumentRepository[Ingredient]):
    """Ingredients of every restaurant, core catalog included.

    Lookups here are never restricted by restaurant: sub-ingredient
    references may cross into the shared core catalog.
    """

    collection_name = "ingredients"
    id_field = "ingredient_id"
    id_prefix = INGREDIENT_PREFIX

    def to_document(self, ingredient: Ingredient) -> Dict[str, Any]:
        return asdict(ingredient)

    def from_document(self, doc: Dict[str, Any]) -> Ingredient:
        return Ingredient(
            ingredient_id=doc["ingredient_id"],
            name=doc.get("name"),
            restaurant_id=doc.get("restaurant_id"),
            allergy_ids=doc.get("allergy_ids") or [],
            sub_ingredient_ids=doc.get("sub_ingredient_ids") or [],
            categories=doc.get("categories") or [],
            image_url=doc.get("image_url"),
        )
