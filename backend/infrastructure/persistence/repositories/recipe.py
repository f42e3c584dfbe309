"""Recipe repository."""

from dataclasses import asdict
from typing import Any, Dict

from domain.recipe.entity import Recipe, RecipeStep, StepIngredientItem
from domain.shared.business_id import RECIPE_PREFIX
from infrastructure.persistence.repositories.base import DocumentRepository


class RecipeRepository(DocumentRepository[Recipe]):
    """Recipes with embedded steps.

    Steps are stored inline so ingredient and equipment filters can use
    the dotted paths ``steps.ingredient_items.ingredient_id`` and
    ``steps.equipment_ids``.
    """

    collection_name = "recipes"
    id_field = "recipe_id"
    id_prefix = RECIPE_PREFIX

    def to_document(self, recipe: Recipe) -> Dict[str, Any]:
        return asdict(recipe)

    def from_document(self, doc: Dict[str, Any]) -> Recipe:
        return Recipe(
            recipe_id=doc["recipe_id"],
            name=doc.get("name"),
            restaurant_id=doc.get("restaurant_id"),
            servings=doc.get("servings"),
            prep_time=doc.get("prep_time"),
            total_time=doc.get("total_time"),
            description=doc.get("description"),
            image_url=doc.get("image_url"),
            steps=[self._step_from_document(step) for step in doc.get("steps") or []],
        )

    @staticmethod
    def _step_from_document(doc: Dict[str, Any]) -> RecipeStep:
        return RecipeStep(
            text=doc.get("text"),
            order=doc.get("order"),
            equipment_ids=doc.get("equipment_ids") or [],
            ingredient_items=[
                StepIngredientItem(
                    ingredient_id=item.get("ingredient_id"),
                    units=item.get("units"),
                    measure=item.get("measure"),
                )
                for item in doc.get("ingredient_items") or []
            ],
            image_url=doc.get("image_url"),
        )
