"""Enriched read models returned by the resource services."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class NamedRef:
    """Id paired with a display name."""

    id: str
    name: str


@dataclass
class IngredientView:
    ingredient_id: str
    name: str
    restaurant_id: str
    allergy_ids: List[str]
    sub_ingredient_ids: List[str]
    categories: List[str]
    image_url: Optional[str]
    derived_allergy_ids: List[str] = field(default_factory=list)
    sub_ingredient_details: List[NamedRef] = field(default_factory=list)
    is_core_ingredient: bool = False


@dataclass
class MenuItemView:
    menu_item_id: str
    name: str
    restaurant_id: str
    description: Optional[str]
    ingredient_ids: List[str]
    image_url: Optional[str]
    ingredient_names: List[str] = field(default_factory=list)
    allergies: List[NamedRef] = field(default_factory=list)


@dataclass
class StepIngredientView:
    ingredient_id: str
    units: float
    measure: Optional[str]
    ingredient_name: str


@dataclass
class RecipeStepView:
    text: str
    order: int
    equipment_ids: List[str]
    ingredient_items: List[StepIngredientView]
    image_url: Optional[str]


@dataclass
class RecipeView:
    recipe_id: str
    name: str
    restaurant_id: str
    servings: int
    prep_time: int
    total_time: int
    description: Optional[str]
    image_url: Optional[str]
    steps: List[RecipeStepView] = field(default_factory=list)
