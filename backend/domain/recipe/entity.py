"""Recipe aggregate and its steps."""

from dataclasses import dataclass, field
from typing import List, Optional

from domain.shared.errors import InvalidInputError
from domain.shared.validation import (
    require_non_negative,
    require_positive,
    require_text,
)


@dataclass
class StepIngredientItem:
    """Quantity of one ingredient used in a step."""

    ingredient_id: str
    units: float
    measure: Optional[str] = None

    def __post_init__(self) -> None:
        self.ingredient_id = require_text(self.ingredient_id, "ingredient_id")
        require_positive(self.units, "units")


@dataclass
class RecipeStep:
    """One preparation step.

    ``order`` defaults to the step position when the recipe is built.
    """

    text: str
    order: Optional[int] = None
    equipment_ids: List[str] = field(default_factory=list)
    ingredient_items: List[StepIngredientItem] = field(default_factory=list)
    image_url: Optional[str] = None

    def __post_init__(self) -> None:
        self.text = require_text(self.text, "step text")
        if self.order is not None and self.order < 0:
            raise InvalidInputError("order", "must be greater than or equal to 0")


@dataclass
class Recipe:
    """Recipe owned by a restaurant.

    Times are expressed in minutes.

    Examples:
        >>> recipe = Recipe(
        ...     recipe_id="RCP-000001",
        ...     name="Burger",
        ...     restaurant_id="RST-000002",
        ...     servings=2,
        ...     prep_time=10,
        ...     total_time=25,
        ...     steps=[RecipeStep(text="Toast"), RecipeStep(text="Assemble")],
        ... )
        >>> [step.order for step in recipe.steps]
        [0, 1]
    """

    recipe_id: str
    name: str
    restaurant_id: str
    servings: int
    prep_time: int
    total_time: int
    description: Optional[str] = None
    image_url: Optional[str] = None
    steps: List[RecipeStep] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = require_text(self.name, "name")
        self.restaurant_id = require_text(self.restaurant_id, "restaurant_id")
        require_positive(self.servings, "servings")
        require_non_negative(self.prep_time, "prep_time")
        require_non_negative(self.total_time, "total_time")
        for index, step in enumerate(self.steps):
            if step.order is None:
                step.order = index

    def ingredient_ids(self) -> List[str]:
        """Ingredient ids referenced by any step, in step order."""
        return [item.ingredient_id for step in self.steps for item in step.ingredient_items]
