"""Ingredient entity."""

from dataclasses import dataclass, field
from typing import List, Optional

from domain.shared.tenancy import is_core
from domain.shared.validation import require_text, unique


@dataclass
class Ingredient:
    """Ingredient, possibly composed of other ingredients.

    ``sub_ingredient_ids`` forms a directed graph that is not guaranteed to
    be acyclic. Ingredients owned by the core restaurant are shared with
    every tenant.

    Examples:
        >>> bun = Ingredient(
        ...     ingredient_id="ING-000001",
        ...     name="Bun",
        ...     restaurant_id="RST-000002",
        ...     allergy_ids=["ALG-000001", "ALG-000001"],
        ...     sub_ingredient_ids=["ING-000002"],
        ... )
        >>> bun.allergy_ids
        ['ALG-000001']
    """

    ingredient_id: str
    name: str
    restaurant_id: str
    allergy_ids: List[str] = field(default_factory=list)
    sub_ingredient_ids: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    image_url: Optional[str] = None

    def __post_init__(self) -> None:
        self.name = require_text(self.name, "name")
        self.restaurant_id = require_text(self.restaurant_id, "restaurant_id")
        self.allergy_ids = unique(self.allergy_ids)
        self.categories = unique(self.categories)
        self.sub_ingredient_ids = list(self.sub_ingredient_ids)

    @property
    def is_core(self) -> bool:
        return is_core(self.restaurant_id)
