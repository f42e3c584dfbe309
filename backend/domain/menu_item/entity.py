"""Menu item entity."""

from dataclasses import dataclass, field
from typing import List, Optional

from domain.shared.validation import require_text


@dataclass
class MenuItem:
    """Dish offered by a restaurant.

    Ingredient names and the allergy rollup are not stored; they are
    attached at read time by the enrichment service.
    """

    menu_item_id: str
    name: str
    restaurant_id: str
    description: Optional[str] = None
    ingredient_ids: List[str] = field(default_factory=list)
    image_url: Optional[str] = None

    def __post_init__(self) -> None:
        self.name = require_text(self.name, "name")
        self.restaurant_id = require_text(self.restaurant_id, "restaurant_id")
        self.ingredient_ids = list(self.ingredient_ids)
