"""Recipe list filter."""

from dataclasses import dataclass
from typing import List, Optional

from domain.shared.ports.document_store import AtMost, ContainsText, Equals, Predicate


@dataclass(frozen=True)
class RecipeFilter:
    name: Optional[str] = None
    ingredient_id: Optional[str] = None
    equipment_id: Optional[str] = None
    max_prep_time: Optional[int] = None
    restaurant_id: Optional[str] = None

    def to_predicates(self) -> List[Predicate]:
        predicates: List[Predicate] = []
        if self.name:
            predicates.append(ContainsText("name", self.name))
        if self.ingredient_id:
            predicates.append(Equals("steps.ingredient_items.ingredient_id", self.ingredient_id))
        if self.equipment_id:
            predicates.append(Equals("steps.equipment_ids", self.equipment_id))
        if self.max_prep_time is not None:
            predicates.append(AtMost("prep_time", self.max_prep_time))
        return predicates
