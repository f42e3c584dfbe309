"""Menu item list filter."""

from dataclasses import dataclass
from typing import List, Optional

from domain.shared.ports.document_store import ContainsText, Equals, Predicate


@dataclass(frozen=True)
class MenuItemFilter:
    name: Optional[str] = None
    ingredient_id: Optional[str] = None
    restaurant_id: Optional[str] = None

    def to_predicates(self) -> List[Predicate]:
        predicates: List[Predicate] = []
        if self.name:
            predicates.append(ContainsText("name", self.name))
        if self.ingredient_id:
            predicates.append(Equals("ingredient_ids", self.ingredient_id))
        return predicates
