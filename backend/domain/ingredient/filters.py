"""Ingredient list filter."""

from dataclasses import dataclass
from typing import List, Optional

from domain.shared.ports.document_store import ContainsText, Equals, Predicate


@dataclass(frozen=True)
class IngredientFilter:
    """Optional ingredient query fields.

    ``restaurant_id`` is not translated here: restaurant visibility depends
    on the actor and is resolved by the membership service.
    """

    name: Optional[str] = None
    allergy_id: Optional[str] = None
    category: Optional[str] = None
    restaurant_id: Optional[str] = None

    def to_predicates(self) -> List[Predicate]:
        predicates: List[Predicate] = []
        if self.name:
            predicates.append(ContainsText("name", self.name))
        if self.allergy_id:
            predicates.append(Equals("allergy_ids", self.allergy_id))
        if self.category:
            predicates.append(Equals("categories", self.category))
        return predicates
