"""Menu section list filter."""

from dataclasses import dataclass
from typing import List, Optional

from domain.shared.ports.document_store import ContainsText, Predicate


@dataclass(frozen=True)
class MenuSectionFilter:
    title: Optional[str] = None
    restaurant_id: Optional[str] = None

    def to_predicates(self) -> List[Predicate]:
        predicates: List[Predicate] = []
        if self.title:
            predicates.append(ContainsText("title", self.title))
        return predicates
