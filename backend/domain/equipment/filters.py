"""Equipment list filter."""

from dataclasses import dataclass
from typing import List, Optional

from domain.shared.ports.document_store import ContainsText, Predicate


@dataclass(frozen=True)
class EquipmentFilter:
    name: Optional[str] = None

    def to_predicates(self) -> List[Predicate]:
        predicates: List[Predicate] = []
        if self.name:
            predicates.append(ContainsText("name", self.name))
        return predicates
