"""Menu list filter."""

from dataclasses import dataclass
from typing import List, Optional

from domain.menu.entity import Weekday
from domain.shared.ports.document_store import ContainsText, Equals, Predicate


@dataclass(frozen=True)
class MenuFilter:
    name: Optional[str] = None
    active_day: Optional[Weekday] = None
    restaurant_id: Optional[str] = None

    def to_predicates(self) -> List[Predicate]:
        predicates: List[Predicate] = []
        if self.name:
            predicates.append(ContainsText("name", self.name))
        if self.active_day:
            predicates.append(Equals("active_days", Weekday(self.active_day).value))
        return predicates
