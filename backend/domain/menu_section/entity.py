"""Menu section entity."""

from dataclasses import dataclass, field
from typing import List, Optional

from domain.shared.errors import InvalidInputError
from domain.shared.validation import (
    require_non_negative,
    require_text,
    validate_time_of_day,
)


@dataclass
class SectionItem:
    """Menu item placement inside a section, with its displayed price."""

    menu_item_id: str
    name: str
    price: float
    description: Optional[str] = None
    image_url: Optional[str] = None
    order: Optional[int] = None

    def __post_init__(self) -> None:
        self.menu_item_id = require_text(self.menu_item_id, "menu_item_id")
        self.name = require_text(self.name, "item name")
        require_non_negative(self.price, "price")
        if self.order is not None and self.order < 0:
            raise InvalidInputError("order", "must be greater than or equal to 0")


@dataclass
class MenuSection:
    """Titled group of items, optionally served within a time window."""

    menu_section_id: str
    title: str
    restaurant_id: str
    description: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    items: List[SectionItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.title = require_text(self.title, "title")
        self.restaurant_id = require_text(self.restaurant_id, "restaurant_id")
        validate_time_of_day(self.start_time, "start_time")
        validate_time_of_day(self.end_time, "end_time")
        for index, item in enumerate(self.items):
            if item.order is None:
                item.order = index
