"""Menu entity."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from domain.shared.errors import InvalidInputError
from domain.shared.validation import require_text, unique, validate_time_of_day


class Weekday(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


@dataclass
class Menu:
    """Menu made of sections, active on some weekdays and hours.

    Examples:
        >>> menu = Menu(menu_id="MNU-000001", name="Lunch", restaurant_id="RST-000002",
        ...             active_days=["monday", "monday"], start_time="11:30")
        >>> menu.active_days
        [<Weekday.MONDAY: 'monday'>]
    """

    menu_id: str
    name: str
    restaurant_id: str
    description: Optional[str] = None
    active_days: List[Weekday] = field(default_factory=list)
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    menu_section_ids: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.name = require_text(self.name, "name")
        self.restaurant_id = require_text(self.restaurant_id, "restaurant_id")
        validate_time_of_day(self.start_time, "start_time")
        validate_time_of_day(self.end_time, "end_time")
        try:
            self.active_days = unique(Weekday(day) for day in self.active_days)
        except ValueError as e:
            raise InvalidInputError("active_days", str(e)) from e
        self.menu_section_ids = list(self.menu_section_ids)
