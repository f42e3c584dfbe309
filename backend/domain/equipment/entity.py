"""Equipment entity."""

from dataclasses import dataclass
from typing import Optional

from domain.shared.validation import require_text


@dataclass
class Equipment:
    """Kitchen equipment referenced by recipe steps."""

    equipment_id: str
    name: str
    image_url: Optional[str] = None

    def __post_init__(self) -> None:
        self.name = require_text(self.name, "name")
