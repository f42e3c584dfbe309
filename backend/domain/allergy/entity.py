"""Allergy entity."""

from dataclasses import dataclass
from typing import Optional

from domain.shared.validation import require_text


@dataclass
class Allergy:
    """Allergen shared by every restaurant."""

    allergy_id: str
    name: str
    logo_url: Optional[str] = None

    def __post_init__(self) -> None:
        self.name = require_text(self.name, "name")
