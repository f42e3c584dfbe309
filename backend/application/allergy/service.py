"""Allergy service.

Allergies are a global catalog: any authenticated actor may manage them.
"""

from application.shared.resource_service import GlobalResourceService
from domain.allergy.entity import Allergy


class AllergyService(GlobalResourceService[Allergy, Allergy]):
    resource_name = "Allergy"
