"""Entity repositories on top of the document store port."""

from infrastructure.persistence.repositories.allergy import AllergyRepository
from infrastructure.persistence.repositories.base import DocumentRepository
from infrastructure.persistence.repositories.equipment import EquipmentRepository
from infrastructure.persistence.repositories.ingredient import IngredientRepository
from infrastructure.persistence.repositories.menu import MenuRepository
from infrastructure.persistence.repositories.menu_item import MenuItemRepository
from infrastructure.persistence.repositories.menu_section import MenuSectionRepository
from infrastructure.persistence.repositories.recipe import RecipeRepository
from infrastructure.persistence.repositories.restaurant import RestaurantRepository
from infrastructure.persistence.repositories.user import UserRepository

__all__ = [
    "AllergyRepository",
    "DocumentRepository",
    "EquipmentRepository",
    "IngredientRepository",
    "MenuItemRepository",
    "MenuRepository",
    "MenuSectionRepository",
    "RecipeRepository",
    "RestaurantRepository",
    "UserRepository",
]
