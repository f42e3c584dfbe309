"""Unit test fixtures.

Services are wired over a fresh in-memory document store. The seeded
tenants are:

- RST-000001: core catalog, created by the admin
- RST-000002: created by the manager, with the member associated
- RST-000003: created by the outsider
"""

from typing import Dict

import pytest
import pytest_asyncio

from application.allergy.service import AllergyService
from application.enrichment.service import EnrichmentService
from application.equipment.service import EquipmentService
from application.ingredient.service import IngredientService
from application.membership.service import MembershipService
from application.menu.service import MenuService
from application.menu_item.service import MenuItemService
from application.menu_section.service import MenuSectionService
from application.recipe.service import RecipeService
from application.restaurant.service import RestaurantService
from domain.restaurant.entity import Restaurant
from domain.user.actor import Actor
from domain.user.entity import Role, User
from infrastructure.persistence.in_memory.document_store import InMemoryDocumentStore
from infrastructure.persistence.repositories import (
    AllergyRepository,
    EquipmentRepository,
    IngredientRepository,
    MenuItemRepository,
    MenuRepository,
    MenuSectionRepository,
    RecipeRepository,
    RestaurantRepository,
    UserRepository,
)

CORE = "RST-000001"
MAIN = "RST-000002"
OTHER = "RST-000003"


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def restaurant_repository(store):
    return RestaurantRepository(store)


@pytest.fixture
def user_repository(store):
    return UserRepository(store)


@pytest.fixture
def ingredient_repository(store):
    return IngredientRepository(store)


@pytest.fixture
def allergy_repository(store):
    return AllergyRepository(store)


@pytest.fixture
def membership(restaurant_repository, user_repository):
    return MembershipService(restaurant_repository, user_repository)


@pytest.fixture
def enrichment(ingredient_repository, allergy_repository):
    return EnrichmentService(ingredient_repository, allergy_repository)


@pytest.fixture
def ingredient_service(ingredient_repository, membership, enrichment):
    return IngredientService(ingredient_repository, membership, enrichment)


@pytest.fixture
def menu_item_service(store, membership, enrichment):
    return MenuItemService(MenuItemRepository(store), membership, enrichment)


@pytest.fixture
def recipe_service(store, membership, enrichment):
    return RecipeService(RecipeRepository(store), membership, enrichment)


@pytest.fixture
def menu_section_service(store, membership):
    return MenuSectionService(MenuSectionRepository(store), membership)


@pytest.fixture
def menu_service(store, membership):
    return MenuService(MenuRepository(store), membership)


@pytest.fixture
def allergy_service(allergy_repository):
    return AllergyService(allergy_repository)


@pytest.fixture
def equipment_service(store):
    return EquipmentService(EquipmentRepository(store))


@pytest.fixture
def restaurant_service(restaurant_repository, membership):
    return RestaurantService(restaurant_repository, membership)


@pytest.fixture
def admin() -> Actor:
    return Actor(id="auth0|admin", role=Role.ADMIN)


@pytest.fixture
def manager() -> Actor:
    return Actor(id="auth0|manager", role=Role.MANAGER)


@pytest.fixture
def member() -> Actor:
    return Actor(id="auth0|member", role=Role.MEMBER)


@pytest.fixture
def outsider() -> Actor:
    return Actor(id="auth0|outsider", role=Role.MEMBER)


@pytest_asyncio.fixture
async def tenants(
    restaurant_repository, user_repository, admin, manager, member, outsider
) -> Dict[str, Restaurant]:
    """Seed the three restaurants and both sides of their memberships."""
    restaurants = {
        CORE: Restaurant(restaurant_id=CORE, name="Core Catalog", created_by=admin.id),
        MAIN: Restaurant(
            restaurant_id=MAIN,
            name="Trattoria",
            created_by=manager.id,
            associated_users=[manager.id, member.id],
        ),
        OTHER: Restaurant(restaurant_id=OTHER, name="Bistro", created_by=outsider.id),
    }
    for restaurant in restaurants.values():
        await restaurant_repository.add(restaurant)

    await user_repository.add(User(user_id=admin.id, role=Role.ADMIN, associated_restaurants=[CORE]))
    await user_repository.add(
        User(user_id=manager.id, role=Role.MANAGER, associated_restaurants=[MAIN])
    )
    await user_repository.add(User(user_id=member.id, role=Role.MEMBER, associated_restaurants=[MAIN]))
    await user_repository.add(
        User(user_id=outsider.id, role=Role.MEMBER, associated_restaurants=[OTHER])
    )
    return restaurants
