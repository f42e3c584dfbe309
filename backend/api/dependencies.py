"""Service wiring and request dependencies."""

from dataclasses import dataclass

from fastapi import Depends, HTTPException, Query, Request, status

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
from application.user.commands.authenticate_actor import AuthenticateActorCommand
from domain.shared.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, Pagination
from domain.shared.ports.document_store import IDocumentStore
from domain.user.actor import Actor
from infrastructure.config import get_role_claim
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

MAX_PAGE_SIZE = 100


@dataclass
class ServiceContainer:
    """Application services sharing one document store."""

    membership: MembershipService
    authenticate: AuthenticateActorCommand
    allergies: AllergyService
    equipment: EquipmentService
    ingredients: IngredientService
    menu_items: MenuItemService
    menu_sections: MenuSectionService
    menus: MenuService
    recipes: RecipeService
    restaurants: RestaurantService


def build_services(store: IDocumentStore) -> ServiceContainer:
    restaurant_repository = RestaurantRepository(store)
    user_repository = UserRepository(store)
    ingredient_repository = IngredientRepository(store)
    allergy_repository = AllergyRepository(store)

    membership = MembershipService(restaurant_repository, user_repository)
    enrichment = EnrichmentService(ingredient_repository, allergy_repository)

    return ServiceContainer(
        membership=membership,
        authenticate=AuthenticateActorCommand(user_repository),
        allergies=AllergyService(allergy_repository),
        equipment=EquipmentService(EquipmentRepository(store)),
        ingredients=IngredientService(ingredient_repository, membership, enrichment),
        menu_items=MenuItemService(MenuItemRepository(store), membership, enrichment),
        menu_sections=MenuSectionService(MenuSectionRepository(store), membership),
        menus=MenuService(MenuRepository(store), membership),
        recipes=RecipeService(RecipeRepository(store), membership, enrichment),
        restaurants=RestaurantService(restaurant_repository, membership),
    )


def get_services(request: Request) -> ServiceContainer:
    services: ServiceContainer = request.app.state.services
    return services


async def get_current_actor(
    request: Request,
    services: ServiceContainer = Depends(get_services),
) -> Actor:
    """Resolve the actor from the claims set by AuthMiddleware.

    Raises:
        HTTPException: 401 when the request carries no verified subject
    """
    claims = getattr(request.state, "auth_claims", None)
    subject = claims.get("sub") if claims else None
    if not subject:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return await services.authenticate.execute(subject, claims.get(get_role_claim()))


def get_pagination(
    page: int = Query(DEFAULT_PAGE, ge=1, description="1-based page number"),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_PAGE_SIZE, description="Page size"),
) -> Pagination:
    return Pagination(page=page, limit=limit)
