"""REST endpoints for menu items.

Responses carry ingredient names (parallel to ``ingredient_ids``) and the
allergy rollup across every ingredient and sub-ingredient.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from api.dependencies import ServiceContainer, get_current_actor, get_pagination, get_services
from api.schemas import ApiModel, NamedRefResponse
from domain.menu_item.filters import MenuItemFilter
from domain.shared.pagination import Pagination
from domain.user.actor import Actor

router = APIRouter(prefix="/api/v1/menu-items", tags=["menu-items"])


class MenuItemCreate(BaseModel):
    name: str = Field(..., min_length=1)
    restaurant_id: str = Field(..., min_length=1)
    description: Optional[str] = None
    ingredient_ids: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None


class MenuItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    restaurant_id: Optional[str] = None
    description: Optional[str] = None
    ingredient_ids: Optional[List[str]] = None
    image_url: Optional[str] = None


class MenuItemResponse(ApiModel):
    menu_item_id: str
    name: str
    restaurant_id: str
    description: Optional[str] = None
    ingredient_ids: List[str]
    image_url: Optional[str] = None
    ingredient_names: List[str]
    allergies: List[NamedRefResponse]


@router.post("", response_model=MenuItemResponse, status_code=status.HTTP_201_CREATED)
async def create_menu_item(
    payload: MenuItemCreate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> MenuItemResponse:
    menu_item = await services.menu_items.create(actor, payload.model_dump())
    return MenuItemResponse.model_validate(menu_item)


@router.get("", response_model=List[MenuItemResponse])
async def list_menu_items(
    name: Optional[str] = Query(None, description="Case-insensitive name substring"),
    ingredient_id: Optional[str] = Query(None),
    restaurant_id: Optional[str] = Query(None),
    pagination: Pagination = Depends(get_pagination),
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> List[MenuItemResponse]:
    filters = MenuItemFilter(name=name, ingredient_id=ingredient_id, restaurant_id=restaurant_id)
    menu_items = await services.menu_items.find_all(actor, filters, pagination)
    return [MenuItemResponse.model_validate(m) for m in menu_items]


@router.get("/{menu_item_id}", response_model=MenuItemResponse)
async def get_menu_item(
    menu_item_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> MenuItemResponse:
    return MenuItemResponse.model_validate(await services.menu_items.get(actor, menu_item_id))


@router.patch("/{menu_item_id}", response_model=MenuItemResponse)
async def update_menu_item(
    menu_item_id: str,
    payload: MenuItemUpdate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> MenuItemResponse:
    menu_item = await services.menu_items.update(
        actor, menu_item_id, payload.model_dump(exclude_unset=True)
    )
    return MenuItemResponse.model_validate(menu_item)


@router.delete("/{menu_item_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_menu_item(
    menu_item_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> Response:
    await services.menu_items.delete(actor, menu_item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
