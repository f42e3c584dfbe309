"""REST endpoints for menus."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from api.dependencies import ServiceContainer, get_current_actor, get_pagination, get_services
from api.schemas import ApiModel
from domain.menu.entity import Weekday
from domain.menu.filters import MenuFilter
from domain.shared.pagination import Pagination
from domain.user.actor import Actor

router = APIRouter(prefix="/api/v1/menus", tags=["menus"])


class MenuCreate(BaseModel):
    name: str = Field(..., min_length=1)
    restaurant_id: str = Field(..., min_length=1)
    description: Optional[str] = None
    active_days: List[Weekday] = Field(default_factory=list)
    # HH:MM, checked by the domain so malformed values answer 400
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    menu_section_ids: List[str] = Field(default_factory=list)


class MenuUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    restaurant_id: Optional[str] = None
    description: Optional[str] = None
    active_days: Optional[List[Weekday]] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    menu_section_ids: Optional[List[str]] = None


class MenuResponse(ApiModel):
    menu_id: str
    name: str
    restaurant_id: str
    description: Optional[str] = None
    active_days: List[Weekday]
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    menu_section_ids: List[str]


@router.post("", response_model=MenuResponse, status_code=status.HTTP_201_CREATED)
async def create_menu(
    payload: MenuCreate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> MenuResponse:
    menu = await services.menus.create(actor, payload.model_dump())
    return MenuResponse.model_validate(menu)


@router.get("", response_model=List[MenuResponse])
async def list_menus(
    name: Optional[str] = Query(None, description="Case-insensitive name substring"),
    active_day: Optional[Weekday] = Query(None),
    restaurant_id: Optional[str] = Query(None),
    pagination: Pagination = Depends(get_pagination),
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> List[MenuResponse]:
    filters = MenuFilter(name=name, active_day=active_day, restaurant_id=restaurant_id)
    menus = await services.menus.find_all(actor, filters, pagination)
    return [MenuResponse.model_validate(m) for m in menus]


@router.get("/{menu_id}", response_model=MenuResponse)
async def get_menu(
    menu_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> MenuResponse:
    return MenuResponse.model_validate(await services.menus.get(actor, menu_id))


@router.patch("/{menu_id}", response_model=MenuResponse)
async def update_menu(
    menu_id: str,
    payload: MenuUpdate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> MenuResponse:
    menu = await services.menus.update(actor, menu_id, payload.model_dump(exclude_unset=True))
    return MenuResponse.model_validate(menu)


@router.delete("/{menu_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_menu(
    menu_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> Response:
    await services.menus.delete(actor, menu_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
