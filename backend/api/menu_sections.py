"""REST endpoints for menu sections."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from api.dependencies import ServiceContainer, get_current_actor, get_pagination, get_services
from api.schemas import ApiModel
from domain.menu_section.filters import MenuSectionFilter
from domain.shared.pagination import Pagination
from domain.user.actor import Actor

router = APIRouter(prefix="/api/v1/menu-sections", tags=["menu-sections"])


class SectionItemInput(BaseModel):
    menu_item_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    description: Optional[str] = None
    image_url: Optional[str] = None
    order: Optional[int] = Field(None, ge=0)


class MenuSectionCreate(BaseModel):
    title: str = Field(..., min_length=1)
    restaurant_id: str = Field(..., min_length=1)
    description: Optional[str] = None
    # HH:MM, checked by the domain so malformed values answer 400
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    items: List[SectionItemInput] = Field(default_factory=list)


class MenuSectionUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1)
    restaurant_id: Optional[str] = None
    description: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    items: Optional[List[SectionItemInput]] = None


class SectionItemResponse(ApiModel):
    menu_item_id: str
    name: str
    price: float
    description: Optional[str] = None
    image_url: Optional[str] = None
    order: int


class MenuSectionResponse(ApiModel):
    menu_section_id: str
    title: str
    restaurant_id: str
    description: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    items: List[SectionItemResponse]


@router.post("", response_model=MenuSectionResponse, status_code=status.HTTP_201_CREATED)
async def create_menu_section(
    payload: MenuSectionCreate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> MenuSectionResponse:
    section = await services.menu_sections.create(actor, payload.model_dump())
    return MenuSectionResponse.model_validate(section)


@router.get("", response_model=List[MenuSectionResponse])
async def list_menu_sections(
    title: Optional[str] = Query(None, description="Case-insensitive title substring"),
    restaurant_id: Optional[str] = Query(None),
    pagination: Pagination = Depends(get_pagination),
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> List[MenuSectionResponse]:
    filters = MenuSectionFilter(title=title, restaurant_id=restaurant_id)
    sections = await services.menu_sections.find_all(actor, filters, pagination)
    return [MenuSectionResponse.model_validate(s) for s in sections]


@router.get("/{menu_section_id}", response_model=MenuSectionResponse)
async def get_menu_section(
    menu_section_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> MenuSectionResponse:
    section = await services.menu_sections.get(actor, menu_section_id)
    return MenuSectionResponse.model_validate(section)


@router.patch("/{menu_section_id}", response_model=MenuSectionResponse)
async def update_menu_section(
    menu_section_id: str,
    payload: MenuSectionUpdate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> MenuSectionResponse:
    section = await services.menu_sections.update(
        actor, menu_section_id, payload.model_dump(exclude_unset=True)
    )
    return MenuSectionResponse.model_validate(section)


@router.delete(
    "/{menu_section_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def delete_menu_section(
    menu_section_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> Response:
    await services.menu_sections.delete(actor, menu_section_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
