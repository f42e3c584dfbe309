"""REST endpoints for the equipment catalog (writes are admin-only)."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from api.dependencies import ServiceContainer, get_current_actor, get_pagination, get_services
from api.schemas import ApiModel
from domain.equipment.filters import EquipmentFilter
from domain.shared.pagination import Pagination
from domain.user.actor import Actor

router = APIRouter(prefix="/api/v1/equipment", tags=["equipment"])


class EquipmentCreate(BaseModel):
    name: str = Field(..., min_length=1)
    image_url: Optional[str] = None


class EquipmentUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = None


class EquipmentResponse(ApiModel):
    equipment_id: str
    name: str
    image_url: Optional[str] = None


@router.post("", response_model=EquipmentResponse, status_code=status.HTTP_201_CREATED)
async def create_equipment(
    payload: EquipmentCreate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> EquipmentResponse:
    equipment = await services.equipment.create(actor, payload.model_dump())
    return EquipmentResponse.model_validate(equipment)


@router.get("", response_model=List[EquipmentResponse])
async def list_equipment(
    name: Optional[str] = Query(None, description="Case-insensitive name substring"),
    pagination: Pagination = Depends(get_pagination),
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> List[EquipmentResponse]:
    items = await services.equipment.find_all(actor, EquipmentFilter(name=name), pagination)
    return [EquipmentResponse.model_validate(e) for e in items]


@router.get("/{equipment_id}", response_model=EquipmentResponse)
async def get_equipment(
    equipment_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> EquipmentResponse:
    return EquipmentResponse.model_validate(await services.equipment.get(actor, equipment_id))


@router.patch("/{equipment_id}", response_model=EquipmentResponse)
async def update_equipment(
    equipment_id: str,
    payload: EquipmentUpdate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> EquipmentResponse:
    equipment = await services.equipment.update(
        actor, equipment_id, payload.model_dump(exclude_unset=True)
    )
    return EquipmentResponse.model_validate(equipment)


@router.delete("/{equipment_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_equipment(
    equipment_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> Response:
    await services.equipment.delete(actor, equipment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
