"""REST endpoints for the allergy catalog."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from api.dependencies import ServiceContainer, get_current_actor, get_pagination, get_services
from api.schemas import ApiModel
from domain.allergy.filters import AllergyFilter
from domain.shared.pagination import Pagination
from domain.user.actor import Actor

router = APIRouter(prefix="/api/v1/allergies", tags=["allergies"])


class AllergyCreate(BaseModel):
    name: str = Field(..., min_length=1)
    logo_url: Optional[str] = None


class AllergyUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    logo_url: Optional[str] = None


class AllergyResponse(ApiModel):
    allergy_id: str
    name: str
    logo_url: Optional[str] = None


@router.post("", response_model=AllergyResponse, status_code=status.HTTP_201_CREATED)
async def create_allergy(
    payload: AllergyCreate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> AllergyResponse:
    allergy = await services.allergies.create(actor, payload.model_dump())
    return AllergyResponse.model_validate(allergy)


@router.get("", response_model=List[AllergyResponse])
async def list_allergies(
    name: Optional[str] = Query(None, description="Case-insensitive name substring"),
    pagination: Pagination = Depends(get_pagination),
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> List[AllergyResponse]:
    allergies = await services.allergies.find_all(actor, AllergyFilter(name=name), pagination)
    return [AllergyResponse.model_validate(a) for a in allergies]


@router.get("/{allergy_id}", response_model=AllergyResponse)
async def get_allergy(
    allergy_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> AllergyResponse:
    return AllergyResponse.model_validate(await services.allergies.get(actor, allergy_id))


@router.patch("/{allergy_id}", response_model=AllergyResponse)
async def update_allergy(
    allergy_id: str,
    payload: AllergyUpdate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> AllergyResponse:
    allergy = await services.allergies.update(
        actor, allergy_id, payload.model_dump(exclude_unset=True)
    )
    return AllergyResponse.model_validate(allergy)


@router.delete("/{allergy_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_allergy(
    allergy_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> Response:
    await services.allergies.delete(actor, allergy_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
