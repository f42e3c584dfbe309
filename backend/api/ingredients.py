"""REST endpoints for ingredients.

Responses carry the derived allergies (inherited through sub-ingredients),
the names of resolvable sub-ingredients and whether the ingredient belongs
to the shared core catalog.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from api.dependencies import ServiceContainer, get_current_actor, get_pagination, get_services
from api.schemas import ApiModel, NamedRefResponse
from domain.ingredient.filters import IngredientFilter
from domain.shared.pagination import Pagination
from domain.user.actor import Actor

router = APIRouter(prefix="/api/v1/ingredients", tags=["ingredients"])


class IngredientCreate(BaseModel):
    name: str = Field(..., min_length=1)
    restaurant_id: str = Field(..., min_length=1)
    allergy_ids: List[str] = Field(default_factory=list)
    sub_ingredient_ids: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None


class IngredientUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    restaurant_id: Optional[str] = None
    allergy_ids: Optional[List[str]] = None
    sub_ingredient_ids: Optional[List[str]] = None
    categories: Optional[List[str]] = None
    image_url: Optional[str] = None


class IngredientResponse(ApiModel):
    ingredient_id: str
    name: str
    restaurant_id: str
    allergy_ids: List[str]
    sub_ingredient_ids: List[str]
    categories: List[str]
    image_url: Optional[str] = None
    derived_allergy_ids: List[str]
    sub_ingredient_details: List[NamedRefResponse]
    is_core_ingredient: bool


@router.post("", response_model=IngredientResponse, status_code=status.HTTP_201_CREATED)
async def create_ingredient(
    payload: IngredientCreate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> IngredientResponse:
    ingredient = await services.ingredients.create(actor, payload.model_dump())
    return IngredientResponse.model_validate(ingredient)


@router.get("", response_model=List[IngredientResponse])
async def list_ingredients(
    name: Optional[str] = Query(None, description="Case-insensitive name substring"),
    allergy_id: Optional[str] = Query(None, description="Direct allergy id"),
    category: Optional[str] = Query(None),
    restaurant_id: Optional[str] = Query(None),
    pagination: Pagination = Depends(get_pagination),
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> List[IngredientResponse]:
    filters = IngredientFilter(
        name=name,
        allergy_id=allergy_id,
        category=category,
        restaurant_id=restaurant_id,
    )
    ingredients = await services.ingredients.find_all(actor, filters, pagination)
    return [IngredientResponse.model_validate(i) for i in ingredients]


@router.get("/{ingredient_id}", response_model=IngredientResponse)
async def get_ingredient(
    ingredient_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> IngredientResponse:
    return IngredientResponse.model_validate(await services.ingredients.get(actor, ingredient_id))


@router.get("/{ingredient_id}/allergies", response_model=List[NamedRefResponse])
async def list_ingredient_allergies(
    ingredient_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> List[NamedRefResponse]:
    allergies = await services.ingredients.list_allergies(actor, ingredient_id)
    return [NamedRefResponse.model_validate(a) for a in allergies]


@router.patch("/{ingredient_id}", response_model=IngredientResponse)
async def update_ingredient(
    ingredient_id: str,
    payload: IngredientUpdate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> IngredientResponse:
    ingredient = await services.ingredients.update(
        actor, ingredient_id, payload.model_dump(exclude_unset=True)
    )
    return IngredientResponse.model_validate(ingredient)


@router.delete("/{ingredient_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_ingredient(
    ingredient_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> Response:
    await services.ingredients.delete(actor, ingredient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
