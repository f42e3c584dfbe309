"""REST endpoints for recipes.

Step ``order`` defaults to the step position when omitted. Responses carry
the resolved ``ingredient_name`` of every step ingredient item.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from api.dependencies import ServiceContainer, get_current_actor, get_pagination, get_services
from api.schemas import ApiModel
from domain.recipe.filters import RecipeFilter
from domain.shared.pagination import Pagination
from domain.user.actor import Actor

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


class StepIngredientItemInput(BaseModel):
    ingredient_id: str = Field(..., min_length=1)
    units: float = Field(..., gt=0)
    measure: Optional[str] = None


class RecipeStepInput(BaseModel):
    text: str = Field(..., min_length=1)
    order: Optional[int] = Field(None, ge=0)
    equipment_ids: List[str] = Field(default_factory=list)
    ingredient_items: List[StepIngredientItemInput] = Field(default_factory=list)
    image_url: Optional[str] = None


class RecipeCreate(BaseModel):
    name: str = Field(..., min_length=1)
    restaurant_id: str = Field(..., min_length=1)
    servings: int = Field(..., gt=0)
    prep_time: int = Field(..., ge=0, description="Minutes")
    total_time: int = Field(..., ge=0, description="Minutes")
    description: Optional[str] = None
    image_url: Optional[str] = None
    steps: List[RecipeStepInput] = Field(default_factory=list)


class RecipeUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    restaurant_id: Optional[str] = None
    servings: Optional[int] = Field(None, gt=0)
    prep_time: Optional[int] = Field(None, ge=0)
    total_time: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    image_url: Optional[str] = None
    steps: Optional[List[RecipeStepInput]] = None


class StepIngredientItemResponse(ApiModel):
    ingredient_id: str
    units: float
    measure: Optional[str] = None
    ingredient_name: str


class RecipeStepResponse(ApiModel):
    text: str
    order: int
    equipment_ids: List[str]
    ingredient_items: List[StepIngredientItemResponse]
    image_url: Optional[str] = None


class RecipeResponse(ApiModel):
    recipe_id: str
    name: str
    restaurant_id: str
    servings: int
    prep_time: int
    total_time: int
    description: Optional[str] = None
    image_url: Optional[str] = None
    steps: List[RecipeStepResponse]


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
async def create_recipe(
    payload: RecipeCreate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> RecipeResponse:
    recipe = await services.recipes.create(actor, payload.model_dump())
    return RecipeResponse.model_validate(recipe)


@router.get("", response_model=List[RecipeResponse])
async def list_recipes(
    name: Optional[str] = Query(None, description="Case-insensitive name substring"),
    ingredient_id: Optional[str] = Query(None, description="Used in any step"),
    equipment_id: Optional[str] = Query(None, description="Used in any step"),
    max_prep_time: Optional[int] = Query(None, ge=0, description="Minutes"),
    restaurant_id: Optional[str] = Query(None),
    pagination: Pagination = Depends(get_pagination),
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> List[RecipeResponse]:
    filters = RecipeFilter(
        name=name,
        ingredient_id=ingredient_id,
        equipment_id=equipment_id,
        max_prep_time=max_prep_time,
        restaurant_id=restaurant_id,
    )
    recipes = await services.recipes.find_all(actor, filters, pagination)
    return [RecipeResponse.model_validate(r) for r in recipes]


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(
    recipe_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> RecipeResponse:
    return RecipeResponse.model_validate(await services.recipes.get(actor, recipe_id))


@router.patch("/{recipe_id}", response_model=RecipeResponse)
async def update_recipe(
    recipe_id: str,
    payload: RecipeUpdate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> RecipeResponse:
    recipe = await services.recipes.update(
        actor, recipe_id, payload.model_dump(exclude_unset=True)
    )
    return RecipeResponse.model_validate(recipe)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_recipe(
    recipe_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> Response:
    await services.recipes.delete(actor, recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
