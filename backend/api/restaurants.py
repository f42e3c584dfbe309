"""REST endpoints for restaurants and their member lists."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from api.dependencies import ServiceContainer, get_current_actor, get_pagination, get_services
from api.schemas import ApiModel
from domain.restaurant.filters import RestaurantFilter
from domain.shared.pagination import Pagination
from domain.user.actor import Actor
from domain.user.entity import Role

router = APIRouter(prefix="/api/v1/restaurants", tags=["restaurants"])


class RestaurantCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None


class RestaurantUpdate(BaseModel):
    # Accepted only when equal to the path id
    restaurant_id: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None


class RestaurantResponse(ApiModel):
    restaurant_id: str
    name: str
    created_by: str
    associated_users: List[str]
    description: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None


class MemberRequest(BaseModel):
    user_id: str = Field(..., min_length=1)


class UserResponse(ApiModel):
    user_id: str
    role: Role
    associated_restaurants: List[str]


@router.post("", response_model=RestaurantResponse, status_code=status.HTTP_201_CREATED)
async def create_restaurant(
    payload: RestaurantCreate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> RestaurantResponse:
    restaurant = await services.restaurants.create(actor, payload.model_dump())
    return RestaurantResponse.model_validate(restaurant)


@router.get("", response_model=List[RestaurantResponse])
async def list_restaurants(
    name: Optional[str] = Query(None, description="Case-insensitive name substring"),
    pagination: Pagination = Depends(get_pagination),
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> List[RestaurantResponse]:
    restaurants = await services.restaurants.find_all(
        actor, RestaurantFilter(name=name), pagination
    )
    return [RestaurantResponse.model_validate(r) for r in restaurants]


@router.get("/{restaurant_id}", response_model=RestaurantResponse)
async def get_restaurant(
    restaurant_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> RestaurantResponse:
    restaurant = await services.restaurants.get(actor, restaurant_id)
    return RestaurantResponse.model_validate(restaurant)


@router.patch("/{restaurant_id}", response_model=RestaurantResponse)
async def update_restaurant(
    restaurant_id: str,
    payload: RestaurantUpdate,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> RestaurantResponse:
    restaurant = await services.restaurants.update(
        actor, restaurant_id, payload.model_dump(exclude_unset=True)
    )
    return RestaurantResponse.model_validate(restaurant)


@router.delete(
    "/{restaurant_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def delete_restaurant(
    restaurant_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> Response:
    await services.restaurants.delete(actor, restaurant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{restaurant_id}/users", response_model=List[UserResponse])
async def list_restaurant_users(
    restaurant_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> List[UserResponse]:
    users = await services.restaurants.list_users(actor, restaurant_id)
    return [UserResponse.model_validate(u) for u in users]


@router.post("/{restaurant_id}/users", response_model=RestaurantResponse)
async def add_restaurant_user(
    restaurant_id: str,
    payload: MemberRequest,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> RestaurantResponse:
    restaurant = await services.restaurants.add_user(actor, restaurant_id, payload.user_id)
    return RestaurantResponse.model_validate(restaurant)


@router.delete("/{restaurant_id}/users/{user_id}", response_model=RestaurantResponse)
async def remove_restaurant_user(
    restaurant_id: str,
    user_id: str,
    actor: Actor = Depends(get_current_actor),
    services: ServiceContainer = Depends(get_services),
) -> RestaurantResponse:
    restaurant = await services.restaurants.remove_user(actor, restaurant_id, user_id)
    return RestaurantResponse.model_validate(restaurant)
