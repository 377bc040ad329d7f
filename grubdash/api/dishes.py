"""
Dishes API

    GET  /dishes            list every dish
    POST /dishes            create a dish
    GET  /dishes/{dishId}   read one dish
    PUT  /dishes/{dishId}   update one dish

Dishes cannot be deleted; DELETE answers 405.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from grubdash.handlers import dishes
from grubdash.models import Dish
from grubdash.pipeline import RequestContext
from grubdash.schemas import DishListResponse, DishResponse, ErrorResponse, RequestEnvelope
from grubdash.services.ids import IdSupplier, get_id_supplier
from grubdash.services.store import BaseStore, get_dish_store

router = APIRouter(prefix="/dishes", tags=["Dishes"])


def _data(body: Optional[RequestEnvelope]) -> dict:
    return body.data if body is not None else {}


@router.get("", response_model=DishListResponse, summary="List Dishes")
async def list_dishes(
    store: BaseStore[Dish] = Depends(get_dish_store),
) -> DishListResponse:
    context = RequestContext(store=store)
    return DishListResponse(data=dishes.list_pipeline.run(context))


@router.post(
    "",
    response_model=DishResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create Dish",
)
async def create_dish(
    body: Optional[RequestEnvelope] = None,
    store: BaseStore[Dish] = Depends(get_dish_store),
    new_id: IdSupplier = Depends(get_id_supplier),
) -> DishResponse:
    """Create a dish. The id is assigned by the server."""
    context = RequestContext(store=store, data=_data(body), new_id=new_id)
    return DishResponse(data=dishes.create_pipeline.run(context))


@router.get(
    "/{dish_id}",
    response_model=DishResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Read Dish",
)
async def read_dish(
    dish_id: str,
    store: BaseStore[Dish] = Depends(get_dish_store),
) -> DishResponse:
    context = RequestContext(store=store, params={"dishId": dish_id})
    return DishResponse(data=dishes.read_pipeline.run(context))


@router.put(
    "/{dish_id}",
    response_model=DishResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update Dish",
)
async def update_dish(
    dish_id: str,
    body: Optional[RequestEnvelope] = None,
    store: BaseStore[Dish] = Depends(get_dish_store),
) -> DishResponse:
    """Replace every field of a dish. A body id, if given, must match the route."""
    context = RequestContext(store=store, data=_data(body), params={"dishId": dish_id})
    return DishResponse(data=dishes.update_pipeline.run(context))
