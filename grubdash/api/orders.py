"""
Orders API

    GET    /orders             list every order
    POST   /orders             create an order
    GET    /orders/{orderId}   read one order
    PUT    /orders/{orderId}   update one order
    DELETE /orders/{orderId}   delete a pending order
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from grubdash.handlers import orders
from grubdash.models import Order
from grubdash.pipeline import RequestContext
from grubdash.schemas import ErrorResponse, OrderListResponse, OrderResponse, RequestEnvelope
from grubdash.services.ids import IdSupplier, get_id_supplier
from grubdash.services.store import BaseStore, get_order_store

router = APIRouter(prefix="/orders", tags=["Orders"])


def _data(body: Optional[RequestEnvelope]) -> dict:
    return body.data if body is not None else {}


@router.get("", response_model=OrderListResponse, summary="List Orders")
async def list_orders(
    store: BaseStore[Order] = Depends(get_order_store),
) -> OrderListResponse:
    context = RequestContext(store=store)
    return OrderListResponse(data=orders.list_pipeline.run(context))


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create Order",
)
async def create_order(
    body: Optional[RequestEnvelope] = None,
    store: BaseStore[Order] = Depends(get_order_store),
    new_id: IdSupplier = Depends(get_id_supplier),
) -> OrderResponse:
    """
    Place a new order.

    Every dish line needs a positive integer quantity. Status may be
    omitted and defaults to pending.
    """
    context = RequestContext(store=store, data=_data(body), new_id=new_id)
    return OrderResponse(data=orders.create_pipeline.run(context))


@router.get(
    "/{order_id}",
    response_model=OrderResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Read Order",
)
async def read_order(
    order_id: str,
    store: BaseStore[Order] = Depends(get_order_store),
) -> OrderResponse:
    context = RequestContext(store=store, params={"orderId": order_id})
    return OrderResponse(data=orders.read_pipeline.run(context))


@router.put(
    "/{order_id}",
    response_model=OrderResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update Order",
)
async def update_order(
    order_id: str,
    body: Optional[RequestEnvelope] = None,
    store: BaseStore[Order] = Depends(get_order_store),
) -> OrderResponse:
    """Replace an order's fields. Delivered orders cannot be changed."""
    context = RequestContext(store=store, data=_data(body), params={"orderId": order_id})
    return OrderResponse(data=orders.update_pipeline.run(context))


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete Order",
)
async def delete_order(
    order_id: str,
    store: BaseStore[Order] = Depends(get_order_store),
) -> Response:
    """Delete an order. Only pending orders can be deleted."""
    context = RequestContext(store=store, params={"orderId": order_id})
    orders.delete_pipeline.run(context)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
