"""
Order Handler

Validators, status guards and terminal operations for the ``/orders``
resource, assembled into one pipeline per operation at the bottom of the
module.

Status rules:
    - An order can only be deleted while it is pending.
    - A delivered order cannot be changed.
    - Update requires a status of pending, preparing or out-for-delivery.
"""

import logging
from typing import List

from grubdash.errors import ValidationError
from grubdash.handlers.common import (
    body_id_matches_route_id,
    build_record,
    entity_exists,
    is_positive_integer,
    require_string,
)
from grubdash.models import Order, OrderStatus
from grubdash.pipeline import Pipeline, RequestContext

logger = logging.getLogger(__name__)

ORDER_FIELDS = ("deliverTo", "mobileNumber", "status", "dishes")

STATUS_MESSAGE = (
    "Order must have a status of pending, preparing, out-for-delivery, or delivered."
)
DELIVERED_MESSAGE = "A delivered order cannot be changed."
NOT_PENDING_MESSAGE = "An order cannot be deleted unless it is pending."


def _is_legal_status(value) -> bool:
    return isinstance(value, str) and value in OrderStatus.values()


# =============================================================================
# VALIDATORS
# =============================================================================

body_has_deliver_to = require_string(
    "deliverTo", "Order must include a deliverTo property."
)

body_has_mobile_number = require_string(
    "mobileNumber", "Order must include a mobileNumber property."
)


def body_has_dishes(context: RequestContext) -> None:
    dishes = context.data.get("dishes")
    if not isinstance(dishes, list) or not dishes:
        raise ValidationError("Order must include at least one dish.")


def body_has_dish_quantities(context: RequestContext) -> None:
    """
    Check every line item's quantity.

    Unlike the other validators this one reports every offending index
    in a single error, e.g. "Dishes 0, 2 must have ...".
    """
    invalid = [
        index
        for index, dish in enumerate(context.data["dishes"])
        if not isinstance(dish, dict) or not is_positive_integer(dish.get("quantity"))
    ]
    if not invalid:
        return

    if len(invalid) > 1:
        subject = "Dishes " + ", ".join(str(index) for index in invalid)
    else:
        subject = f"Dish {invalid[0]}"
    raise ValidationError(
        f"{subject} must have a quantity that is an integer greater than 0."
    )


def body_has_create_status(context: RequestContext) -> None:
    """A new order may omit its status (it starts pending), but not misspell it."""
    status = context.data.get("status")
    if status and not _is_legal_status(status):
        raise ValidationError(STATUS_MESSAGE)


order_exists = entity_exists(
    "orderId", "No matching order is found for orderId {id}."
)

body_id_matches = body_id_matches_route_id("Order")


def body_has_status(context: RequestContext) -> None:
    """
    Status guard for update.

    The stored order must not already be delivered, and the requested
    status must be a legal value other than delivered.
    """
    order: Order = context.entity
    if order.is_delivered:
        raise ValidationError(DELIVERED_MESSAGE)

    status = context.data.get("status")
    if not _is_legal_status(status):
        raise ValidationError(STATUS_MESSAGE)

    if status == OrderStatus.DELIVERED.value:
        raise ValidationError(DELIVERED_MESSAGE)


def order_is_pending(context: RequestContext) -> None:
    order: Order = context.entity
    if not order.is_pending:
        raise ValidationError(NOT_PENDING_MESSAGE)


# =============================================================================
# TERMINAL OPERATIONS
# =============================================================================

def create(context: RequestContext) -> Order:
    """Create an order from the change-set with a fresh id; status defaults to pending."""
    payload = {name: context.data[name] for name in ORDER_FIELDS if context.data.get(name)}
    payload.setdefault("status", OrderStatus.PENDING.value)
    order = build_record(Order, {**payload, "id": context.new_id()})
    context.store.append(order)
    logger.info(f"Order {order.id} created for {order.deliver_to} ({len(order.dishes)} dishes)")
    return order


def read(context: RequestContext) -> Order:
    return context.entity


def update(context: RequestContext) -> Order:
    """Overwrite every property of the resolved order except its id."""
    order: Order = context.entity
    current = order.model_dump(by_alias=True, mode="json")
    changes = {
        name: context.data[name]
        for name in ORDER_FIELDS
        if name in context.data and current.get(name) != context.data[name]
    }
    updated = build_record(Order, {**current, **changes, "id": order.id})
    context.store.replace(order.id, updated)
    if changes:
        logger.info(f"Order {order.id} updated: {sorted(changes)} (status={updated.status.value})")
    return updated


def destroy(context: RequestContext) -> None:
    context.store.remove(context.entity_id)
    logger.info(f"Order {context.entity_id} deleted")


def list_orders(context: RequestContext) -> List[Order]:
    return context.store.list()


# =============================================================================
# PIPELINES
# =============================================================================

create_pipeline = Pipeline(
    "orders.create",
    body_has_deliver_to,
    body_has_mobile_number,
    body_has_dishes,
    body_has_dish_quantities,
    body_has_create_status,
    create,
)

read_pipeline = Pipeline("orders.read", order_exists, read)

update_pipeline = Pipeline(
    "orders.update",
    order_exists,
    body_has_deliver_to,
    body_has_mobile_number,
    body_has_dishes,
    body_has_dish_quantities,
    body_id_matches,
    body_has_status,
    update,
)

delete_pipeline = Pipeline("orders.delete", order_exists, order_is_pending, destroy)

list_pipeline = Pipeline("orders.list", list_orders)
