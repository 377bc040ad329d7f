"""
Dish Handler

Validators, lookup and terminal operations for the ``/dishes`` resource,
assembled into one pipeline per operation at the bottom of the module.

Dishes have no delete operation.
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
from grubdash.models import Dish
from grubdash.pipeline import Pipeline, RequestContext

logger = logging.getLogger(__name__)

DISH_FIELDS = ("name", "description", "price", "image_url")


# =============================================================================
# VALIDATORS
# =============================================================================

body_has_name = require_string("name", "Dish must include a name.")

body_has_description = require_string("description", "Dish must include a description.")


def body_has_price(context: RequestContext) -> None:
    if not is_positive_integer(context.data.get("price")):
        raise ValidationError(
            "Dish must include a price and it must be an integer greater than 0."
        )


body_has_image_url = require_string("image_url", "Dish must include a image_url")

dish_exists = entity_exists("dishId", "Dish does not exist: {id}.")

body_id_matches = body_id_matches_route_id("Dish")


# =============================================================================
# TERMINAL OPERATIONS
# =============================================================================

def create(context: RequestContext) -> Dish:
    """Create a dish from the change-set. A client-supplied id is ignored."""
    payload = {name: context.data[name] for name in DISH_FIELDS}
    dish = build_record(Dish, {**payload, "id": context.new_id()})
    context.store.append(dish)
    logger.info(f"Dish {dish.id} created: {dish.name}")
    return dish


def read(context: RequestContext) -> Dish:
    return context.entity


def update(context: RequestContext) -> Dish:
    """Overwrite every changed property of the resolved dish, keeping its id."""
    dish: Dish = context.entity
    changes = {
        name: context.data.get(name)
        for name in DISH_FIELDS
        if getattr(dish, name) != context.data.get(name)
    }
    updated = build_record(Dish, {**dish.model_dump(), **changes, "id": dish.id})
    context.store.replace(dish.id, updated)
    if changes:
        logger.info(f"Dish {dish.id} updated: {sorted(changes)}")
    return updated


def list_dishes(context: RequestContext) -> List[Dish]:
    return context.store.list()


# =============================================================================
# PIPELINES
# =============================================================================

create_pipeline = Pipeline(
    "dishes.create",
    body_has_name,
    body_has_description,
    body_has_price,
    body_has_image_url,
    create,
)

read_pipeline = Pipeline("dishes.read", dish_exists, read)

update_pipeline = Pipeline(
    "dishes.update",
    dish_exists,
    body_has_name,
    body_has_description,
    body_has_price,
    body_has_image_url,
    body_id_matches,
    update,
)

list_pipeline = Pipeline("dishes.list", list_dishes)
