"""
Shared validation helpers used by the dish and order handlers.
"""

from typing import Any, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from grubdash.errors import NotFoundError, ValidationError
from grubdash.pipeline import RequestContext, Step

M = TypeVar("M", bound=BaseModel)


def is_present(value: Any) -> bool:
    return bool(value)


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def is_positive_integer(value: Any) -> bool:
    # bool is a subclass of int; True is not a quantity
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def require_string(field_name: str, message: str) -> Step:
    """Build a step that rejects the change-set unless ``field_name`` is a non-empty string."""

    def check(context: RequestContext) -> None:
        if not is_non_empty_string(context.data.get(field_name)):
            raise ValidationError(message)

    check.__name__ = f"body_has_{field_name}"
    return check


def entity_exists(param: str, not_found: str) -> Step:
    """
    Build the existence lookup for a resource.

    Args:
        param: Route parameter holding the identifier (e.g., "dishId")
        not_found: Message template, formatted with ``id``

    The step stores the record on ``context.entity`` and the identifier on
    ``context.entity_id``; it must run before any step that reads them.
    """

    def check(context: RequestContext) -> None:
        entity_id = context.params.get(param)
        found = context.store.get(entity_id) if entity_id is not None else None
        if found is None:
            raise NotFoundError(not_found.format(id=entity_id))
        context.entity = found
        context.entity_id = entity_id

    check.__name__ = f"{param[:-2]}_exists"
    return check


def body_id_matches_route_id(label: str) -> Step:
    """
    Build the update cross-check between ``data.id`` and the route id.

    An absent (or empty) body id is accepted and the route id is used.
    """

    def check(context: RequestContext) -> None:
        body_id = context.data.get("id")
        if body_id and body_id != context.entity_id:
            raise ValidationError(
                f"{label} id does not match route id. "
                f"{label}: {body_id}, Route: {context.entity_id}"
            )

    check.__name__ = "body_id_matches_route_id"
    return check


def build_record(model: Type[M], payload: dict) -> M:
    """
    Validate ``payload`` into ``model``.

    Field checks run first, so this normally succeeds; any remaining
    schema violation is reported as a 400 rather than a server error.
    """
    try:
        return model.model_validate(payload)
    except SchemaError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ValidationError(f"Invalid {model.__name__.lower()} field {location}: {first['msg']}")
