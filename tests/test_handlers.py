"""Step-level tests for the dish and order handlers."""

import pytest

from grubdash.errors import NotFoundError, ValidationError
from grubdash.handlers import dishes, orders
from grubdash.handlers.common import is_positive_integer
from grubdash.pipeline import RequestContext


@pytest.mark.parametrize("value", [1, 5, 10_000])
def test_positive_integers(value):
    assert is_positive_integer(value)


@pytest.mark.parametrize("value", [0, -1, 2.5, "3", None, True, [1]])
def test_not_positive_integers(value):
    assert not is_positive_integer(value)


# =============================================================================
# DISHES
# =============================================================================

def test_dish_create_steps_are_declared_in_order():
    names = [step.__name__ for step in dishes.create_pipeline.steps]
    assert names == [
        "body_has_name",
        "body_has_description",
        "body_has_price",
        "body_has_image_url",
        "create",
    ]


def test_dish_update_looks_up_before_validating():
    names = [step.__name__ for step in dishes.update_pipeline.steps]
    assert names[0] == "dish_exists"
    assert names[-2:] == ["body_id_matches_route_id", "update"]


def test_dish_validators_report_first_missing_field(dish_store):
    context = RequestContext(store=dish_store, data={"description": "x", "price": 0})
    with pytest.raises(ValidationError, match="Dish must include a name."):
        dishes.create_pipeline.run(context)
    assert len(dish_store) == 0


def test_dish_exists_records_entity(dish_store, stored_dish):
    context = RequestContext(store=dish_store, params={"dishId": stored_dish.id})
    dishes.dish_exists(context)
    assert context.entity is stored_dish
    assert context.entity_id == stored_dish.id


def test_dish_exists_not_found(dish_store):
    context = RequestContext(store=dish_store, params={"dishId": "abc-123"})
    with pytest.raises(NotFoundError, match="Dish does not exist: abc-123."):
        dishes.dish_exists(context)


def test_dish_create_ignores_client_id(dish_store, taco):
    context = RequestContext(
        store=dish_store, data={**taco, "id": "client-id"}, new_id=lambda: "server-id"
    )
    dish = dishes.create_pipeline.run(context)
    assert dish.id == "server-id"
    assert dish_store.get("server-id") is dish


# =============================================================================
# ORDERS
# =============================================================================

def _order_context(order_store, data, order_id=None):
    params = {"orderId": order_id} if order_id else {}
    return RequestContext(store=order_store, data=data, params=params)


def test_quantity_validator_single_index(order_store, order_body):
    data = {**order_body, "dishes": [{"dishId": 1, "quantity": 0}]}
    with pytest.raises(ValidationError) as exc_info:
        orders.body_has_dish_quantities(_order_context(order_store, data))
    assert exc_info.value.message == (
        "Dish 0 must have a quantity that is an integer greater than 0."
    )


def test_quantity_validator_collects_every_index(order_store, order_body):
    data = {
        **order_body,
        "dishes": [
            {"dishId": 1, "quantity": "2"},
            {"dishId": 2, "quantity": 1},
            {"dishId": 3},
            "not-a-line-item",
        ],
    }
    with pytest.raises(ValidationError) as exc_info:
        orders.body_has_dish_quantities(_order_context(order_store, data))
    assert exc_info.value.message == (
        "Dishes 0, 2, 3 must have a quantity that is an integer greater than 0."
    )


@pytest.mark.parametrize("dishes_value", [None, [], "pizza", {"quantity": 1}])
def test_dishes_must_be_non_empty_list(order_store, order_body, dishes_value):
    data = {**order_body, "dishes": dishes_value}
    with pytest.raises(ValidationError, match="Order must include at least one dish."):
        orders.body_has_dishes(_order_context(order_store, data))


def test_status_guard_rejects_any_change_to_delivered_order(order_store, make_order, order_body):
    make_order(status="delivered")
    context = _order_context(order_store, {**order_body, "status": "pending"}, "order-1")
    orders.order_exists(context)
    with pytest.raises(ValidationError, match="A delivered order cannot be changed."):
        orders.body_has_status(context)


@pytest.mark.parametrize("status", [None, "", "invalid", "pendingg", 3])
def test_status_guard_requires_legal_status(order_store, make_order, order_body, status):
    make_order()
    context = _order_context(order_store, {**order_body, "status": status}, "order-1")
    orders.order_exists(context)
    with pytest.raises(ValidationError, match="Order must have a status of pending"):
        orders.body_has_status(context)


def test_status_guard_rejects_delivered_request(order_store, make_order, order_body):
    make_order(status="out-for-delivery")
    context = _order_context(order_store, {**order_body, "status": "delivered"}, "order-1")
    orders.order_exists(context)
    with pytest.raises(ValidationError, match="A delivered order cannot be changed."):
        orders.body_has_status(context)


@pytest.mark.parametrize("status", ["preparing", "out-for-delivery", "delivered"])
def test_delete_guard_requires_pending(order_store, make_order, status):
    make_order(status=status)
    context = _order_context(order_store, {}, "order-1")
    with pytest.raises(ValidationError, match="An order cannot be deleted unless it is pending."):
        orders.delete_pipeline.run(context)
    assert order_store.get("order-1") is not None


def test_delete_removes_pending_order(order_store, make_order):
    make_order()
    orders.delete_pipeline.run(_order_context(order_store, {}, "order-1"))
    assert order_store.list() == []


def test_order_update_keeps_id_and_line_item_fields(order_store, make_order):
    make_order(status="preparing")
    data = {
        "id": "order-1",
        "deliverTo": "New address",
        "mobileNumber": "555",
        "status": "out-for-delivery",
        "dishes": [{"id": "dish-9", "name": "Soup", "price": 4, "quantity": 3}],
    }
    updated = orders.update_pipeline.run(_order_context(order_store, data, "order-1"))

    assert updated.id == "order-1"
    assert updated.deliver_to == "New address"
    assert updated.status.value == "out-for-delivery"
    assert updated.model_dump(by_alias=True)["dishes"] == [
        {"id": "dish-9", "name": "Soup", "price": 4, "quantity": 3}
    ]
    assert order_store.get("order-1") is updated
