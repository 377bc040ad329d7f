"""
Sample Menu and Orders

Loaded into the stores on startup when ``SEED_DATA`` is enabled, so a
freshly started development server has something to list.
"""

import logging

from grubdash.models import Dish, Order
from grubdash.services.store.base import BaseStore

logger = logging.getLogger(__name__)

SAMPLE_DISHES = [
    {
        "id": "d351db2b49b69679504652ea1cf38241",
        "name": "Dolcelatte and chickpea spaghetti",
        "description": "Spaghetti topped with a blend of dolcelatte and fresh chickpeas",
        "price": 19,
        "image_url": "https://images.pexels.com/photos/1279330/pexels-photo-1279330.jpeg?h=530&w=350",
    },
    {
        "id": "3c637d011d844ebab1205fef8a7e36ea",
        "name": "Broccoli and beetroot stir fry",
        "description": "Crunchy stir fry featuring fresh broccoli and beetroot",
        "price": 15,
        "image_url": "https://images.pexels.com/photos/4144234/pexels-photo-4144234.jpeg?h=530&w=350",
    },
    {
        "id": "90c3d873684bf381dfab29034b5bba73",
        "name": "Falafel and tahini bagel",
        "description": "A warm bagel filled with falafel and tahini",
        "price": 6,
        "image_url": "https://images.pexels.com/photos/4560606/pexels-photo-4560606.jpeg?h=530&w=350",
    },
]

SAMPLE_ORDERS = [
    {
        "id": "f6069a542257054114138301947672ba",
        "deliverTo": "1600 Pennsylvania Avenue NW, Washington, DC 20500",
        "mobileNumber": "(202) 456-1111",
        "status": "out-for-delivery",
        "dishes": [
            {"dishId": "90c3d873684bf381dfab29034b5bba73", "quantity": 1},
        ],
    },
    {
        "id": "5a887d326e83d3c5bdcbee398ea32aff",
        "deliverTo": "308 Negra Arroyo Lane, Albuquerque, NM",
        "mobileNumber": "(505) 143-3369",
        "status": "pending",
        "dishes": [
            {"dishId": "d351db2b49b69679504652ea1cf38241", "quantity": 2},
            {"dishId": "3c637d011d844ebab1205fef8a7e36ea", "quantity": 1},
        ],
    },
]


def load_seed_data(dish_store: BaseStore[Dish], order_store: BaseStore[Order]) -> None:
    """Append the sample records to empty stores. Non-empty stores are left alone."""
    if len(dish_store) == 0:
        dish_store.extend(Dish.model_validate(d) for d in SAMPLE_DISHES)
    if len(order_store) == 0:
        order_store.extend(Order.model_validate(o) for o in SAMPLE_ORDERS)
    logger.info(f"Seed data loaded: {len(dish_store)} dishes, {len(order_store)} orders")
