"""
                        Services Module

Collaborators the handlers depend on, each obtained through a factory so
it can be replaced in tests or swapped for another implementation.

Services:
    - store: ordered collections of dishes and orders
    - ids: server-side identifier supplier
"""

from grubdash.services.ids import get_id_supplier, new_id
from grubdash.services.store import get_dish_store, get_order_store, reset_stores

__all__ = [
    "get_id_supplier",
    "new_id",
    "get_dish_store",
    "get_order_store",
    "reset_stores",
]
