"""
Store Factory

Provides a single entry point for obtaining the dish and order stores.
Each factory is cached, so every request in the process shares the same
collection; routes receive them through FastAPI dependencies and tests
override those dependencies with fresh stores.

Usage:
    from grubdash.services.store import get_dish_store

    dishes = get_dish_store()
    dishes.append(dish)
"""

import logging
from functools import lru_cache

from grubdash.models import Dish, Order
from grubdash.services.store.base import BaseStore
from grubdash.services.store.memory import InMemoryStore

logger = logging.getLogger(__name__)


@lru_cache()
def get_dish_store() -> BaseStore[Dish]:
    """
    Get the process-wide dish store.

    Returns:
        BaseStore[Dish]: Cached in-memory dish collection
    """
    store = InMemoryStore("dishes")
    logger.info(f"Dish Store: Using InMemoryStore ({store.name})")
    return store


@lru_cache()
def get_order_store() -> BaseStore[Order]:
    """
    Get the process-wide order store.

    Returns:
        BaseStore[Order]: Cached in-memory order collection
    """
    store = InMemoryStore("orders")
    logger.info(f"Order Store: Using InMemoryStore ({store.name})")
    return store


def reset_stores() -> None:
    """
    Clear the cached store instances.

    The next call to either factory creates a new, empty store.
    """
    get_dish_store.cache_clear()
    get_order_store.cache_clear()
    logger.debug("Store cache cleared")


__all__ = [
    "get_dish_store",
    "get_order_store",
    "reset_stores",
    "BaseStore",
    "InMemoryStore",
]
