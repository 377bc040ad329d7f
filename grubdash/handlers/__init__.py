"""
Resource handlers.

    - dishes: list, create, read, update
    - orders: list, create, read, update, delete
"""

from grubdash.handlers import dishes, orders

__all__ = ["dishes", "orders"]
