from grubdash.api import dishes, health, orders

__all__ = ["dishes", "health", "orders"]
