"""
Identifier Supplier

New dishes and orders get a server-assigned id: 16 random bytes as
32 hex characters.
"""

import uuid
from typing import Callable

IdSupplier = Callable[[], str]


def new_id() -> str:
    """Generate a fresh unique identifier."""
    return uuid.uuid4().hex


def get_id_supplier() -> IdSupplier:
    """FastAPI dependency returning the identifier supplier."""
    return new_id
