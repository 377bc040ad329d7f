"""
Resource Records

Pydantic models for the two resources held in memory:
- Dish: an item on the menu
- Order: a delivery order made of dish line items

Wire names stay camelCase (``deliverTo``, ``mobileNumber``) through field
aliases; Python code uses snake_case attributes.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    """Order status workflow."""
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]


class Dish(BaseModel):
    """A dish on the menu. Dishes are never deleted."""

    id: str
    name: str = Field(..., min_length=1, examples=["Dolcelatte and chickpea spaghetti"])
    description: str = Field(..., min_length=1)
    price: int = Field(..., gt=0, examples=[19])
    image_url: str = Field(..., min_length=1)

    def __repr__(self):
        return f"<Dish {self.id} - {self.name}>"


class OrderLine(BaseModel):
    """
    A single dish in an order.

    Only ``quantity`` is checked. The dish reference (``dishId``, or a dish
    snapshot with ``id``/``name``/``price``) is kept exactly as submitted.
    """

    model_config = ConfigDict(extra="allow")

    quantity: int = Field(..., gt=0, examples=[2])


class Order(BaseModel):
    """A delivery order. Deleted only while pending, frozen once delivered."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    deliver_to: str = Field(..., alias="deliverTo", min_length=1)
    mobile_number: str = Field(..., alias="mobileNumber", min_length=1)
    status: OrderStatus = OrderStatus.PENDING
    dishes: List[OrderLine] = Field(..., min_length=1)

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING

    @property
    def is_delivered(self) -> bool:
        return self.status == OrderStatus.DELIVERED

    def __repr__(self):
        return f"<Order {self.id} - {self.deliver_to} - {self.status.value}>"
