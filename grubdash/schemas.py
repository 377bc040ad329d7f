"""
Pydantic Schemas for Request/Response Validation

Every request body and every successful response share one envelope:
``{"data": ...}``. The request envelope is checked structurally here;
field-level business rules run afterwards in the handler pipelines.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from grubdash.models import Dish, Order


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class RequestEnvelope(BaseModel):
    """Request body wrapper. ``data`` is the change-set."""
    data: Dict[str, Any] = Field(default_factory=dict)


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class DishResponse(BaseModel):
    data: Dish


class DishListResponse(BaseModel):
    data: List[Dish]


class OrderResponse(BaseModel):
    data: Order


class OrderListResponse(BaseModel):
    data: List[Order]


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    environment: str
    dishes: int
    orders: int
    timestamp: datetime
