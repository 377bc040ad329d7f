"""
Health and root endpoints.
"""

from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends

from grubdash.core.config import get_settings
from grubdash.schemas import HealthResponse
from grubdash.services.store import BaseStore, get_dish_store, get_order_store

router = APIRouter()


@router.get("/", tags=["Root"])
async def root() -> dict[str, Any]:
    """API root with navigation links."""
    settings = get_settings()
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "environment": settings.env_mode.value,
        "documentation": "/docs",
        "dishes": "/dishes",
        "orders": "/orders",
        "health": "/health",
    }


@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="System Health Check",
)
async def health_check(
    dish_store: BaseStore = Depends(get_dish_store),
    order_store: BaseStore = Depends(get_order_store),
) -> HealthResponse:
    """Report service status and collection sizes."""
    return HealthResponse(
        status="operational",
        environment=get_settings().env_mode.value,
        dishes=len(dish_store),
        orders=len(order_store),
        timestamp=datetime.now(),
    )
