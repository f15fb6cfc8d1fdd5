"""
Healthy Breakfast Backend — Pydantic Response Schemas
=====================================================

What:  Pydantic models defining the API contract for the menu and errors.
How:   FastAPI serializes responses through these models and generates the
       OpenAPI documentation from them.
"""

from typing import Optional

from pydantic import BaseModel, Field


class MenuItem(BaseModel):
    """
    What:  One breakfast dish on the menu.
    Who:   Returned as array items by GET /api/menu.

    Frozen so the shared menu table cannot be edited through a returned item.
    """
    id: int = Field(description="Menu item identifier")
    name: str = Field(description="Dish name")
    price: int = Field(ge=0, description="Price in whole currency units")

    model_config = {"frozen": True}


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for application errors.

    Example:
        {
            "error": "kitchen_closed",
            "message": "Kitchen is closed",
            "details": {"shift": "night"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
