"""
Healthy Breakfast Backend — Menu Route
======================================

What:  Handles GET /api/menu.
How:   Delegates to MenuService and returns the items as a JSON array.
Who:   Called by the frontend menu page.
"""

from typing import List

from fastapi import APIRouter

from breakfast_backend.schemas.menu import ErrorResponse, MenuItem
from breakfast_backend.services.menu_service import menu_service

router = APIRouter(prefix="/api", tags=["Menu"])


@router.get(
    "/menu",
    response_model=List[MenuItem],
    responses={
        200: {"description": "Every dish on the menu"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List the breakfast menu",
    description="Returns every dish on the menu in id order.",
)
async def list_menu() -> List[MenuItem]:
    return menu_service.list_items()
