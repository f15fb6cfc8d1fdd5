"""
Healthy Breakfast Backend — Status Routes
=========================================

What:  The two fixed text endpoints: GET / and GET /api.
Why:   GET / doubles as a liveness probe; GET /api is the greeting the
       frontend calls to confirm it can reach the backend.
How:   Each handler returns a constant string as text/plain. Unknown paths
       and other methods fall through to the framework's 404/405.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

ROOT_MESSAGE = "Backend is running"
GREETING_MESSAGE = "Hello from Backend"

router = APIRouter(tags=["Status"])


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Liveness message",
)
async def root() -> str:
    return ROOT_MESSAGE


@router.get(
    "/api",
    response_class=PlainTextResponse,
    summary="Greeting message",
)
async def hello() -> str:
    return GREETING_MESSAGE
