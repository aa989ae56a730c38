"""
Root endpoint.

``GET /`` answers with a plain text greeting and is the only route
that does not require the bearer token, which makes it usable as a
health check.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def read_root() -> str:
    return "Hello, world!"
