"""
Top-level router for the API.

The card and list routers are protected by ``BearerTokenMiddleware``,
which runs before routing; the root greeting is public.  When new
resources are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import cards, lists, root

router = APIRouter()

router.include_router(root.router, tags=["root"])
router.include_router(cards.router, prefix="/card", tags=["cards"])
router.include_router(lists.router, prefix="/list", tags=["lists"])
