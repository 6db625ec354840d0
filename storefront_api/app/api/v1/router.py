"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers of the storefront and the
event content planner.  Routers whose paths span several resources
(team, social, content, calendar) define full paths internally and are
included without a prefix.
"""

from fastapi import APIRouter

from .endpoints import (
    ai,
    calendar,
    cart,
    categories,
    chat,
    content,
    events,
    health,
    products,
    social,
    team,
    users,
)

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(cart.router, prefix="/cart", tags=["cart"])
router.include_router(chat.router, prefix="/chat", tags=["chat"])
router.include_router(events.router, prefix="/events", tags=["events"])
# The following routers define their own paths, e.g. ``/events/{id}/team``.
router.include_router(team.router, tags=["team"])
router.include_router(social.router, tags=["social"])
router.include_router(content.router, tags=["content"])
router.include_router(calendar.router, tags=["calendar"])
router.include_router(ai.router, prefix="/ai", tags=["ai"])
router.include_router(health.router, tags=["health"])
