"""
Top‑level router for version 1 of the API.

Aggregates the domain routers.  Advisor, app and review routes keep
the flat paths used by the web client (``/verify-advisor``,
``/check-app``, ``/add-review``...), so only the auth router gets a
prefix.
"""

from fastapi import APIRouter

from .endpoints import advisors, apps, auth, reviews


router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(advisors.router, tags=["advisors"])
router.include_router(apps.router, tags=["apps"])
router.include_router(reviews.router, tags=["reviews"])
