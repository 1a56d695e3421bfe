"""
Advisor endpoints for API v1.

Users verify an advisor by name and/or SEBI registration number and
browse the dashboard listings (recently listed and top‑rated
advisors).  Creating advisors requires the administrator token.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from investor_shield_api.app.core.security import get_current_user, require_admin
from investor_shield_api.app.core.store import RecordStore, get_store
from investor_shield_api.app.schemas.advisor import (
    AdvisorCreate,
    AdvisorList,
    AdvisorRead,
    RatedAdvisorList,
    VerifyAdvisorRequest,
    VerifyAdvisorResponse,
)
from investor_shield_api.app.services.advisor_service import AdvisorService
from investor_shield_api.app.services.aggregation_service import AggregationService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/verify-advisor",
    response_model=VerifyAdvisorResponse,
    summary="Verify an advisor",
)
async def verify_advisor(
    data: VerifyAdvisorRequest,
    current_user: dict = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
) -> VerifyAdvisorResponse:
    """Look up an advisor in the registry.

    A registration number, when given, is matched exactly before the
    name is tried.  An unknown advisor is reported with ``found: false``
    rather than an error status.
    """
    try:
        return await AdvisorService.verify_advisor(store, data)
    except Exception:
        logger.exception("Failed to verify advisor %r", data.name)
        raise HTTPException(status_code=500, detail="Failed to verify advisor")


@router.get("/recent-advisors", response_model=AdvisorList, summary="List recent advisors")
async def recent_advisors(
    limit: int = Query(3, ge=1, le=100),
    current_user: dict = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
) -> AdvisorList:
    try:
        return AdvisorList(advisors=await AdvisorService.recent_advisors(store, limit))
    except Exception:
        logger.exception("Failed to list recent advisors")
        raise HTTPException(status_code=500, detail="Failed to fetch advisors")


@router.get(
    "/top-rated-advisors",
    response_model=RatedAdvisorList,
    summary="List top rated advisors",
)
async def top_rated_advisors(
    limit: int = Query(3, ge=1, le=100),
    current_user: dict = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
) -> RatedAdvisorList:
    """Advisors with at least one review, best average rating first."""
    try:
        return RatedAdvisorList(advisors=await AggregationService.top_rated_advisors(store, limit))
    except Exception:
        logger.exception("Failed to rank advisors")
        raise HTTPException(status_code=500, detail="Failed to fetch top rated advisors")


@router.post(
    "/advisors",
    response_model=AdvisorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create an advisor",
)
async def create_advisor(
    data: AdvisorCreate,
    current_user: dict = Depends(require_admin),
    store: RecordStore = Depends(get_store),
) -> AdvisorRead:
    """Add an advisor to the registry (administrator token only)."""
    try:
        return await AdvisorService.create_advisor(store, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/advisors/{advisor_id}", response_model=AdvisorRead, summary="Get an advisor")
async def get_advisor(
    advisor_id: str,
    current_user: dict = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
) -> AdvisorRead:
    try:
        return await AdvisorService.get_advisor(store, advisor_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
