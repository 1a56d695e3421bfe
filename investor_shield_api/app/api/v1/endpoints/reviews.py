"""
API endpoints for advisor reviews.

Authenticated users submit reviews of advisors and read the reviews
of a given advisor or the most recent reviews overall.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from investor_shield_api.app.core.security import get_current_user
from investor_shield_api.app.core.store import RecordStore, get_store
from investor_shield_api.app.schemas.review import (
    RecentReviewList,
    ReviewCreate,
    ReviewCreated,
    ReviewList,
    ReviewRead,
)
from investor_shield_api.app.services.aggregation_service import AggregationService
from investor_shield_api.app.services.review_service import ReviewService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/add-review",
    response_model=ReviewCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a review",
)
async def add_review(
    data: ReviewCreate,
    current_user: dict = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
) -> ReviewCreated:
    """Submit a review of an advisor as the current user.

    New reviews are stored unverified.
    """
    try:
        review = await ReviewService.create_review(store, data, current_user)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ReviewCreated(review=review)


@router.get("/reviews/{advisor_id}", response_model=ReviewList, summary="List an advisor's reviews")
async def reviews_by_advisor(
    advisor_id: str,
    current_user: dict = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
) -> ReviewList:
    try:
        return ReviewList(reviews=await ReviewService.reviews_by_advisor(store, advisor_id))
    except Exception:
        logger.exception("Failed to list reviews for advisor %s", advisor_id)
        raise HTTPException(status_code=500, detail="Failed to fetch reviews")


@router.get("/recent-reviews", response_model=RecentReviewList, summary="List recent reviews")
async def recent_reviews(
    limit: int = Query(10, ge=1, le=100),
    current_user: dict = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
) -> RecentReviewList:
    """Newest reviews first, with advisor and author display names."""
    try:
        return RecentReviewList(reviews=await AggregationService.recent_reviews(store, limit))
    except Exception:
        logger.exception("Failed to list recent reviews")
        raise HTTPException(status_code=500, detail="Failed to fetch reviews")


@router.get("/reviews/{review_id}/detail", response_model=ReviewRead, summary="Get a single review")
async def get_review(
    review_id: str,
    current_user: dict = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
) -> ReviewRead:
    try:
        return await ReviewService.get_review(store, review_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
