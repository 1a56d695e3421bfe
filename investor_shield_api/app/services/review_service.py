"""
Business logic for advisor reviews.

Reviews are append‑only: they can be submitted and read but never
updated or removed.  The advisor a review refers to is not required to
exist.  Comments are returned exactly as stored.
"""

import logging
from dataclasses import asdict
from typing import List

from ..core.store import RecordStore
from ..schemas.review import ReviewCreate, ReviewRead


logger = logging.getLogger(__name__)


class ReviewService:
    """Service for submitting and listing reviews."""

    @classmethod
    async def create_review(
        cls,
        store: RecordStore,
        data: ReviewCreate,
        current_user: dict,
    ) -> ReviewRead:
        """Store a new, unverified review by the current user."""
        user_id = current_user["user_id"]
        review = store.reviews.insert(
            advisor_id=data.advisor_id,
            user_id=user_id,
            rating=data.rating,
            comment=data.comment,
            is_verified=False,
        )
        if store.advisors.get(data.advisor_id) is None:
            logger.warning("Review %s refers to unknown advisor %s", review.id, data.advisor_id)
        logger.info(
            "User %s submitted review %s for advisor %s", user_id, review.id, data.advisor_id
        )
        return ReviewRead(**asdict(review))

    @classmethod
    async def reviews_by_advisor(cls, store: RecordStore, advisor_id: str) -> List[ReviewRead]:
        """List an advisor's reviews in submission order."""
        return [
            ReviewRead(**asdict(r))
            for r in store.reviews
            if r.advisor_id == advisor_id
        ]

    @classmethod
    async def get_review(cls, store: RecordStore, review_id: str) -> ReviewRead:
        """Retrieve a single review; raises ``ValueError`` if it does not exist."""
        review = store.reviews.get(review_id)
        if review is None:
            raise ValueError(f"Review {review_id} not found")
        return ReviewRead(**asdict(review))
