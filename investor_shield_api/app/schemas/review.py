"""
Pydantic schemas for advisor reviews.

Reviews are submitted by authenticated users and are append‑only.
The submitting user is taken from the bearer token, never from the
payload.
"""

from datetime import datetime
from typing import List

from pydantic import Field, field_validator

from .base import APIModel


class ReviewCreate(APIModel):
    """Schema for submitting a review."""

    advisor_id: str = Field(..., min_length=1, description="Identifier of the advisor being reviewed")
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: str = Field(..., description="Description of the experience with the advisor")

    @field_validator("comment")
    @classmethod
    def sanitize_comment(cls, v: str) -> str:
        """Trim whitespace from the comment and enforce its length."""
        v = v.strip()
        if not v:
            raise ValueError("Comment must not be blank")
        if len(v) > 1000:
            raise ValueError("Comment must be 1000 characters or fewer")
        return v


class ReviewRead(APIModel):
    id: str
    advisor_id: str
    user_id: str
    rating: int
    comment: str
    timestamp: datetime
    is_verified: bool


class ReviewWithNames(ReviewRead):
    """Review decorated with display names for the advisor and author."""

    advisor_name: str
    user_name: str


class ReviewCreated(APIModel):
    review: ReviewRead
    message: str = "Review added successfully"


class ReviewList(APIModel):
    reviews: List[ReviewRead]


class RecentReviewList(APIModel):
    reviews: List[ReviewWithNames]
