"""
Rating aggregation over stored reviews.

All figures are computed on demand by scanning the review collection;
nothing is cached.  Averages are plain arithmetic means with no
weighting.
"""

from dataclasses import asdict
from typing import List, NamedTuple

from ..core.store import RecordStore
from ..schemas.advisor import RatedAdvisorRead
from ..schemas.review import ReviewWithNames


UNKNOWN_ADVISOR_NAME = "Unknown Advisor"
ANONYMOUS_USER_NAME = "Anonymous"


class RatingSummary(NamedTuple):
    count: int
    mean: float


class AggregationService:
    """Rating summaries, rankings and decorated review listings."""

    @classmethod
    async def average_rating(cls, store: RecordStore, advisor_id: str) -> RatingSummary:
        """Return the number of reviews and mean rating for an advisor.

        An advisor without reviews (or an unknown id) yields ``(0, 0.0)``.
        """
        ratings = [r.rating for r in store.reviews if r.advisor_id == advisor_id]
        if not ratings:
            return RatingSummary(0, 0.0)
        return RatingSummary(len(ratings), sum(ratings) / len(ratings))

    @classmethod
    async def top_rated_advisors(cls, store: RecordStore, limit: int) -> List[RatedAdvisorRead]:
        """Rank reviewed advisors by mean rating, highest first.

        Advisors without reviews are excluded.  Equal means keep the
        advisors' insertion order.  At most ``limit`` entries are
        returned.
        """
        rated: List[RatedAdvisorRead] = []
        for advisor in store.advisors:
            summary = await cls.average_rating(store, advisor.id)
            if summary.count == 0:
                continue
            rated.append(
                RatedAdvisorRead(
                    **asdict(advisor),
                    avg_rating=summary.mean,
                    review_count=summary.count,
                )
            )
        rated.sort(key=lambda a: a.avg_rating, reverse=True)
        return rated[:max(limit, 0)]

    @classmethod
    async def recent_reviews(cls, store: RecordStore, limit: int) -> List[ReviewWithNames]:
        """Return the newest reviews decorated with advisor and user names.

        Reviews sharing a timestamp are ordered by insertion, most
        recently inserted first.  Dangling references are shown as
        "Unknown Advisor" and "Anonymous".
        """
        ordered = sorted(
            enumerate(store.reviews),
            key=lambda pair: (pair[1].timestamp, pair[0]),
            reverse=True,
        )
        results: List[ReviewWithNames] = []
        for _, review in ordered[:max(limit, 0)]:
            advisor = store.advisors.get(review.advisor_id)
            user = store.users.get(review.user_id)
            results.append(
                ReviewWithNames(
                    **asdict(review),
                    advisor_name=advisor.name if advisor else UNKNOWN_ADVISOR_NAME,
                    user_name=user.name if user else ANONYMOUS_USER_NAME,
                )
            )
        return results
