"""
Business logic for advisors.

Advisors are created from seed fixtures or by an administrator and are
never modified afterwards.  Verification combines the lookup with the
advisor's rating summary.
"""

import logging
from dataclasses import asdict
from typing import List

from ..core.store import RecordStore
from ..schemas.advisor import (
    AdvisorCreate,
    AdvisorFound,
    AdvisorNotFound,
    AdvisorRead,
    VerifyAdvisorRequest,
    VerifyAdvisorResponse,
)
from .aggregation_service import AggregationService
from .lookup_service import LookupService


logger = logging.getLogger(__name__)


class AdvisorService:
    """Verification, creation and listing of advisors."""

    @classmethod
    async def verify_advisor(cls, store: RecordStore, data: VerifyAdvisorRequest) -> VerifyAdvisorResponse:
        """Look an advisor up and attach their review count and mean rating."""
        advisor = await LookupService.find_advisor(store, data.name, data.reg_number)
        if advisor is None:
            logger.info("No advisor matched name=%r reg_number=%r", data.name, data.reg_number)
            return AdvisorNotFound()
        summary = await AggregationService.average_rating(store, advisor.id)
        return AdvisorFound(
            advisor=AdvisorRead(**asdict(advisor)),
            reviews=summary.count,
            avg_rating=summary.mean,
        )

    @classmethod
    async def create_advisor(cls, store: RecordStore, data: AdvisorCreate) -> AdvisorRead:
        """Add an advisor to the registry.

        Raises ``ValueError`` if another advisor already holds the
        registration number.
        """
        if data.reg_number and store.advisors.find(lambda a: a.reg_number == data.reg_number):
            raise ValueError(f"Registration number {data.reg_number} is already registered")
        advisor = store.advisors.insert(**data.model_dump())
        logger.info("Created advisor %s (%s)", advisor.id, advisor.name)
        return AdvisorRead(**asdict(advisor))

    @classmethod
    async def get_advisor(cls, store: RecordStore, advisor_id: str) -> AdvisorRead:
        advisor = store.advisors.get(advisor_id)
        if advisor is None:
            raise ValueError(f"Advisor {advisor_id} not found")
        return AdvisorRead(**asdict(advisor))

    @classmethod
    async def recent_advisors(cls, store: RecordStore, limit: int) -> List[AdvisorRead]:
        """Return the first ``limit`` advisors in store order."""
        return [AdvisorRead(**asdict(a)) for a in store.advisors.all()[:max(limit, 0)]]
