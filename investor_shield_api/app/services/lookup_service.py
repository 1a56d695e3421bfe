"""
Advisor and app lookup.

Name matching is a case‑insensitive substring test.  When several
records match, the first one in store insertion order wins; seeded
records therefore take precedence over later additions.

App lookup writes on read: an app name that matches nothing is
recorded as a new suspicious app, so every later query for the same
name returns that same record.
"""

import logging
from typing import Optional

from ..core.store import RecordStore
from ..models import Advisor, TradingApp


logger = logging.getLogger(__name__)

UNKNOWN_APP_RISK_FACTORS = (
    "App not found in verified database",
    "Unknown developer",
    "No regulatory registration found",
)
UNKNOWN_APP_RECOMMENDATION = (
    "⚠️ This app is not in our verified database. "
    "Exercise extreme caution and verify legitimacy before use."
)


def _contains(haystack: Optional[str], needle: str) -> bool:
    return haystack is not None and needle.lower() in haystack.lower()


class LookupService:
    """Resolve advisors and trading apps from user supplied names."""

    @classmethod
    async def find_advisor(
        cls,
        store: RecordStore,
        name: str,
        reg_number: Optional[str] = None,
    ) -> Optional[Advisor]:
        """Find an advisor by registration number, falling back to name.

        An exact registration number match takes precedence; the name is
        only consulted when no number was given or the number matched
        nothing.  Returns ``None`` when neither matches.
        """
        if reg_number:
            advisor = store.advisors.find(lambda a: a.reg_number == reg_number)
            if advisor is not None:
                return advisor
        return store.advisors.find(lambda a: _contains(a.name, name))

    @classmethod
    async def match_app(cls, store: RecordStore, app_name: str) -> Optional[TradingApp]:
        """Return the first app whose name contains ``app_name``, if any."""
        return store.apps.find(lambda a: _contains(a.app_name, app_name))

    @classmethod
    async def find_app(
        cls,
        store: RecordStore,
        app_name: str,
        url: Optional[str] = None,
    ) -> TradingApp:
        """Resolve an app by name, recording unknown names as suspicious.

        The synthesized record keeps the queried name and URL, is marked
        not legitimate and carries the fixed unknown‑app risk factors
        and recommendation.
        """
        app = await cls.match_app(store, app_name)
        if app is not None:
            return app
        app = store.apps.insert(
            app_name=app_name,
            url=url,
            developer="Unknown",
            is_legit=False,
            risk_factors=UNKNOWN_APP_RISK_FACTORS,
            recommendation=UNKNOWN_APP_RECOMMENDATION,
        )
        logger.info("Recorded unknown app %r as suspicious (%s)", app_name, app.id)
        return app
