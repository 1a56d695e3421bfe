"""
Business logic for trading app legitimacy checks.
"""

from dataclasses import asdict
from typing import List, Optional

from ..core.store import RecordStore
from ..models import TradingApp
from ..schemas.trading_app import CheckAppRequest, CheckAppResponse, TradingAppRead
from .lookup_service import LookupService


def _to_read(app: TradingApp) -> TradingAppRead:
    return TradingAppRead(**asdict(app))


class AppCheckService:
    """Check apps against the registry and list the legitimate ones."""

    @classmethod
    async def check_app(cls, store: RecordStore, data: CheckAppRequest) -> CheckAppResponse:
        """Resolve an app and report its status.

        Unknown apps are recorded as suspicious on first check (see
        ``LookupService.find_app``).
        """
        url: Optional[str] = str(data.url) if data.url is not None else None
        app = await LookupService.find_app(store, data.app_name, url)
        return CheckAppResponse(
            app=_to_read(app),
            status="legitimate" if app.is_legit else "suspicious",
            risk_factors=list(app.risk_factors),
            recommendation=app.recommendation,
        )

    @classmethod
    async def legitimate_apps(cls, store: RecordStore) -> List[TradingAppRead]:
        return [_to_read(a) for a in store.apps.filter(lambda a: a.is_legit)]

    @classmethod
    async def get_app(cls, store: RecordStore, app_id: str) -> TradingAppRead:
        app = store.apps.get(app_id)
        if app is None:
            raise ValueError(f"App {app_id} not found")
        return _to_read(app)
