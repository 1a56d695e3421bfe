"""
Trading app endpoints for API v1.

``/check-app`` reports whether an app or website is a legitimate
broker.  Apps missing from the registry are recorded as suspicious the
first time they are checked.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from investor_shield_api.app.core.security import get_current_user
from investor_shield_api.app.core.store import RecordStore, get_store
from investor_shield_api.app.schemas.trading_app import (
    CheckAppRequest,
    CheckAppResponse,
    TradingAppList,
    TradingAppRead,
)
from investor_shield_api.app.services.app_service import AppCheckService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/check-app", response_model=CheckAppResponse, summary="Check an app")
async def check_app(
    data: CheckAppRequest,
    current_user: dict = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
) -> CheckAppResponse:
    try:
        return await AppCheckService.check_app(store, data)
    except Exception:
        logger.exception("Failed to check app %r", data.app_name)
        raise HTTPException(status_code=500, detail="Failed to check app")


@router.get("/legitimate-apps", response_model=TradingAppList, summary="List legitimate apps")
async def legitimate_apps(
    current_user: dict = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
) -> TradingAppList:
    try:
        return TradingAppList(apps=await AppCheckService.legitimate_apps(store))
    except Exception:
        logger.exception("Failed to list legitimate apps")
        raise HTTPException(status_code=500, detail="Failed to fetch legitimate apps")


@router.get("/apps/{app_id}", response_model=TradingAppRead, summary="Get an app")
async def get_app(
    app_id: str,
    current_user: dict = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
) -> TradingAppRead:
    try:
        return await AppCheckService.get_app(store, app_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
