"""
Pydantic models for trading app legitimacy checks.
"""

from typing import List, Literal, Optional

from pydantic import Field, HttpUrl, field_validator

from .base import APIModel


class TradingAppRead(APIModel):
    id: str
    app_name: str
    url: Optional[str] = None
    developer: Optional[str] = None
    is_legit: bool
    risk_factors: List[str] = []
    recommendation: Optional[str] = None


class CheckAppRequest(APIModel):
    app_name: str = Field(..., min_length=1, examples=["QuickTrade Pro"])
    url: Optional[HttpUrl] = Field(None, examples=["https://quicktradepro.net"])

    @field_validator("app_name")
    @classmethod
    def strip_app_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("App name must not be blank")
        return v

    @field_validator("url", mode="before")
    @classmethod
    def blank_url(cls, v):
        """Treat an empty URL field as absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class CheckAppResponse(APIModel):
    app: TradingAppRead
    status: Literal["legitimate", "suspicious"]
    risk_factors: List[str]
    recommendation: Optional[str] = None


class TradingAppList(APIModel):
    apps: List[TradingAppRead]
