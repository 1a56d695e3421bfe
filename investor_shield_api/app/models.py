"""
Record types held by the in‑memory store.

Each record is a frozen dataclass: once inserted it is never updated.
Identifiers are opaque UUID strings assigned by the store on insert.
References between records (``Review.advisor_id``, ``Review.user_id``)
are not enforced and may dangle.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class User:
    id: str
    email: str
    password: str  # PBKDF2 salt$hash, never the plain password
    name: str


@dataclass(frozen=True)
class Advisor:
    id: str
    name: str
    reg_number: Optional[str] = None
    is_registered: bool = False
    complaints_count: int = 0
    trust_score: int = 0
    years_experience: int = 0
    specialization: Optional[str] = None


@dataclass(frozen=True)
class TradingApp:
    """A trading app or website and its legitimacy assessment."""

    id: str
    app_name: str
    url: Optional[str] = None
    developer: Optional[str] = None
    is_legit: bool = False
    risk_factors: Tuple[str, ...] = ()
    recommendation: Optional[str] = None


@dataclass(frozen=True)
class Review:
    id: str
    advisor_id: str
    user_id: str
    rating: int
    comment: str
    timestamp: datetime = field(default_factory=utcnow)
    is_verified: bool = False
