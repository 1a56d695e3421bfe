"""
Fixture records loaded into every new store.

The store has no durable backing, so these advisors, apps and reviews
are recreated each time the process starts.  The seeded reviews are
attributed to user ids that do not exist in the store; they display as
"Anonymous".
"""

import uuid
from typing import Any, Dict, List

from .store import RecordStore


ADVISORS: List[Dict[str, Any]] = [
    {
        "name": "Rajesh Kumar",
        "reg_number": "INH200001234",
        "is_registered": True,
        "complaints_count": 1,
        "trust_score": 85,
        "years_experience": 6,
        "specialization": "Investment Advisory",
    },
    {
        "name": "Dr. Priya Sharma",
        "reg_number": "INH200005678",
        "is_registered": True,
        "complaints_count": 0,
        "trust_score": 94,
        "years_experience": 8,
        "specialization": "Portfolio Management",
    },
    {
        "name": "Amit Sharma",
        "reg_number": "INH200009012",
        "is_registered": True,
        "complaints_count": 0,
        "trust_score": 92,
        "years_experience": 5,
        "specialization": "Mutual Fund Advisory",
    },
]

LEGIT_BROKER_RECOMMENDATION = (
    "✅ This is a legitimate and SEBI registered broker. Safe to use for trading."
)

APPS: List[Dict[str, Any]] = [
    {
        "app_name": "QuickTrade Pro",
        "url": "quicktradepro.net",
        "developer": "Unknown",
        "is_legit": False,
        "risk_factors": (
            "Domain registered less than 6 months ago",
            'Logo matches legitimate broker "TradeSafe"',
            "No SEBI registration found",
        ),
        "recommendation": (
            "⚠️ Do not use this app for trading or provide personal information. "
            "Consider using verified brokers from our legitimate brokers list."
        ),
    },
    {
        "app_name": "Zerodha",
        "url": "zerodha.com",
        "developer": "Zerodha Broking Ltd",
        "is_legit": True,
        "risk_factors": (),
        "recommendation": LEGIT_BROKER_RECOMMENDATION,
    },
    {
        "app_name": "Upstox",
        "url": "upstox.com",
        "developer": "RKSV Securities India Pvt Ltd",
        "is_legit": True,
        "risk_factors": (),
        "recommendation": LEGIT_BROKER_RECOMMENDATION,
    },
]

# (index into ADVISORS, rating, comment)
REVIEWS = [
    (
        0,
        4,
        "Professional and knowledgeable. Helped me understand my investment options clearly.",
    ),
    (
        0,
        5,
        "Excellent advice on mutual funds. Very professional and transparent about fees. "
        "Highly recommend for long-term investment planning.",
    ),
]


def seed_store(store: RecordStore) -> None:
    """Insert the fixture advisors, apps and reviews into ``store``."""
    advisors = [store.advisors.insert(**data) for data in ADVISORS]
    for data in APPS:
        store.apps.insert(**data)
    for advisor_index, rating, comment in REVIEWS:
        store.reviews.insert(
            advisor_id=advisors[advisor_index].id,
            user_id=str(uuid.uuid4()),
            rating=rating,
            comment=comment,
            is_verified=True,
        )
