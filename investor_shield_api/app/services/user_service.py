"""
Business logic for users.

Users register with an email, a password and a display name.  Email
addresses are unique (compared case‑insensitively) and passwords are
stored only as PBKDF2 hashes.  Hashing runs in the thread pool so
that registrations and logins do not stall the event loop.
"""

import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from ..core.security import hash_password, verify_password
from ..core.store import RecordStore
from ..models import User
from ..schemas.user import UserCreate, UserRead


logger = logging.getLogger(__name__)


def _to_read(user: User) -> UserRead:
    return UserRead(id=user.id, email=user.email, name=user.name)


class UserService:
    """Registration, authentication and lookup of users."""

    @classmethod
    async def get_user_by_email(cls, store: RecordStore, email: str) -> Optional[User]:
        wanted = email.lower()
        return store.users.find(lambda u: u.email.lower() == wanted)

    @classmethod
    async def create_user(cls, store: RecordStore, data: UserCreate) -> UserRead:
        """Register a new user.

        Raises ``ValueError`` if the email address is already taken.
        """
        if await cls.get_user_by_email(store, data.email):
            raise ValueError("User already exists")
        hashed = await run_in_threadpool(hash_password, data.password)
        # Another registration may have taken the email while hashing.
        if await cls.get_user_by_email(store, data.email):
            raise ValueError("User already exists")
        user = store.users.insert(
            email=data.email,
            password=hashed,
            name=data.name,
        )
        logger.info("Registered user %s (%s)", user.id, user.email)
        return _to_read(user)

    @classmethod
    async def authenticate(cls, store: RecordStore, email: str, password: str) -> Optional[UserRead]:
        """Return the user if the credentials match, otherwise ``None``."""
        user = await cls.get_user_by_email(store, email)
        if user is None or not await run_in_threadpool(verify_password, password, user.password):
            logger.info("Failed login attempt for %s", email)
            return None
        return _to_read(user)

    @classmethod
    async def get_user_by_id(cls, store: RecordStore, user_id: str) -> Optional[UserRead]:
        user = store.users.get(user_id)
        return _to_read(user) if user else None
