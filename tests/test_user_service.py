import asyncio
import threading

import pytest

from investor_shield_api.app.core import security
from investor_shield_api.app.schemas.user import UserCreate
from investor_shield_api.app.services import user_service
from investor_shield_api.app.services.user_service import UserService

from .conftest import run


def _record_threads(monkeypatch):
    threads = []

    def hashing(password):
        threads.append(threading.get_ident())
        return security.hash_password(password)

    def verifying(plain, hashed):
        threads.append(threading.get_ident())
        return security.verify_password(plain, hashed)

    monkeypatch.setattr(user_service, "hash_password", hashing)
    monkeypatch.setattr(user_service, "verify_password", verifying)
    return threads


def test_password_work_runs_off_the_event_loop_thread(store, monkeypatch):
    threads = _record_threads(monkeypatch)
    data = UserCreate(email="ravi@investors.in", password="secret123", name="Ravi")

    async def register_and_login():
        loop_thread = threading.get_ident()
        await UserService.create_user(store, data)
        user = await UserService.authenticate(store, "ravi@investors.in", "secret123")
        return loop_thread, user

    loop_thread, user = asyncio.run(register_and_login())
    assert user.name == "Ravi"
    assert len(threads) == 2
    assert loop_thread not in threads


def test_duplicate_email_is_case_insensitive(store):
    run(UserService.create_user(store, UserCreate(email="ravi@investors.in", password="secret123", name="Ravi")))
    with pytest.raises(ValueError, match="User already exists"):
        run(UserService.create_user(store, UserCreate(email="RAVI@investors.in", password="secret123", name="R")))
    assert len(store.users) == 1


def test_concurrent_registrations_store_one_user(store):
    data = UserCreate(email="ravi@investors.in", password="secret123", name="Ravi")

    async def register_twice():
        return await asyncio.gather(
            UserService.create_user(store, data),
            UserService.create_user(store, data),
            return_exceptions=True,
        )

    results = asyncio.run(register_twice())
    assert sum(isinstance(r, ValueError) for r in results) == 1
    assert len(store.users) == 1
