"""
In‑memory record store.

This module replaces a database with one keyed collection per record
type.  A ``RecordStore`` is built explicitly (see ``build_store``) and
handed to every service call; the FastAPI application keeps its
instance on ``app.state.store`` and routes obtain it through the
``get_store`` dependency.  Nothing is persisted: each process starts
from the seed fixtures.

Collections only support insert, point lookup and full scans.  Scans
always yield records in insertion order, which is what lookups rely on
to break ties between several matches.
"""

import logging
import uuid
from typing import Callable, Dict, Generic, Iterator, List, Optional, Type, TypeVar

from fastapi import Request

from ..models import Advisor, Review, TradingApp, User


T = TypeVar("T")

logger = logging.getLogger(__name__)


class Collection(Generic[T]):
    """Keyed collection of one record type."""

    def __init__(self, record_type: Type[T]) -> None:
        self.record_type = record_type
        self._records: Dict[str, T] = {}

    def insert(self, **fields) -> T:
        """Create a record with a freshly generated id and store it."""
        record_id = str(uuid.uuid4())
        while record_id in self._records:
            record_id = str(uuid.uuid4())
        record = self.record_type(id=record_id, **fields)
        self._records[record_id] = record
        return record

    def get(self, record_id: str) -> Optional[T]:
        return self._records.get(record_id)

    def all(self) -> List[T]:
        return list(self._records.values())

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first record (in insertion order) matching ``predicate``."""
        return next((r for r in self._records.values() if predicate(r)), None)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [r for r in self._records.values() if predicate(r)]

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._records.values()))

    def __len__(self) -> int:
        return len(self._records)


class RecordStore:
    """All collections used by the application."""

    def __init__(self) -> None:
        self.users: Collection[User] = Collection(User)
        self.advisors: Collection[Advisor] = Collection(Advisor)
        self.apps: Collection[TradingApp] = Collection(TradingApp)
        self.reviews: Collection[Review] = Collection(Review)

    def counts(self) -> Dict[str, int]:
        return {
            "users": len(self.users),
            "advisors": len(self.advisors),
            "apps": len(self.apps),
            "reviews": len(self.reviews),
        }


def build_store(seed: bool = True) -> RecordStore:
    """Create a new store, optionally populated with the fixture records."""
    store = RecordStore()
    if seed:
        from .seed import seed_store

        seed_store(store)
        logger.info("Record store seeded: %s", store.counts())
    return store


def get_store(request: Request) -> RecordStore:
    """FastAPI dependency returning the application's record store."""
    return request.app.state.store
