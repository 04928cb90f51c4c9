"""Shared fixtures for the store service test suite."""

from __future__ import annotations

import os
import uuid
from decimal import Decimal

# settings are read at import time; keep the app off PostgreSQL and the HTTP sink
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("EVENT_SINK_URL", "")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.session import init_db
from app.domain.ports.event_publisher import EventPublisherPort
from app.domain.ports.store_repository import StoreRepositoryPort
from app.model.store_schema import StoreRecord
from app.service.store_service import StoreService


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

class InMemoryStoreRepository(StoreRepositoryPort):
    """Dict-backed repository that records every write."""

    def __init__(self, stores=()):
        self.stores = {}
        self.saved = []
        self.deleted = []
        self.fail_on_save = None
        for store in stores:
            self.stores[store.id] = store.model_copy(deep=True)

    def get(self, store_id):
        store = self.stores.get(store_id)
        return store.model_copy(deep=True) if store else None

    def save(self, record):
        if self.fail_on_save is not None:
            raise self.fail_on_save
        if not record.id:
            record = record.model_copy(update={"id": str(uuid.uuid4())})
        record = record.model_copy(deep=True)
        self.stores[record.id] = record
        self.saved.append(record)
        return record.model_copy(deep=True)

    def delete(self, store_id):
        self.deleted.append(store_id)
        self.stores.pop(store_id, None)

    def find_all(self):
        return [s.model_copy(deep=True) for s in self.stores.values()]

    def find_by_owner(self, owner_id):
        return [s.model_copy(deep=True) for s in self.stores.values() if owner_id in s.owner_ids]

    def find_by_email(self, email):
        for store in self.stores.values():
            if store.email == email:
                return store.model_copy(deep=True)
        return None

    def find_active(self):
        return [s.model_copy(deep=True) for s in self.stores.values() if s.is_active]


class RecordingPublisher(EventPublisherPort):
    def __init__(self):
        self.published = []

    def publish(self, topic, event):
        self.published.append((topic, event))


# ---------------------------------------------------------------------------
# Store helpers
# ---------------------------------------------------------------------------

def make_store(**overrides) -> StoreRecord:
    """Return a store in Edinburgh-ish coordinates with no owners."""
    data = dict(
        id=str(uuid.uuid4()),
        name="Corner Shop",
        region="Lothian",
        address="1 High Street",
        is_active=True,
        phone_number="0131000000",
        email=f"shop-{uuid.uuid4().hex[:8]}@example.com",
        owner_ids=[],
        latitude=55.0,
        longitude=-5.0,
        store_type="grocery",
        rating=4,
        delivery_fee=Decimal("2.50"),
    )
    data.update(overrides)
    return StoreRecord(**data)


@pytest.fixture
def store() -> StoreRecord:
    return make_store()


@pytest.fixture
def repository(store) -> InMemoryStoreRepository:
    return InMemoryStoreRepository([store])


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def service(repository, publisher) -> StoreService:
    return StoreService(repository, publisher)


# ---------------------------------------------------------------------------
# SQLite
# ---------------------------------------------------------------------------

@pytest.fixture
def db_session():
    """A fresh in-memory SQLite database shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
