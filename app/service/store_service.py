import logging
from contextlib import nullcontext
from typing import List, Optional

from app.core.exceptions import StoreNotFoundError
from app.domain.ports.event_publisher import EventPublisherPort
from app.domain.ports.store_repository import StoreRepositoryPort
from app.model.owner_event import OWNER_ROLE, OwnerRoleUpdateEvent
from app.model.store_schema import StoreCreate, StoreRecord, StoreUpdate
from app.service import geo
from app.service.locks import KeyedLock

logger = logging.getLogger(__name__)

OWNER_ROLE_TOPIC = "user-role-updates"


class StoreService:
    """
    Store reads and writes on top of a repository, plus the ownership rules:
    an owner id is listed at most once per store, and an OwnerRoleUpdateEvent
    is published only when an owner is added to a store that did not list it.

    Each call does at most one read, one write and one publish, in that order.
    Repository and publisher errors are not caught here.
    """

    def __init__(
        self,
        repository: StoreRepositoryPort,
        publisher: EventPublisherPort,
        locks: Optional[KeyedLock] = None,
        radius_miles: float = geo.NEARBY_RADIUS_MILES,
        owner_role_topic: str = OWNER_ROLE_TOPIC,
    ):
        self.repository = repository
        self.publisher = publisher
        self.locks = locks
        self.radius_miles = radius_miles
        self.owner_role_topic = owner_role_topic

    def _hold(self, store_id: str):
        return self.locks.hold(store_id) if self.locks else nullcontext()

    # --- pass-through accessors ---

    def get_all(self) -> List[StoreRecord]:
        logger.info("Fetching all stores")
        stores = self.repository.find_all()
        logger.debug("Retrieved %d stores", len(stores))
        return stores

    def get_by_id(self, store_id: str) -> Optional[StoreRecord]:
        logger.info("Fetching store with ID: %s", store_id)
        store = self.repository.get(store_id)
        if store is None:
            logger.warning("Store with ID %s not found", store_id)
        return store

    def get_by_email(self, email: str) -> Optional[StoreRecord]:
        logger.info("Fetching store with email: %s", email)
        return self.repository.find_by_email(email)

    def get_active(self) -> List[StoreRecord]:
        logger.info("Fetching all active stores")
        return self.repository.find_active()

    def create(self, data: StoreCreate) -> StoreRecord:
        logger.info("Creating a new store: %s", data.name)
        saved = self.repository.save(StoreRecord(**data.model_dump()))
        logger.info("Store created with ID: %s", saved.id)
        return saved

    def update(self, store_id: str, data: StoreUpdate) -> StoreRecord:
        logger.info("Updating store with ID: %s", store_id)
        with self._hold(store_id):
            store = self._require(store_id, "updating")
            changes = data.model_dump(exclude_unset=True)
            # re-validate so a bad change fails here, not at the database
            merged = StoreRecord.model_validate({**store.model_dump(), **changes})
            updated = self.repository.save(merged)
        logger.info("Store ID %s updated (%s)", store_id, ", ".join(sorted(changes)) or "no fields")
        return updated

    def delete(self, store_id: str) -> None:
        logger.warning("Deleting store with ID: %s", store_id)
        with self._hold(store_id):
            self._require(store_id, "deleting")
            self.repository.delete(store_id)
        logger.info("Store with ID %s deleted", store_id)

    # --- ownership ---

    def add_owner(self, store_id: str, owner_id: str) -> StoreRecord:
        logger.info("Adding owner %s to store %s", owner_id, store_id)
        with self._hold(store_id):
            store = self._require(store_id, f"adding owner {owner_id}")
            if owner_id in store.owner_ids:
                logger.debug("Owner %s already listed on store %s", owner_id, store_id)
                return store

            store = self.repository.save(
                store.model_copy(update={"owner_ids": [*store.owner_ids, owner_id]})
            )
            logger.info("Owner %s added to store %s", owner_id, store_id)

            self.publisher.publish(
                self.owner_role_topic,
                OwnerRoleUpdateEvent(user_id=owner_id, role=OWNER_ROLE),
            )
            logger.info("Role update event sent for owner %s", owner_id)
        return store

    def remove_owner(self, store_id: str, owner_id: str) -> StoreRecord:
        logger.info("Removing owner %s from store %s", owner_id, store_id)
        with self._hold(store_id):
            store = self._require(store_id, f"removing owner {owner_id}")
            remaining = [o for o in store.owner_ids if o != owner_id]
            updated = self.repository.save(store.model_copy(update={"owner_ids": remaining}))
        logger.info("Owner %s removed from store %s", owner_id, store_id)
        return updated

    def list_by_owner(self, owner_id: str) -> List[StoreRecord]:
        logger.info("Fetching stores for owner ID: %s", owner_id)
        return self.repository.find_by_owner(owner_id)

    # --- proximity ---

    def find_nearby(self, latitude: float, longitude: float) -> List[StoreRecord]:
        logger.info("Finding stores near latitude: %s, longitude: %s", latitude, longitude)
        nearby = geo.find_nearby(latitude, longitude, self.repository.find_all(), self.radius_miles)
        logger.info("Found %d stores within %s miles", len(nearby), self.radius_miles)
        return nearby

    def _require(self, store_id: str, action: str) -> StoreRecord:
        store = self.repository.get(store_id)
        if store is None:
            logger.error("Store with ID %s not found when %s", store_id, action)
            raise StoreNotFoundError(store_id)
        return store
