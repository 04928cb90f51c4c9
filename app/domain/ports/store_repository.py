from abc import ABC, abstractmethod
from typing import List, Optional

from app.model.store_schema import StoreRecord


class StoreRepositoryPort(ABC):
    """Persistence for store records. Each call is atomic for a single store."""

    @abstractmethod
    def get(self, store_id: str) -> Optional[StoreRecord]:
        """Return the store, or None when the id does not resolve."""
        raise NotImplementedError

    @abstractmethod
    def save(self, record: StoreRecord) -> StoreRecord:
        """Insert or replace a store. A record without id gets a new one."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, store_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> List[StoreRecord]:
        raise NotImplementedError

    @abstractmethod
    def find_by_owner(self, owner_id: str) -> List[StoreRecord]:
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[StoreRecord]:
        raise NotImplementedError

    @abstractmethod
    def find_active(self) -> List[StoreRecord]:
        raise NotImplementedError
