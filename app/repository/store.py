from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
from app.domain.ports.store_repository import StoreRepositoryPort
from app.model.store import Store, StoreOwner
from app.model.store_schema import StoreRecord
import uuid

STORE_COLUMNS = (
    "name",
    "region",
    "address",
    "is_active",
    "phone_number",
    "email",
    "latitude",
    "longitude",
    "store_type",
    "rating",
    "delivery_fee",
)


def to_record(store: Store) -> StoreRecord:
    return StoreRecord.model_validate(store)


class StoreRepository(StoreRepositoryPort):
    """SQLAlchemy-backed store repository. Every write commits its own transaction."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, store_id: str) -> Optional[StoreRecord]:
        store = self.db.query(Store).filter(Store.id == store_id).first()
        return to_record(store) if store else None

    def save(self, record: StoreRecord) -> StoreRecord:
        store = None
        if record.id:
            store = self.db.query(Store).filter(Store.id == record.id).first()
        if store is None:
            store = Store(id=record.id or str(uuid.uuid4()))
            self.db.add(store)

        for column in STORE_COLUMNS:
            setattr(store, column, getattr(record, column))

        # rewrite the owner rows only when membership or order changed
        if store.owner_ids != record.owner_ids:
            store.owners = [
                StoreOwner(owner_id=owner_id, position=position)
                for position, owner_id in enumerate(record.owner_ids)
            ]

        self._commit()
        self.db.refresh(store)
        return to_record(store)

    def delete(self, store_id: str) -> None:
        store = self.db.query(Store).filter(Store.id == store_id).first()
        if store:
            self.db.delete(store)
            self._commit()

    def find_all(self) -> List[StoreRecord]:
        return [to_record(s) for s in self.db.query(Store).all()]

    def find_by_owner(self, owner_id: str) -> List[StoreRecord]:
        query = self.db.query(Store).filter(Store.owners.any(StoreOwner.owner_id == owner_id))
        return [to_record(s) for s in query.all()]

    def find_by_email(self, email: str) -> Optional[StoreRecord]:
        store = self.db.query(Store).filter(Store.email == email).first()
        return to_record(store) if store else None

    def find_active(self) -> List[StoreRecord]:
        return [to_record(s) for s in self.db.query(Store).filter(Store.is_active.is_(True)).all()]

    def _commit(self):
        try:
            self.db.commit()
        except SQLAlchemyError:
            # leave the session usable for the next call
            self.db.rollback()
            raise
