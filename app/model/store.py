import uuid
from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()

class Store(Base):
    __tablename__ = "stores"

    id = Column(String(36), primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False)
    region = Column(String(50), nullable=True)
    address = Column(String(200), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    phone_number = Column(String(15), nullable=True)
    email = Column(String, unique=True, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    store_type = Column(String, nullable=True)
    rating = Column(Integer, nullable=False, default=0)
    delivery_fee = Column(Numeric(10, 2), nullable=True)

    owners = relationship(
        "StoreOwner",
        order_by="StoreOwner.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def owner_ids(self):
        return [owner.owner_id for owner in self.owners]

    def __repr__(self):
        return f"<Store(id={self.id}, name={self.name}, active={self.is_active})>"


class StoreOwner(Base):
    __tablename__ = "store_owners"

    id = Column(Integer, primary_key=True, autoincrement=True)
    store_id = Column(String(36), ForeignKey("stores.id", ondelete="CASCADE"), index=True, nullable=False)
    owner_id = Column(String(36), index=True, nullable=False)
    position = Column(Integer, nullable=False, default=0)
