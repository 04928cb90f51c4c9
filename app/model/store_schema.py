from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List, Optional
from decimal import Decimal


class StoreBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    region: Optional[str] = Field(None, max_length=50)
    address: str = Field(..., min_length=1, max_length=200)
    is_active: bool = True
    phone_number: Optional[str] = Field(None, max_length=15)
    latitude: float
    longitude: float
    store_type: Optional[str] = None
    rating: int = 0
    delivery_fee: Optional[Decimal] = None


class StoreCreate(StoreBase):
    email: EmailStr
    owner_ids: List[str] = Field(default_factory=list)


class StoreUpdate(BaseModel):
    """Partial update. Ownership is changed only through addOwner/removeOwner."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    region: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, min_length=1, max_length=200)
    is_active: Optional[bool] = None
    phone_number: Optional[str] = Field(None, max_length=15)
    email: Optional[EmailStr] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    store_type: Optional[str] = None
    rating: Optional[int] = None
    delivery_fee: Optional[Decimal] = None

    @field_validator("name", "address", "email", "latitude", "longitude", "is_active", "rating", mode="before")
    @classmethod
    def reject_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class StoreRecord(StoreBase):
    id: Optional[str] = None
    email: str
    owner_ids: List[str] = Field(default_factory=list)

    class Config:
        from_attributes = True


class LocationRequest(BaseModel):
    latitude: float
    longitude: float
