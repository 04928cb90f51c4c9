from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID
from app.core.config import settings
from app.db.session import get_db
from app.infra.event_publisher import create_event_publisher
from app.model.store_schema import LocationRequest, StoreCreate, StoreRecord, StoreUpdate
from app.repository.store import StoreRepository
from app.service.locks import KeyedLock
from app.service.store_service import StoreService

router = APIRouter(prefix="/api/stores", tags=["Store"])

NO_STORES_NEARBY = "Sorry, there are no stores in your area."

# shared across requests so mutations of one store are serialized in this process
store_locks = KeyedLock()
event_publisher = create_event_publisher(settings)


def get_store_service(db: Session = Depends(get_db)) -> StoreService:
    return StoreService(
        StoreRepository(db),
        event_publisher,
        locks=store_locks,
        radius_miles=settings.NEARBY_RADIUS_MILES,
        owner_role_topic=settings.OWNER_ROLE_TOPIC,
    )


@router.get("", response_model=List[StoreRecord])
def list_stores(service: StoreService = Depends(get_store_service)):
    return service.get_all()

@router.get("/active", response_model=List[StoreRecord])
def list_active_stores(service: StoreService = Depends(get_store_service)):
    return service.get_active()

@router.get("/email/{email}", response_model=StoreRecord)
def get_store_by_email(email: str, service: StoreService = Depends(get_store_service)):
    store = service.get_by_email(email)
    if not store:
        raise HTTPException(status_code=404, detail="Store not found")
    return store

@router.get("/owner/{owner_id}", response_model=List[StoreRecord])
def list_stores_by_owner(owner_id: UUID, service: StoreService = Depends(get_store_service)):
    return service.list_by_owner(str(owner_id))

@router.get("/{store_id}", response_model=StoreRecord)
def get_store(store_id: UUID, service: StoreService = Depends(get_store_service)):
    store = service.get_by_id(str(store_id))
    if not store:
        raise HTTPException(status_code=404, detail="Store not found")
    return store


@router.post("", response_model=StoreRecord)
def create_store(store_data: StoreCreate, service: StoreService = Depends(get_store_service)):
    return service.create(store_data)

@router.put("/{store_id}", response_model=StoreRecord)
def update_store(store_id: UUID, store_data: StoreUpdate, service: StoreService = Depends(get_store_service)):
    return service.update(str(store_id), store_data)

@router.delete("/{store_id}", status_code=204)
def delete_store(store_id: UUID, service: StoreService = Depends(get_store_service)):
    service.delete(str(store_id))
    return Response(status_code=204)


@router.put("/{store_id}/addOwner/{owner_id}", response_model=StoreRecord)
def add_owner(store_id: UUID, owner_id: UUID, service: StoreService = Depends(get_store_service)):
    return service.add_owner(str(store_id), str(owner_id))

@router.put("/{store_id}/removeOwner/{owner_id}", response_model=StoreRecord)
def remove_owner(store_id: UUID, owner_id: UUID, service: StoreService = Depends(get_store_service)):
    return service.remove_owner(str(store_id), str(owner_id))


@router.post("/nearby", response_model=List[StoreRecord])
def nearby_stores(location: LocationRequest, service: StoreService = Depends(get_store_service)):
    stores = service.find_nearby(location.latitude, location.longitude)
    if not stores:
        # empty is a valid result for the service; the API reports it as 404
        return JSONResponse(status_code=404, content={"detail": NO_STORES_NEARBY})
    return stores
