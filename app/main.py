import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from app.core.config import settings
from app.core.exceptions import StoreNotFoundError
from app.core.logging import setup_logging
from app.db.session import init_db, test_connection
from app.routers.store_router import router as store_router

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Store Service")


@app.exception_handler(StoreNotFoundError)
async def store_not_found_handler(request: Request, exc: StoreNotFoundError):
    return JSONResponse(status_code=404, content={"detail": "Store not found"})


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("Rejected write on %s: %s", request.url.path, exc.orig)
    return JSONResponse(status_code=409, content={"detail": "Store conflicts with an existing record"})


@app.on_event("startup")
def startup_event():
    logger.info("🚀 Starting server...")
    if test_connection():
        init_db()

app.include_router(store_router)

@app.get("/ping")
def ping():
    return {"ping": "pong"}
