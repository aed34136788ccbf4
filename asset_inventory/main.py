import logging
from contextlib import asynccontextmanager
from typing import Annotated, AsyncIterator

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session

import uvicorn

from asset_inventory.config import settings
from asset_inventory.core.exceptions import StorageError
from asset_inventory.core.store import AssetStore
from asset_inventory.database import check_connection, create_db_engine, create_session_factory, get_db
from asset_inventory.routers import assets, inventory

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Own the database engine for the lifetime of the process."""
    engine = create_db_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )
    # Refuse to serve requests without a reachable database
    check_connection(engine)

    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info(f"{settings.app_name} started ({settings.app_env})")
    try:
        yield
    finally:
        app.state.session_factory = None
        engine.dispose()
        logger.info("Database engine disposed")


app = FastAPI(title=settings.app_name, lifespan=lifespan)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"{request.method} {request.url.path}")
    return await call_next(request)


# Include routers
app.include_router(assets.router)
app.include_router(inventory.router)


@app.get("/")
async def root() -> dict[str, str]:
    return {"status": "OK", "message": "Asset Management API is running"}


@app.get("/api/test")
async def api_test() -> dict[str, str]:
    return {"message": "API test endpoint is working!"}


@app.get("/health")
async def health_check(db: Annotated[Session, Depends(get_db)]) -> dict[str, str]:
    """Report service health including database connectivity."""
    try:
        AssetStore(db).ping()
    except StorageError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database connection failed",
        ) from e
    return {"status": "healthy", "service": "asset_inventory_backend", "database": "connected"}


if __name__ == "__main__":
    uvicorn.run(
        "asset_inventory.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "development",
        loop="asyncio",  # Explicitly use asyncio instead of auto (which tries uvloop)
    )
