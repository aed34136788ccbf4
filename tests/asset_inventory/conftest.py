"""Pytest fixtures for asset inventory tests."""

from datetime import datetime, timezone
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from asset_inventory.core.store import AssetStore
from asset_inventory.database import Base, create_db_engine, create_session_factory, get_db
from asset_inventory.main import app
from asset_inventory.models.asset import Asset

OLD_TIMESTAMP = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="function")
def test_db_engine() -> Generator[Engine, None, None]:
    """Create an in-memory SQLite engine with the schema in place."""
    engine = create_db_engine("sqlite://")

    # Create all tables
    Base.metadata.create_all(bind=engine)

    yield engine

    # Cleanup: drop all tables
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db_session(test_db_engine: Engine) -> Generator[Session, None, None]:
    """Create a database session for testing with automatic rollback."""
    TestingSessionLocal = create_session_factory(test_db_engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        # Rollback any uncommitted changes to clean up test data
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def store(test_db_session: Session) -> AssetStore:
    """Asset store bound to the test session."""
    return AssetStore(test_db_session)


@pytest.fixture(scope="function")
def test_client(test_db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database dependency override."""

    def override_get_db() -> Generator[Session, None, None]:
        """Override get_db dependency to use test database session."""
        try:
            yield test_db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    client = TestClient(app)

    try:
        yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def create_asset(test_db_session: Session) -> Callable[..., Asset]:
    """Factory function to insert assets directly in the database.

    Timestamps default to a fixed point in the past so tests can tell that an
    update refreshed ``updated_at``.

    Example:
        ```python
        def test_example(create_asset):
            asset = create_asset(name="Dell Latitude 5520", category="Laptop")
            assert asset.status == "available"
        ```
    """

    def _create_asset(
        name: str = "ThinkPad X1",
        category: str = "Laptop",
        description: str | None = None,
        status: str = "available",
        purchase_date: datetime | None = None,
        purchase_price: float | None = None,
        created_at: datetime = OLD_TIMESTAMP,
        updated_at: datetime = OLD_TIMESTAMP,
    ) -> Asset:
        asset = Asset(
            name=name,
            category=category,
            description=description,
            status=status,
            purchase_date=purchase_date,
            purchase_price=purchase_price,
            created_at=created_at,
            updated_at=updated_at,
        )
        test_db_session.add(asset)
        test_db_session.commit()
        test_db_session.refresh(asset)
        return asset

    return _create_asset
