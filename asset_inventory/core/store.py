"""Asset store: persistence operations over the assets table."""

import logging
import re
from datetime import datetime, timezone
from typing import Any, Mapping

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from asset_inventory.core.exceptions import (
    InvalidArgumentError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from asset_inventory.core.normalization import clean_text, optional_text, parse_date, parse_price
from asset_inventory.models.asset import DEFAULT_STATUS, Asset
from asset_inventory.schemas.asset import AssetResponse

logger = logging.getLogger(__name__)

KNOWN_STATUSES = ("available", "assigned", "in_use", "maintenance")

UPDATABLE_FIELDS = ("name", "description", "category", "status", "purchase_date", "purchase_price")

_ASSET_ID_PATTERN = re.compile(r"[0-9]+")

# Upper bound of the 32-bit Integer primary key column
MAX_ASSET_ID = 2**31 - 1


def parse_asset_id(raw_id: Any) -> int:
    """Convert a raw identifier into a positive integer asset ID.

    Args:
        raw_id: Identifier as received from the caller (int or string)

    Returns:
        int: The asset ID

    Raises:
        InvalidArgumentError: If the identifier is not a positive integer
            that fits the ID column
    """
    if isinstance(raw_id, bool):
        raise InvalidArgumentError("Valid asset ID is required")

    if isinstance(raw_id, int):
        asset_id = raw_id
    elif isinstance(raw_id, str) and _ASSET_ID_PATTERN.fullmatch(raw_id.strip()):
        digits = raw_id.strip().lstrip("0")
        # Longer strings cannot fit the column (and may exceed int() digit limits)
        if len(digits) > len(str(MAX_ASSET_ID)):
            raise InvalidArgumentError("Valid asset ID is required")
        asset_id = int(digits or "0")
    else:
        raise InvalidArgumentError("Valid asset ID is required")

    if asset_id <= 0 or asset_id > MAX_ASSET_ID:
        raise InvalidArgumentError("Valid asset ID is required")
    return asset_id


class AssetStore:
    """Create, read, update and delete assets through an injected session.

    Every mutation is committed immediately. Database failures are rolled
    back, logged and re-raised as StorageError.
    """

    def __init__(self, db: Session, strict_status: bool = False):
        """Initialize the store.

        Args:
            db: SQLAlchemy session owned by the caller
            strict_status: Reject statuses outside KNOWN_STATUSES when True
        """
        self.db = db
        self.strict_status = strict_status

    def ping(self) -> None:
        """Check that the database answers a trivial query.

        Raises:
            StorageError: If the query fails
        """
        try:
            self.db.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise self._storage_error("reach the database", e) from e

    def list_all(self) -> list[AssetResponse]:
        """Return every asset ordered by ID.

        Raises:
            StorageError: If the assets cannot be read
        """
        try:
            assets = self.db.query(Asset).order_by(Asset.id.asc()).all()
        except SQLAlchemyError as e:
            raise self._storage_error("fetch assets", e) from e

        logger.info(f"Fetched {len(assets)} assets")
        return [AssetResponse.model_validate(asset) for asset in assets]

    def get_by_id(self, asset_id: Any) -> AssetResponse:
        """Return a single asset.

        Raises:
            InvalidArgumentError: If the ID is not a positive integer
            NotFoundError: If no asset has this ID
            StorageError: If the asset cannot be read
        """
        asset = self._load(parse_asset_id(asset_id))
        return AssetResponse.model_validate(asset)

    def create(self, fields: Mapping[str, Any]) -> AssetResponse:
        """Create an asset from raw fields.

        Args:
            fields: Mapping with name, category and optionally description,
                status, purchase_date and purchase_price

        Returns:
            AssetResponse: The stored asset including its ID and timestamps

        Raises:
            ValidationError: If name or category is missing or blank, or an
                optional field cannot be parsed
            StorageError: If the asset cannot be saved
        """
        name = clean_text(fields.get("name"))
        category = clean_text(fields.get("category"))
        if not name or not category:
            raise ValidationError("Name and category are required")

        now = datetime.now(timezone.utc)
        asset = Asset(
            name=name,
            description=optional_text(fields.get("description")),
            category=category,
            status=self._normalize_status(fields.get("status")),
            purchase_date=parse_date(fields.get("purchase_date")),
            purchase_price=parse_price(fields.get("purchase_price")),
            created_at=now,
            updated_at=now,
        )

        try:
            self.db.add(asset)
            self.db.commit()
            self.db.refresh(asset)
        except SQLAlchemyError as e:
            raise self._storage_error("create asset", e) from e

        logger.info(f"Created asset {asset.id} ({asset.name})")
        return AssetResponse.model_validate(asset)

    def update(self, asset_id: Any, fields: Mapping[str, Any]) -> AssetResponse:
        """Apply a partial update.

        Only keys present in ``fields`` are touched; ``None`` or an empty
        string clears an optional field. ``updated_at`` is always refreshed.

        Raises:
            InvalidArgumentError: If the ID is not a positive integer
            ValidationError: If a supplied field cannot be parsed
            NotFoundError: If no asset has this ID
            StorageError: If the asset cannot be saved
        """
        asset_pk = parse_asset_id(asset_id)
        changes = self._normalize_changes(fields)
        asset = self._load(asset_pk)

        for field, value in changes.items():
            setattr(asset, field, value)
        asset.updated_at = datetime.now(timezone.utc)

        try:
            self.db.commit()
            self.db.refresh(asset)
        except SQLAlchemyError as e:
            raise self._storage_error(f"update asset {asset_pk}", e) from e

        logger.info(f"Updated asset {asset_pk}: {', '.join(sorted(changes)) or 'no fields'}")
        return AssetResponse.model_validate(asset)

    def delete(self, asset_id: Any) -> AssetResponse:
        """Delete an asset and return it as it was before deletion.

        Raises:
            InvalidArgumentError: If the ID is not a positive integer
            NotFoundError: If no asset has this ID
            StorageError: If the asset cannot be deleted
        """
        asset_pk = parse_asset_id(asset_id)
        asset = self._load(asset_pk)
        deleted = AssetResponse.model_validate(asset)

        try:
            self.db.delete(asset)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._storage_error(f"delete asset {asset_pk}", e) from e

        logger.info(f"Deleted asset {asset_pk}")
        return deleted

    def _load(self, asset_pk: int) -> Asset:
        try:
            asset = self.db.query(Asset).filter(Asset.id == asset_pk).first()
        except SQLAlchemyError as e:
            raise self._storage_error(f"fetch asset {asset_pk}", e) from e

        if asset is None:
            raise NotFoundError("Asset not found")
        return asset

    def _normalize_status(self, value: Any) -> str:
        status = clean_text(value)
        if not status:
            return DEFAULT_STATUS
        if self.strict_status and status not in KNOWN_STATUSES:
            raise ValidationError(f"Status must be one of: {', '.join(KNOWN_STATUSES)}")
        return status

    def _normalize_changes(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        for field in UPDATABLE_FIELDS:
            if field not in fields:
                continue
            value = fields[field]

            if field in ("name", "category"):
                # Blank values pass through; only null is refused (NOT NULL columns)
                if value is None:
                    raise ValidationError(f"{field.capitalize()} cannot be null")
                changes[field] = clean_text(value)
            elif field == "description":
                changes[field] = optional_text(value)
            elif field == "status":
                changes[field] = self._normalize_status(value)
            elif field == "purchase_date":
                changes[field] = parse_date(value)
            else:
                changes[field] = parse_price(value)
        return changes

    def _storage_error(self, action: str, error: SQLAlchemyError) -> StorageError:
        self.db.rollback()
        logger.exception(f"Failed to {action}: {error}")
        return StorageError(f"Failed to {action}")
