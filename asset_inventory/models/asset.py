"""Asset model."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, Numeric, String, Text

from asset_inventory.database import Base

DEFAULT_STATUS = "available"


class Asset(Base):
    """Asset model for tracked inventory items."""

    __tablename__ = "assets"
    # SQLite would otherwise hand out the id of a deleted last row again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(100), nullable=False)
    status = Column(String(50), nullable=False, default=DEFAULT_STATUS)
    purchase_date = Column(DateTime(timezone=True), nullable=True)
    purchase_price = Column(Numeric(12, 2, asdecimal=False), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of Asset."""
        return f"<Asset(id={self.id}, name={self.name}, category={self.category}, status={self.status})>"
