"""Database models package."""

from asset_inventory.models.asset import Asset

__all__ = ["Asset"]
