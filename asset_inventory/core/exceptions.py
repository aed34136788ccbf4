"""Errors raised by the asset store and the presentation adapter."""


class AssetError(Exception):
    """Base exception for asset operations."""

    pass


class ValidationError(AssetError):
    """Raised when required input is missing or malformed."""

    pass


class InvalidArgumentError(AssetError):
    """Raised when an asset identifier is not a positive integer."""

    pass


class NotFoundError(AssetError):
    """Raised when no asset matches the requested identifier."""

    pass


class StorageError(AssetError):
    """Raised when the database connection or a query fails."""

    pass
