"""Catalog admin package.

Materializes product configuration axes into inventory lines and keeps them
consistent across create and edit operations.
"""

from .errors import (
    CatalogAdminError,
    ValidationError,
    UploadError,
    PersistenceError,
    DuplicateLinerCodeError,
    ProductNotFoundError
)
from .processors import PersistenceOrchestrator, materialize, AxisRegistry

__all__ = [
    'CatalogAdminError',
    'ValidationError',
    'UploadError',
    'PersistenceError',
    'DuplicateLinerCodeError',
    'ProductNotFoundError',
    'PersistenceOrchestrator',
    'materialize',
    'AxisRegistry'
]
