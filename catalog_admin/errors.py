"""Error taxonomy for catalog operations."""

from typing import List, Optional


class CatalogAdminError(Exception):
    """Base class for catalog admin errors.

    The orchestrator attaches ``product_id`` and ``log`` when an operation
    stops part way, so callers can inspect the partially written state.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.product_id: Optional[str] = None
        self.log = None

    def __str__(self) -> str:
        return self.message


class ValidationError(CatalogAdminError):
    """Raised before any write when the payload or an axis is invalid."""

    def __init__(self, issues: List[str]):
        self.issues = list(issues)
        super().__init__("Validation failed: " + "; ".join(self.issues))


class UploadError(CatalogAdminError):
    """Raised when object storage rejects a file."""

    def __init__(self, file_name: str, reason: str):
        self.file_name = file_name
        super().__init__(f"Upload of {file_name} failed: {reason}")


class PersistenceError(CatalogAdminError):
    """Raised when a row operation against the relational store fails."""

    def __init__(self, table: str, operation: str, reason: str):
        self.table = table
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation} on {table} failed: {reason}")


class DuplicateLinerCodeError(PersistenceError):
    """The product liner code is already taken by another product."""

    def __init__(self, code_liner: Optional[str], reason: str):
        self.code_liner = code_liner
        super().__init__('products', 'write', reason)
        self.message = f"Liner code {code_liner!r} is already registered"


class ProductNotFoundError(PersistenceError):
    """The requested row does not exist."""

    def __init__(self, table: str, row_id: str):
        self.row_id = row_id
        super().__init__(table, 'lookup', f"no row with id {row_id}")
