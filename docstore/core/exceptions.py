"""Core exception types shared across layers."""

from __future__ import annotations


class DocumentStoreError(Exception):
    """Base class for every error raised by the document store."""


class StoreInitializationError(DocumentStoreError):
    """Raised when the Firebase app or Firestore client cannot be built."""


class DocumentsNotRetrievableError(DocumentStoreError):
    """Raised when a query call itself fails (transport, predicate, service)."""

    def __init__(self, collection: str, detail: str | None = None) -> None:
        message = f"error getting documents snapshots from '{collection}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.collection = collection


class DocumentNotFoundError(DocumentStoreError):
    """Raised when a query succeeds but matches no documents."""

    def __init__(self, collection: str, detail: str | None = None) -> None:
        message = f"document not found in '{collection}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.collection = collection


class StoreOperationError(DocumentStoreError):
    """Raised when an insert, update, or delete call fails."""

    def __init__(self, operation: str, cause: BaseException | None = None) -> None:
        message = operation if cause is None else f"{operation}: {cause}"
        super().__init__(message)
        self.operation = operation


class ForbiddenError(StoreOperationError):
    """Raised when the service refuses a mutation under its access rules."""


class InvalidDocumentIdError(DocumentStoreError, ValueError):
    """Raised when a document id is not in its proper form."""


__all__ = [
    "DocumentStoreError",
    "StoreInitializationError",
    "DocumentsNotRetrievableError",
    "DocumentNotFoundError",
    "StoreOperationError",
    "ForbiddenError",
    "InvalidDocumentIdError",
]
