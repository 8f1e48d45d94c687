"""Infrastructure adapter exports."""

from docstore.core.exceptions import (  # noqa: F401
    DocumentNotFoundError,
    DocumentsNotRetrievableError,
    StoreOperationError,
)

from .firestore import FirestoreDocumentStore

__all__ = [
    "FirestoreDocumentStore",
    "DocumentNotFoundError",
    "DocumentsNotRetrievableError",
    "StoreOperationError",
]
