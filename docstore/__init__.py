"""Thin access layer over a Firestore document database."""

from docstore.adapters.firestore import FirestoreDocumentStore
from docstore.bootstrap import build_document_store
from docstore.core.exceptions import (
    DocumentNotFoundError,
    DocumentsNotRetrievableError,
    DocumentStoreError,
    ForbiddenError,
    InvalidDocumentIdError,
    StoreInitializationError,
    StoreOperationError,
)
from docstore.core.models import Direction, Predicate
from docstore.core.ports import DocumentStorePort

__all__ = [
    "Direction",
    "DocumentNotFoundError",
    "DocumentStoreError",
    "DocumentStorePort",
    "DocumentsNotRetrievableError",
    "FirestoreDocumentStore",
    "ForbiddenError",
    "InvalidDocumentIdError",
    "Predicate",
    "StoreInitializationError",
    "StoreOperationError",
    "build_document_store",
]
