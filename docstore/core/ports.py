"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis,too-many-arguments

from __future__ import annotations

from typing import Protocol

from google.cloud.firestore import DocumentReference, DocumentSnapshot

from docstore.core.models import Direction, DocumentData, FieldValue


class DocumentStorePort(Protocol):
    """Port exposing predicate queries and reference-based mutations."""

    def find_one_by_field(
        self,
        collection: str,
        field: str,
        op: str,
        value: FieldValue,
        *,
        timeout: float | None = None,
    ) -> DocumentSnapshot:
        """Return the first document matching ``field op value``."""
        ...

    def find_one_by_two_fields(
        self,
        collection: str,
        first_field: str,
        first_op: str,
        first_value: FieldValue,
        second_field: str,
        second_op: str,
        second_value: FieldValue,
        *,
        timeout: float | None = None,
    ) -> DocumentSnapshot:
        """Return the first document matching both predicates."""
        ...

    def find_all_by_field(
        self,
        collection: str,
        field: str,
        op: str,
        value: FieldValue,
        *,
        timeout: float | None = None,
    ) -> list[DocumentSnapshot]:
        """Return every document matching ``field op value``."""
        ...

    def find_all_by_two_fields(
        self,
        collection: str,
        first_field: str,
        first_op: str,
        first_value: FieldValue,
        second_field: str,
        second_op: str,
        second_value: FieldValue,
        *,
        timeout: float | None = None,
    ) -> list[DocumentSnapshot]:
        """Return every document matching both predicates."""
        ...

    def find_all_by_field_and_order(
        self,
        collection: str,
        field: str,
        op: str,
        value: FieldValue,
        order_field: str,
        direction: Direction,
        *,
        timeout: float | None = None,
    ) -> list[DocumentSnapshot]:
        """Return matching documents sorted by ``order_field``."""
        ...

    def find_from_array(
        self,
        collection: str,
        field: str,
        value: FieldValue,
        *,
        timeout: float | None = None,
    ) -> list[DocumentSnapshot]:
        """Return documents whose array ``field`` contains ``value``."""
        ...

    def get_all(self, collection: str, *, timeout: float | None = None) -> list[DocumentSnapshot]:
        """Return every document in ``collection``."""
        ...

    def get_all_by_order(
        self,
        collection: str,
        order_field: str,
        direction: Direction,
        *,
        timeout: float | None = None,
    ) -> list[DocumentSnapshot]:
        """Return every document in ``collection`` sorted by ``order_field``."""
        ...

    def get_by_id(
        self, collection: str, document_id: str, *, timeout: float | None = None
    ) -> DocumentSnapshot:
        """Return the document stored under ``document_id``."""
        ...

    def reference(self, collection: str, document_id: str) -> DocumentReference:
        """Return a reference addressing ``collection/document_id``."""
        ...

    def add(
        self, collection: str, data: DocumentData, *, timeout: float | None = None
    ) -> DocumentSnapshot:
        """Insert ``data`` as a new document and return its committed snapshot."""
        ...

    def update(
        self, ref: DocumentReference, data: DocumentData, *, timeout: float | None = None
    ) -> None:
        """Merge ``data`` onto the document addressed by ``ref``."""
        ...

    def delete(self, ref: DocumentReference, *, timeout: float | None = None) -> None:
        """Remove the document addressed by ``ref``."""
        ...

    def close(self) -> None:
        """Release the underlying client."""
        ...


__all__ = ["DocumentStorePort"]
