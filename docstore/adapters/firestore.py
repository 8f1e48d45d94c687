"""Firestore adapter implementing the document store port.

Every call is a single pass-through to the Firestore client (``add`` makes two).
Client results are returned unchanged; client failures are translated into the
exceptions from :mod:`docstore.core.exceptions` with the client error chained.
"""

# pylint: disable=too-many-arguments

from __future__ import annotations

from types import TracebackType
from typing import Any, Optional, Sequence

import firebase_admin
from firebase_admin import firestore as firebase_firestore
from google.api_core.exceptions import GoogleAPIError, PermissionDenied
from google.auth.exceptions import GoogleAuthError
from google.cloud.firestore import Client, DocumentReference, DocumentSnapshot

from docstore.core.exceptions import (
    DocumentNotFoundError,
    DocumentsNotRetrievableError,
    ForbiddenError,
    InvalidDocumentIdError,
    StoreInitializationError,
    StoreOperationError,
)
from docstore.core.logging import get_logger
from docstore.core.models import (
    ARRAY_CONTAINS,
    Direction,
    DocumentData,
    FieldValue,
    Predicate,
)
from docstore.core.ports import DocumentStorePort

logger = get_logger(__name__)

DEFAULT_APP_NAME = "[DEFAULT]"

# Client failures: service errors plus local payload and predicate checks.
_CLIENT_ERRORS = (GoogleAPIError, ValueError, TypeError)


def validate_document_id(document_id: str) -> str:
    """Return ``document_id`` or raise if it cannot address a document."""
    cleaned = str(document_id).strip()
    if not cleaned:
        raise InvalidDocumentIdError("Document id must be non-empty")
    if "/" in cleaned:
        raise InvalidDocumentIdError(f"Document id '{cleaned}' must not contain '/'")
    return cleaned


class FirestoreDocumentStore(DocumentStorePort):
    """Facade over a Firestore client offering predicate queries and mutations."""

    def __init__(self, client: Client, app: Optional[firebase_admin.App] = None) -> None:
        self._client = client
        self._app = app
        self._closed = False

    @classmethod
    def new(
        cls,
        credential: Any,
        *,
        project_id: str | None = None,
        app_name: str = DEFAULT_APP_NAME,
    ) -> "FirestoreDocumentStore":
        """Build a Firebase app from ``credential`` and wrap its Firestore client.

        Raises:
            StoreInitializationError: if the app or the client cannot be built.
        """
        options = {"projectId": project_id} if project_id else None
        try:
            app = firebase_admin.initialize_app(credential, options, name=app_name)
        except (ValueError, GoogleAuthError) as exc:
            logger.warning("firebase app initialization failed: %s", exc)
            raise StoreInitializationError("error initializing app") from exc

        try:
            client = firebase_firestore.client(app)
        except (ValueError, GoogleAuthError, GoogleAPIError) as exc:
            logger.warning("firestore client creation failed: %s", exc)
            firebase_admin.delete_app(app)
            raise StoreInitializationError("error getting firestore client") from exc

        logger.info("firestore document store ready (app=%s)", app.name)
        return cls(client, app=app)

    @property
    def client(self) -> Client:
        """Return the wrapped Firestore client."""
        return self._client

    # Queries

    def _build_query(
        self,
        collection: str,
        predicates: Sequence[tuple[str, str, FieldValue]] = (),
        *,
        order_field: str | None = None,
        direction: Direction = Direction.ASCENDING,
        limit: int | None = None,
    ) -> Any:
        """Assemble the filtered, ordered, limited query without running it."""
        query: Any = self._client.collection(collection)
        for field, op, value in predicates:
            query = query.where(filter=Predicate(field, op, value).to_filter())
        if order_field is not None:
            query = query.order_by(order_field, direction=Direction(direction).value)
        if limit is not None:
            query = query.limit(limit)
        return query

    def _run_query(
        self,
        collection: str,
        predicates: Sequence[tuple[str, str, FieldValue]] = (),
        *,
        order_field: str | None = None,
        direction: Direction = Direction.ASCENDING,
        limit: int | None = None,
        timeout: float | None = None,
    ) -> list[DocumentSnapshot]:
        logger.debug(
            "querying %s where=%s order_by=%s limit=%s",
            collection,
            [(field, op) for field, op, _ in predicates],
            order_field,
            limit,
        )
        try:
            query = self._build_query(
                collection, predicates, order_field=order_field, direction=direction, limit=limit
            )
            snapshots = list(query.get(timeout=timeout))
        except _CLIENT_ERRORS as exc:
            logger.warning("query against %s failed: %s", collection, exc)
            raise DocumentsNotRetrievableError(collection, str(exc)) from exc

        if not snapshots:
            raise DocumentNotFoundError(collection)
        return snapshots

    def find_one_by_field(
        self,
        collection: str,
        field: str,
        op: str,
        value: FieldValue,
        *,
        timeout: float | None = None,
    ) -> DocumentSnapshot:
        snapshots = self._run_query(collection, [(field, op, value)], limit=1, timeout=timeout)
        return snapshots[0]

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
        snapshots = self._run_query(
            collection,
            [(first_field, first_op, first_value), (second_field, second_op, second_value)],
            limit=1,
            timeout=timeout,
        )
        return snapshots[0]

    def find_all_by_field(
        self,
        collection: str,
        field: str,
        op: str,
        value: FieldValue,
        *,
        timeout: float | None = None,
    ) -> list[DocumentSnapshot]:
        return self._run_query(collection, [(field, op, value)], timeout=timeout)

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
        return self._run_query(
            collection,
            [(first_field, first_op, first_value), (second_field, second_op, second_value)],
            timeout=timeout,
        )

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
        return self._run_query(
            collection,
            [(field, op, value)],
            order_field=order_field,
            direction=direction,
            timeout=timeout,
        )

    def find_from_array(
        self,
        collection: str,
        field: str,
        value: FieldValue,
        *,
        timeout: float | None = None,
    ) -> list[DocumentSnapshot]:
        return self._run_query(collection, [(field, ARRAY_CONTAINS, value)], timeout=timeout)

    def get_all(self, collection: str, *, timeout: float | None = None) -> list[DocumentSnapshot]:
        return self._run_query(collection, timeout=timeout)

    def get_all_by_order(
        self,
        collection: str,
        order_field: str,
        direction: Direction,
        *,
        timeout: float | None = None,
    ) -> list[DocumentSnapshot]:
        return self._run_query(
            collection, order_field=order_field, direction=direction, timeout=timeout
        )

    # References

    def reference(self, collection: str, document_id: str) -> DocumentReference:
        return self._client.collection(collection).document(validate_document_id(document_id))

    def get_by_id(
        self, collection: str, document_id: str, *, timeout: float | None = None
    ) -> DocumentSnapshot:
        ref = self.reference(collection, document_id)
        try:
            snapshot = ref.get(timeout=timeout)
        except _CLIENT_ERRORS as exc:
            logger.warning("reading %s failed: %s", ref.path, exc)
            raise DocumentsNotRetrievableError(collection, str(exc)) from exc
        if not snapshot.exists:
            raise DocumentNotFoundError(collection, f"no document with id '{ref.id}'")
        return snapshot

    # Mutations

    def add(
        self, collection: str, data: DocumentData, *, timeout: float | None = None
    ) -> DocumentSnapshot:
        try:
            _, ref = self._client.collection(collection).add(dict(data), timeout=timeout)
        except _CLIENT_ERRORS as exc:
            raise _operation_error(f"adding document to {collection}", exc) from exc
        logger.info("added document %s", ref.path)

        try:
            return ref.get(timeout=timeout)
        except _CLIENT_ERRORS as exc:
            raise _operation_error(f"getting document snapshot {ref.path}", exc) from exc

    def update(
        self, ref: DocumentReference, data: DocumentData, *, timeout: float | None = None
    ) -> None:
        try:
            ref.set(dict(data), merge=True, timeout=timeout)
        except _CLIENT_ERRORS as exc:
            raise _operation_error(f"updating document {ref.path}", exc) from exc
        logger.info("updated document %s fields=%s", ref.path, sorted(data))

    def delete(self, ref: DocumentReference, *, timeout: float | None = None) -> None:
        try:
            ref.delete(timeout=timeout)
        except _CLIENT_ERRORS as exc:
            raise _operation_error(f"deleting document {ref.path}", exc) from exc
        logger.info("deleted document %s", ref.path)

    # Lifecycle

    def close(self) -> None:
        """Close the client and delete the Firebase app this store created."""
        if self._closed:
            return
        self._closed = True
        try:
            self._client.close()
        finally:
            if self._app is not None:
                firebase_admin.delete_app(self._app)
                logger.info("firebase app %s deleted", self._app.name)

    def __enter__(self) -> "FirestoreDocumentStore":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _operation_error(operation: str, exc: Exception) -> StoreOperationError:
    logger.warning("%s failed: %s", operation, exc)
    if isinstance(exc, PermissionDenied):
        return ForbiddenError(operation, exc)
    return StoreOperationError(operation, exc)


__all__ = ["DEFAULT_APP_NAME", "FirestoreDocumentStore", "validate_document_id"]
