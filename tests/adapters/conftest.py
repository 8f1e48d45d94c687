"""In-memory Firestore stand-in shared by the adapter tests."""

from __future__ import annotations

import copy
import itertools
import operator
from datetime import datetime, timezone
from typing import Any, Callable

import pytest

from docstore.adapters.firestore import FirestoreDocumentStore

# pylint: disable=missing-function-docstring,too-few-public-methods


def _contains(stored: Any, value: Any) -> bool:
    return isinstance(stored, list) and value in stored


def _contains_any(stored: Any, values: Any) -> bool:
    return isinstance(stored, list) and any(v in stored for v in values)


_OPS: dict[str, Callable[[Any, Any], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "in": lambda stored, values: stored in values,
    "not-in": lambda stored, values: stored not in values,
    "array_contains": _contains,
    "array_contains_any": _contains_any,
}


class FakeSnapshot:
    """Point-in-time copy of a stored document."""

    def __init__(self, reference: "FakeDocumentReference", data: dict[str, Any] | None) -> None:
        self.reference = reference
        self.id = reference.id
        self._data = copy.deepcopy(data)

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self) -> dict[str, Any] | None:
        return copy.deepcopy(self._data)

    def get(self, field: str) -> Any:
        if self._data is None or field not in self._data:
            raise KeyError(field)
        return self._data[field]


class FakeDocumentReference:
    """Reference addressing ``collection/id`` inside a fake client."""

    def __init__(self, client: "FakeFirestoreClient", collection: str, doc_id: str) -> None:
        self._client = client
        self._collection = collection
        self.id = doc_id
        self.path = f"{collection}/{doc_id}"

    def _docs(self) -> dict[str, dict[str, Any]]:
        return self._client.data.setdefault(self._collection, {})

    def get(self, timeout: float | None = None) -> FakeSnapshot:
        self._client.record("get", timeout)
        return FakeSnapshot(self, self._docs().get(self.id))

    def set(self, data: dict[str, Any], merge: bool = False, timeout: float | None = None) -> None:
        self._client.record("set", timeout)
        docs = self._docs()
        if merge and self.id in docs:
            docs[self.id].update(copy.deepcopy(data))
        else:
            docs[self.id] = copy.deepcopy(data)

    def delete(self, timeout: float | None = None) -> None:
        self._client.record("delete", timeout)
        self._docs().pop(self.id, None)


class FakeQuery:
    """Immutable query chain evaluated against the fake client's data."""

    def __init__(
        self,
        client: "FakeFirestoreClient",
        collection: str,
        filters: tuple[tuple[str, str, Any], ...] = (),
        order: tuple[str, str] | None = None,
        limit_to: int | None = None,
    ) -> None:
        self._client = client
        self._collection = collection
        self._filters = filters
        self._order = order
        self._limit = limit_to

    def _copy(self, **changes: Any) -> "FakeQuery":
        state = {
            "filters": self._filters,
            "order": self._order,
            "limit_to": self._limit,
        }
        state.update(changes)
        return FakeQuery(self._client, self._collection, **state)

    def where(self, *, filter: Any) -> "FakeQuery":  # pylint: disable=redefined-builtin
        if filter.op_string not in _OPS:
            raise ValueError(f"Operator string {filter.op_string!r} is invalid.")
        condition = (filter.field_path, filter.op_string, filter.value)
        return self._copy(filters=self._filters + (condition,))

    def order_by(self, field: str, direction: str = "ASCENDING") -> "FakeQuery":
        return self._copy(order=(field, direction))

    def limit(self, count: int) -> "FakeQuery":
        return self._copy(limit_to=count)

    def get(self, timeout: float | None = None) -> list[FakeSnapshot]:
        self._client.record("query", timeout)
        docs = self._client.data.get(self._collection, {})
        matched = [
            (doc_id, data)
            for doc_id, data in docs.items()
            if all(
                field in data and _OPS[op](data[field], value)
                for field, op, value in self._filters
            )
        ]
        if self._order is not None:
            field, direction = self._order
            matched = [item for item in matched if field in item[1]]
            matched.sort(key=lambda item: item[1][field], reverse=direction == "DESCENDING")
        if self._limit is not None:
            matched = matched[: self._limit]
        return [
            FakeSnapshot(FakeDocumentReference(self._client, self._collection, doc_id), data)
            for doc_id, data in matched
        ]


class FakeCollection(FakeQuery):
    """Collection reference supporting document lookup and inserts."""

    def __init__(self, client: "FakeFirestoreClient", collection: str) -> None:
        super().__init__(client, collection)

    def document(self, doc_id: str) -> FakeDocumentReference:
        return FakeDocumentReference(self._client, self._collection, doc_id)

    def add(
        self, data: dict[str, Any], timeout: float | None = None
    ) -> tuple[datetime, FakeDocumentReference]:
        self._client.record("add", timeout)
        doc_id = f"doc{next(self._client.ids)}"
        self._client.data.setdefault(self._collection, {})[doc_id] = copy.deepcopy(data)
        return datetime.now(timezone.utc), self.document(doc_id)


class FakeFirestoreClient:
    """Minimal Firestore client double with failure injection.

    ``failures`` maps a call kind (``query``, ``get``, ``add``, ``set``,
    ``delete``) to the exception the next such call raises.
    """

    def __init__(self) -> None:
        self.data: dict[str, dict[str, dict[str, Any]]] = {}
        self.failures: dict[str, Exception] = {}
        self.calls: list[tuple[str, float | None]] = []
        self.ids = itertools.count(1)
        self.closed = False

    def record(self, kind: str, timeout: float | None) -> None:
        self.calls.append((kind, timeout))
        failure = self.failures.get(kind)
        if failure is not None:
            raise failure

    def collection(self, name: str) -> FakeCollection:
        return FakeCollection(self, name)

    def close(self) -> None:
        self.closed = True


@pytest.fixture(name="fake_client")
def _fake_client() -> FakeFirestoreClient:
    return FakeFirestoreClient()


@pytest.fixture(name="store")
def _store(fake_client: FakeFirestoreClient) -> FirestoreDocumentStore:
    return FirestoreDocumentStore(fake_client)  # type: ignore[arg-type]


@pytest.fixture(name="users")
def _users(fake_client: FakeFirestoreClient) -> dict[str, dict[str, Any]]:
    """Seed the ``users`` collection with two documents."""
    fake_client.data["users"] = {
        "u1": {"name": "a", "age": 30, "tags": ["admin", "ops"], "active": True},
        "u2": {"name": "b", "age": 25, "tags": ["ops"], "active": True},
    }
    return fake_client.data["users"]
