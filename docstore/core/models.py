"""Query building blocks: directions, operators, and field predicates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Mapping, Sequence, Union

from google.cloud.firestore import DocumentReference, GeoPoint
from google.cloud.firestore_v1.base_query import FieldFilter

# Scalar values Firestore can store and compare against.
FieldScalar = Union[str, int, float, bool, None, bytes, datetime, DocumentReference, GeoPoint]
FieldValue = Union[FieldScalar, Sequence[FieldScalar], Mapping[str, FieldScalar]]

# Document payloads handed to add/update.
DocumentData = Mapping[str, FieldValue]

ARRAY_CONTAINS = "array_contains"
ARRAY_CONTAINS_ANY = "array_contains_any"

SUPPORTED_OPERATORS = frozenset(
    {
        "<",
        "<=",
        "==",
        "!=",
        ">=",
        ">",
        "in",
        "not-in",
        ARRAY_CONTAINS,
        ARRAY_CONTAINS_ANY,
    }
)


class Direction(str, Enum):
    """Sort directions understood by the Firestore client."""

    ASCENDING = "ASCENDING"
    DESCENDING = "DESCENDING"


@dataclass(frozen=True)
class Predicate:
    """A single ``field op value`` filter condition."""

    field: str
    op: str
    value: FieldValue

    def __post_init__(self) -> None:
        if not self.field:
            raise ValueError("predicate field must be non-empty")
        if self.op not in SUPPORTED_OPERATORS:
            raise ValueError(f"unsupported operator: {self.op!r}")

    def to_filter(self) -> FieldFilter:
        """Return the client-side filter object for this predicate."""
        return FieldFilter(self.field, self.op, self.value)


__all__ = [
    "ARRAY_CONTAINS",
    "ARRAY_CONTAINS_ANY",
    "SUPPORTED_OPERATORS",
    "Direction",
    "DocumentData",
    "FieldScalar",
    "FieldValue",
    "Predicate",
]
