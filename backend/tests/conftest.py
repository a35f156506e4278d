"""
Shared fixtures: an in-memory document store double and record builders.
"""
import itertools
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

import pytest

from fittrack.core.exceptions import StorageUnavailableError, UnsupportedQueryError
from fittrack.core.normalize import normalize_timestamp
from fittrack.services.documents import ANALYTICS, DocumentStore, sort_newest_first


class FakeDocumentStore(DocumentStore):
    """
    In-memory DocumentStore.

    Args:
        reject_ordered: raise UnsupportedQueryError on ordered queries
        fail_on: operation names ("query", "get", "set", "add") that raise
            StorageUnavailableError
    """

    def __init__(self, reject_ordered: bool = False, fail_on: Optional[set] = None):
        self.collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.reject_ordered = reject_ordered
        self.fail_on = set(fail_on or ())
        self.calls: List[tuple] = []
        self.now = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
        self._ids = itertools.count(1)

    def _check(self, operation: str, collection: str) -> None:
        if operation in self.fail_on:
            raise StorageUnavailableError(operation, collection, "store offline")

    def insert(self, collection: str, document: Dict[str, Any]) -> str:
        """Seed a document as-is (keeps its createdAt)."""
        doc_id = document.get("id") or f"{collection}-{next(self._ids)}"
        self.collections.setdefault(collection, {})[doc_id] = {**document, "id": doc_id}
        return doc_id

    async def query(
        self,
        collection: str,
        user_id: str,
        *,
        ordered: bool = True,
        limit: Optional[int] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
        filters: Optional[Mapping[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        self.calls.append(("query", collection, ordered, limit))
        self._check("query", collection)
        if ordered and self.reject_ordered:
            raise UnsupportedQueryError("The query requires an index")

        documents = []
        for doc in self.collections.get(collection, {}).values():
            if doc.get("userId") != user_id:
                continue
            created = normalize_timestamp(doc.get("createdAt"))
            if since is not None and (created is None or created < since):
                continue
            if until is not None and (created is None or created > until):
                continue
            if any(doc.get(key) != value for key, value in (filters or {}).items()):
                continue
            documents.append(dict(doc))

        if ordered:
            documents = sort_newest_first(documents)
        if limit is not None:
            documents = documents[:limit]
        return documents

    async def get(self, collection: str, key: str) -> Optional[Dict[str, Any]]:
        self.calls.append(("get", collection, key))
        self._check("get", collection)
        doc = self.collections.get(collection, {}).get(key)
        return dict(doc) if doc is not None else None

    async def set(self, collection: str, key: str, data: Dict[str, Any]) -> None:
        self.calls.append(("set", collection, key))
        self._check("set", collection)
        stored = dict(data)
        if collection != ANALYTICS:
            stored["id"] = key
        self.collections.setdefault(collection, {})[key] = stored

    async def add(self, collection: str, data: Dict[str, Any]) -> str:
        self.calls.append(("add", collection))
        self._check("add", collection)
        doc_id = f"{collection}-{next(self._ids)}"
        self.collections.setdefault(collection, {})[doc_id] = {
            **data,
            "id": doc_id,
            "createdAt": self.now,
        }
        return doc_id


def make_workout(
    created_at: Any = "2024-01-15T10:00:00Z",
    type: Optional[str] = "running",
    duration: Any = 30,
    calories: Any = 200,
    intensity: Optional[str] = None,
    user_id: str = "user-1",
) -> Dict[str, Any]:
    workout = {"userId": user_id, "createdAt": created_at, "duration": duration}
    if type is not None:
        workout["type"] = type
    if calories is not None:
        workout["caloriesBurned"] = calories
    if intensity is not None:
        workout["intensity"] = intensity
    return workout


def make_meal(
    created_at: Any = "2024-01-15T12:00:00Z",
    type: Optional[str] = "lunch",
    calories: Any = 500,
    protein: Any = 30,
    carbs: Any = 50,
    fat: Any = 20,
    user_id: str = "user-1",
) -> Dict[str, Any]:
    meal = {
        "userId": user_id,
        "createdAt": created_at,
        "name": "Chicken bowl",
        "calories": calories,
        "protein": protein,
        "carbs": carbs,
        "fat": fat,
    }
    if type is not None:
        meal["type"] = type
    return meal


@pytest.fixture
def store():
    return FakeDocumentStore()


@pytest.fixture
def unordered_store():
    """Store that rejects ordered queries, like a store missing an index."""
    return FakeDocumentStore(reject_ordered=True)
