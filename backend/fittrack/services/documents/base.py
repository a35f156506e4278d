"""
Document Store - Collection-oriented storage interface.

Collections:
- workouts, meals, reports, profiles, plans: per-user documents with a
  store-assigned id and server-side ``createdAt``
- analytics: one summary document per user, keyed by user id
"""
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from fittrack.core.exceptions import StoreError
from fittrack.core.logging import get_logger
from fittrack.core.normalize import normalize_timestamp

logger = get_logger(__name__)

WORKOUTS = "workouts"
MEALS = "meals"
ANALYTICS = "analytics"
REPORTS = "reports"
PROFILES = "profiles"
PLANS = "plans"

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class DocumentStore(ABC):
    """Abstract document store used by the services."""

    @abstractmethod
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
        """
        Query documents of one user.

        Args:
            collection: Collection name
            user_id: Owner filter
            ordered: Order by ``createdAt`` descending
            limit: Maximum number of documents
            since: Inclusive lower bound on ``createdAt``
            until: Inclusive upper bound on ``createdAt``
            filters: Equality filters on document fields

        Returns:
            List of documents (each with ``id``, ``userId``, ``createdAt``)

        Raises:
            UnsupportedQueryError: the store cannot serve the ordering
            StorageUnavailableError: the read failed
        """
        pass

    @abstractmethod
    async def get(self, collection: str, key: str) -> Optional[Dict[str, Any]]:
        """Read one document by key, or None if absent."""
        pass

    @abstractmethod
    async def set(self, collection: str, key: str, data: Dict[str, Any]) -> None:
        """Create or fully overwrite one document."""
        pass

    @abstractmethod
    async def add(self, collection: str, data: Dict[str, Any]) -> str:
        """
        Insert a new document; the store assigns ``id`` and ``createdAt``.

        Returns:
            The new document id
        """
        pass


def sort_newest_first(documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Sort by normalized ``createdAt`` descending; undated documents go last."""
    return sorted(
        documents,
        key=lambda doc: normalize_timestamp(doc.get("createdAt")) or _EPOCH,
        reverse=True,
    )


async def query_recent(
    store: DocumentStore,
    collection: str,
    user_id: str,
    limit: int,
    *,
    since: Optional[datetime] = None,
    until: Optional[datetime] = None,
    filters: Optional[Mapping[str, Any]] = None,
) -> List[Dict[str, Any]]:
    """
    Most recent documents of a user, newest first.

    If the store fails the ordered query, the same filter is retried without
    ordering or limit, and the result is sorted and truncated in memory.
    A failure of the retry propagates.
    """
    try:
        documents = await store.query(
            collection,
            user_id,
            ordered=True,
            limit=limit,
            since=since,
            until=until,
            filters=filters,
        )
        logger.debug(
            "Fetched documents",
            collection=collection,
            user_id=user_id,
            count=len(documents),
        )
        return documents
    except StoreError as e:
        logger.warning(
            "Ordered query failed, falling back to unordered query",
            collection=collection,
            user_id=user_id,
            error=str(e),
        )

    documents = await store.query(
        collection,
        user_id,
        ordered=False,
        since=since,
        until=until,
        filters=filters,
    )
    documents = sort_newest_first(documents)[:limit]
    logger.debug(
        "Fetched documents (unordered query)",
        collection=collection,
        user_id=user_id,
        count=len(documents),
    )
    return documents
