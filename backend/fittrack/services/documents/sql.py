"""
SQL Document Store - DocumentStore backed by SQLAlchemy models.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Type

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.exceptions import StorageUnavailableError
from fittrack.core.logging import get_logger
from fittrack.models import (
    AnalyticsDocument,
    MealRecord,
    Report,
    SavedPlan,
    UserProfile,
    WorkoutRecord,
)
from fittrack.models.record import UserDocumentMixin
from fittrack.services.documents.base import (
    ANALYTICS,
    MEALS,
    PLANS,
    PROFILES,
    REPORTS,
    WORKOUTS,
    DocumentStore,
)

logger = get_logger(__name__)

_RECORD_MODELS: Dict[str, Type[UserDocumentMixin]] = {
    WORKOUTS: WorkoutRecord,
    MEALS: MealRecord,
    REPORTS: Report,
    PROFILES: UserProfile,
    PLANS: SavedPlan,
}

# Keys held in columns rather than in the JSON payload
_COLUMN_KEYS = ("id", "userId", "createdAt")


def _naive_utc(moment: datetime) -> datetime:
    """Columns hold naive UTC datetimes."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def _payload(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if key not in _COLUMN_KEYS}


class SqlDocumentStore(DocumentStore):
    """
    Document store over the relational schema.

    Store failures surface as ``StorageUnavailableError``.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    def _record_model(self, collection: str) -> Type[UserDocumentMixin]:
        model = _RECORD_MODELS.get(collection)
        if model is None:
            raise ValueError(f"Unknown record collection: {collection}")
        return model

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
        model = self._record_model(collection)

        stmt = select(model).where(model.user_id == user_id)
        if since is not None:
            stmt = stmt.where(model.created_at >= _naive_utc(since))
        if until is not None:
            stmt = stmt.where(model.created_at <= _naive_utc(until))
        for field_name, value in (filters or {}).items():
            stmt = stmt.where(model.data[field_name].as_string() == str(value))
        if ordered:
            stmt = stmt.order_by(model.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)

        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            # A failed statement aborts the transaction; clear it so a retry can run
            await self.db.rollback()
            raise StorageUnavailableError("query", collection, str(e)) from e

        return [row.to_dict() for row in result.scalars().all()]

    async def get(self, collection: str, key: str) -> Optional[Dict[str, Any]]:
        model = AnalyticsDocument if collection == ANALYTICS else self._record_model(collection)

        try:
            document = await self.db.get(model, key)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageUnavailableError("get", collection, str(e)) from e

        return document.to_dict() if document else None

    async def set(self, collection: str, key: str, data: Dict[str, Any]) -> None:
        try:
            if collection == ANALYTICS:
                await self._set_analytics(key, data)
            else:
                await self._set_record(collection, key, data)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageUnavailableError("set", collection, str(e)) from e

        logger.debug("Document written", collection=collection, key=key)

    async def _set_analytics(self, user_id: str, data: Dict[str, Any]) -> None:
        payload = _payload(data)
        existing = await self.db.get(AnalyticsDocument, user_id)
        if existing:
            existing.data = payload
        else:
            self.db.add(AnalyticsDocument(user_id=user_id, data=payload))

    async def _set_record(self, collection: str, key: str, data: Dict[str, Any]) -> None:
        model = self._record_model(collection)
        payload = _payload(data)
        existing = await self.db.get(model, key)
        if existing:
            existing.data = payload
            return
        self.db.add(model(id=key, user_id=data["userId"], data=payload))

    async def add(self, collection: str, data: Dict[str, Any]) -> str:
        model = self._record_model(collection)
        document = model(user_id=data["userId"], data=_payload(data))

        try:
            self.db.add(document)
            await self.db.commit()
            await self.db.refresh(document)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageUnavailableError("add", collection, str(e)) from e

        logger.debug("Document created", collection=collection, document_id=document.id)
        return document.id
