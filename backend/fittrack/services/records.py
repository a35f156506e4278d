"""
Record Service - Log and list workouts and meals.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple

from fittrack.core.config import settings
from fittrack.core.exceptions import StoreError
from fittrack.core.logging import get_logger
from fittrack.services.analytics import AnalyticsCalculator
from fittrack.services.documents import MEALS, WORKOUTS, DocumentStore, query_recent

logger = get_logger(__name__)


class RecordService:
    """
    Workout and meal records of a user.

    Logging a record also folds it into the user's analytics summary.
    That update is best-effort: if it fails the record stays logged and
    the next ``recalculate`` picks it up.
    """

    def __init__(self, store: DocumentStore, calculator: Optional[AnalyticsCalculator] = None):
        self.store = store
        self.calculator = calculator or AnalyticsCalculator(store)

    async def log_workout(self, user_id: str, data: Mapping[str, Any]) -> Tuple[str, bool]:
        """
        Log a workout.

        Args:
            user_id: Owner of the record
            data: Workout fields (type, duration, intensity, caloriesBurned, notes)

        Returns:
            (record id, whether the analytics summary was updated)
        """
        return await self._log(WORKOUTS, user_id, data)

    async def log_meal(self, user_id: str, data: Mapping[str, Any]) -> Tuple[str, bool]:
        """
        Log a meal.

        Args:
            user_id: Owner of the record
            data: Meal fields (type, name, calories, protein, carbs, fat, notes)

        Returns:
            (record id, whether the analytics summary was updated)
        """
        return await self._log(MEALS, user_id, data)

    async def get_user_workouts(self, user_id: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Most recent workouts, newest first."""
        return await query_recent(
            self.store, WORKOUTS, user_id, limit or settings.RECORDS_DEFAULT_LIMIT
        )

    async def get_user_meals(self, user_id: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Most recent meals, newest first."""
        return await query_recent(
            self.store, MEALS, user_id, limit or settings.RECORDS_DEFAULT_LIMIT
        )

    async def _log(self, collection: str, user_id: str, data: Mapping[str, Any]) -> Tuple[str, bool]:
        # userId set last so payload fields cannot override the owner
        document = {**data, "userId": user_id}
        record_id = await self.store.add(collection, document)

        logger.info("Record created", collection=collection, record_id=record_id, user_id=user_id)

        analytics_updated = await self._update_analytics(collection, user_id, record_id, document)
        return record_id, analytics_updated

    async def _update_analytics(
        self,
        collection: str,
        user_id: str,
        record_id: str,
        document: Dict[str, Any],
    ) -> bool:
        try:
            # Re-read to pick up the server-assigned createdAt
            stored = await self.store.get(collection, record_id) or {**document, "id": record_id}

            if collection == WORKOUTS:
                await self.calculator.record_workout(user_id, stored)
            else:
                await self.calculator.record_meal(user_id, stored)
        except StoreError as e:
            logger.warning(
                "Failed to update analytics for new record",
                collection=collection,
                record_id=record_id,
                user_id=user_id,
                error=str(e),
            )
            return False

        return True
