"""
Analytics Calculator - Store-backed access to per-user analytics summaries.

Orchestrates:
- Fetching the recent workout and meal window
- Summary computation (AnalyticsEngine)
- Persisting the summary document

Store failures propagate unchanged (``StorageUnavailableError``); no empty
data is substituted.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple

from fittrack.core.config import settings
from fittrack.core.logging import get_logger, track_operation
from fittrack.schemas.analytics import AnalyticsSummary
from fittrack.services.analytics.engine import AnalyticsEngine
from fittrack.services.documents import (
    ANALYTICS,
    MEALS,
    WORKOUTS,
    DocumentStore,
    query_recent,
)

logger = get_logger(__name__)


class AnalyticsCalculator:
    """
    Main analytics access point.

    Usage:
        calculator = AnalyticsCalculator(store)
        summary = await calculator.get_summary(user_id)
        summary = await calculator.recalculate(user_id)
    """

    def __init__(
        self,
        store: DocumentStore,
        engine: Optional[AnalyticsEngine] = None,
        fetch_limit: Optional[int] = None,
    ):
        self.store = store
        self.engine = engine or AnalyticsEngine()
        self.fetch_limit = fetch_limit or settings.ANALYTICS_FETCH_LIMIT

    async def get_summary(self, user_id: str) -> AnalyticsSummary:
        """
        Get the stored summary, computing and storing it if absent.

        A stored summary is returned as-is; it is only guaranteed fresh
        right after ``recalculate``.

        Args:
            user_id: Owner of the summary

        Returns:
            AnalyticsSummary
        """
        existing = await self.load(user_id)

        if existing:
            logger.debug("Using stored analytics summary", user_id=user_id)
            return existing

        logger.info("No analytics summary, computing", user_id=user_id)
        return await self.recalculate(user_id)

    async def recalculate(self, user_id: str) -> AnalyticsSummary:
        """
        Force a full recompute and overwrite the stored summary.

        Args:
            user_id: Owner of the summary

        Returns:
            Newly computed AnalyticsSummary
        """
        with track_operation(logger, "recalculate_analytics", user_id=user_id) as op:
            workouts, meals = await self._fetch_records(user_id)
            summary = self.engine.compute_summary(user_id, workouts, meals)
            await self.save(summary)

            op.add(
                workouts=summary.workout_stats.total_workouts,
                meals=summary.nutrition_stats.total_meals,
                months=len(summary.workout_stats.monthly_stats),
            )

        return summary

    async def record_workout(self, user_id: str, workout: Mapping[str, Any]) -> AnalyticsSummary:
        """
        Fold one newly logged workout into the stored summary.

        Starts from an empty summary if none is stored yet. ``recalculate``
        remains authoritative; this path only keeps the summary current
        between full recomputes.
        """
        summary = self.engine.apply_workout(await self.load(user_id), user_id, workout)
        await self.save(summary)

        logger.debug(
            "Applied workout to analytics",
            user_id=user_id,
            total_workouts=summary.workout_stats.total_workouts,
        )
        return summary

    async def record_meal(self, user_id: str, meal: Mapping[str, Any]) -> AnalyticsSummary:
        """Fold one newly logged meal into the stored summary."""
        summary = self.engine.apply_meal(await self.load(user_id), user_id, meal)
        await self.save(summary)

        logger.debug(
            "Applied meal to analytics",
            user_id=user_id,
            total_meals=summary.nutrition_stats.total_meals,
        )
        return summary

    def compute_only(
        self,
        user_id: str,
        workouts: List[Mapping[str, Any]],
        meals: List[Mapping[str, Any]],
    ) -> AnalyticsSummary:
        """
        Compute a summary without reading or writing the store.

        Useful for previews and one-off calculations.
        """
        return self.engine.compute_summary(user_id, workouts, meals)

    async def load(self, user_id: str) -> Optional[AnalyticsSummary]:
        """Read the stored summary, or None if absent."""
        document = await self.store.get(ANALYTICS, user_id)
        if document is None:
            return None
        return AnalyticsSummary.from_document(document)

    async def save(self, summary: AnalyticsSummary) -> None:
        """Overwrite the stored summary."""
        await self.store.set(ANALYTICS, summary.user_id, summary.to_document())

    async def _fetch_records(
        self,
        user_id: str,
    ) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
        workouts = await query_recent(self.store, WORKOUTS, user_id, self.fetch_limit)
        meals = await query_recent(self.store, MEALS, user_id, self.fetch_limit)
        return workouts, meals
