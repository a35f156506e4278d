"""
Weekly Reports - Per-user totals over the last reporting window.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, List, Mapping, Optional

from fittrack.core.config import settings
from fittrack.core.exceptions import StoreError
from fittrack.core.logging import get_logger, track_operation
from fittrack.schemas.reports import WeeklyReport, WeeklyStats
from fittrack.services.analytics.adapter import get_adapter
from fittrack.services.documents import MEALS, REPORTS, WORKOUTS, DocumentStore, query_recent

logger = get_logger(__name__)

WEEKLY = "weekly"


def compute_weekly_stats(
    workouts: Iterable[Mapping[str, Any]],
    meals: Iterable[Mapping[str, Any]],
    start: datetime,
    end: datetime,
) -> WeeklyStats:
    """
    Totals over one window.

    Fields are read through the same adapters as the analytics summary.
    Macro averages are per meal and 0 when no meals were logged.
    """
    workouts = [get_adapter(WORKOUTS).normalize(w) for w in workouts]
    meals = [get_adapter(MEALS).normalize(m) for m in meals]

    total_protein = sum(m.protein for m in meals)
    total_carbs = sum(m.carbs for m in meals)
    total_fat = sum(m.fat for m in meals)

    stats = WeeklyStats(
        workouts=len(workouts),
        total_workout_duration=sum(w.duration for w in workouts),
        total_calories_burned=sum(w.calories_burned for w in workouts),
        meals=len(meals),
        total_calories_consumed=sum(m.calories for m in meals),
        start_date=start,
        end_date=end,
    )

    if meals:
        stats.average_protein = total_protein / len(meals)
        stats.average_carbs = total_carbs / len(meals)
        stats.average_fat = total_fat / len(meals)

    return stats


class WeeklyReportService:
    """
    Generates and lists weekly reports.

    Usage:
        service = WeeklyReportService(store)
        report = await service.generate_weekly_report(user_id)
        reports = await service.get_weekly_reports(user_id)
    """

    def __init__(self, store: DocumentStore, window_days: Optional[int] = None):
        self.store = store
        self.window_days = window_days or settings.WEEKLY_REPORT_DAYS

    async def generate_weekly_report(
        self,
        user_id: str,
        now: Optional[datetime] = None,
    ) -> WeeklyReport:
        """
        Compute and store the report for the window ending at ``now``.

        Args:
            user_id: Owner of the records
            now: End of the window (defaults to current UTC time)

        Returns:
            The stored WeeklyReport
        """
        end = now or datetime.now(timezone.utc)
        start = end - timedelta(days=self.window_days)

        with track_operation(logger, "generate_weekly_report", user_id=user_id) as op:
            workouts = await self.store.query(
                WORKOUTS, user_id, ordered=False, since=start, until=end
            )
            meals = await self.store.query(
                MEALS, user_id, ordered=False, since=start, until=end
            )

            stats = compute_weekly_stats(workouts, meals, start, end)
            document = {
                "userId": user_id,
                "type": WEEKLY,
                "stats": stats.model_dump(mode="json", by_alias=True),
            }
            report_id = await self.store.add(REPORTS, document)

            op.add(report_id=report_id, workouts=stats.workouts, meals=stats.meals)

        stored = await self.store.get(REPORTS, report_id)
        return WeeklyReport.model_validate(stored or {**document, "id": report_id})

    async def generate_weekly_reports(
        self,
        user_ids: Iterable[str],
        now: Optional[datetime] = None,
    ) -> List[WeeklyReport]:
        """
        Generate reports for several users.

        A store failure for one user is logged and skipped.
        """
        end = now or datetime.now(timezone.utc)
        reports = []

        for user_id in user_ids:
            try:
                reports.append(await self.generate_weekly_report(user_id, now=end))
            except StoreError as e:
                logger.error(
                    "Failed to generate weekly report",
                    user_id=user_id,
                    error=str(e),
                )

        logger.info("Weekly report generation completed", generated=len(reports))
        return reports

    async def get_weekly_reports(
        self,
        user_id: str,
        limit: Optional[int] = None,
    ) -> List[WeeklyReport]:
        """Most recent weekly reports, newest first."""
        documents = await query_recent(
            self.store,
            REPORTS,
            user_id,
            limit or settings.REPORTS_DEFAULT_LIMIT,
            filters={"type": WEEKLY},
        )
        return [WeeklyReport.model_validate(doc) for doc in documents]
