"""
Analytics Engine - Pure aggregation of workouts and meals into a summary.

No I/O happens here. Two entry points update the same summary shape:
- ``compute_summary``: full recompute over a record window (authoritative)
- ``apply_workout`` / ``apply_meal``: fold one new record into an existing
  summary (advisory; used when a record is logged)

Both run the same counters through the same finalize step, so folding
records one at a time ends in the same summary as a full recompute over
those records.
"""
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional

from fittrack.schemas.analytics import (
    AnalyticsSummary,
    CalorieBalance,
    NutritionStats,
    OverallStats,
    WorkoutStats,
)
from fittrack.services.analytics.strategies import (
    NutritionStatsStrategy,
    WorkoutStatsStrategy,
)
from fittrack.services.analytics.strategies.base import most_frequent, safe_average

# Stand-in for "records per day"; no day-level grouping is available
RECORDS_PER_DAY_ESTIMATE = 3


class AnalyticsEngine:
    """
    Builds ``AnalyticsSummary`` documents.

    Usage:
        engine = AnalyticsEngine()
        summary = engine.compute_summary(user_id, workouts, meals)
        summary = engine.apply_workout(summary, user_id, new_workout)
    """

    def __init__(self):
        self.workouts = WorkoutStatsStrategy()
        self.nutrition = NutritionStatsStrategy()

    def compute_summary(
        self,
        user_id: str,
        workouts: Iterable[Mapping[str, Any]],
        meals: Iterable[Mapping[str, Any]],
        now: Optional[datetime] = None,
    ) -> AnalyticsSummary:
        """
        Compute a full summary.

        Args:
            user_id: Owner of the records
            workouts: Raw workout documents
            meals: Raw meal documents
            now: Timestamp for ``lastUpdated`` (defaults to current UTC time)

        Returns:
            AnalyticsSummary over the given records
        """
        workout_stats = self.workouts.compute(workouts)
        nutrition_stats = self.nutrition.compute(meals)

        return AnalyticsSummary(
            user_id=user_id,
            workout_stats=workout_stats,
            nutrition_stats=nutrition_stats,
            overall_stats=self.compute_overall(workout_stats, nutrition_stats),
            last_updated=now or datetime.now(timezone.utc),
        )

    def apply_workout(
        self,
        summary: Optional[AnalyticsSummary],
        user_id: str,
        workout: Mapping[str, Any],
        now: Optional[datetime] = None,
    ) -> AnalyticsSummary:
        """Return a copy of ``summary`` (or a new one) with one more workout."""
        updated = self._copy_or_new(summary, user_id)
        self.workouts.add(updated.workout_stats, workout)
        return self._refresh(updated, now)

    def apply_meal(
        self,
        summary: Optional[AnalyticsSummary],
        user_id: str,
        meal: Mapping[str, Any],
        now: Optional[datetime] = None,
    ) -> AnalyticsSummary:
        """Return a copy of ``summary`` (or a new one) with one more meal."""
        updated = self._copy_or_new(summary, user_id)
        self.nutrition.add(updated.nutrition_stats, meal)
        return self._refresh(updated, now)

    def compute_overall(
        self,
        workout_stats: WorkoutStats,
        nutrition_stats: NutritionStats,
    ) -> OverallStats:
        consumed = nutrition_stats.total_calories
        burned = workout_stats.total_calories_burned

        return OverallStats(
            net_calories=consumed - burned,
            average_daily_calories=safe_average(
                consumed, nutrition_stats.total_meals / RECORDS_PER_DAY_ESTIMATE
            ),
            average_daily_calories_burned=safe_average(
                burned, workout_stats.total_workouts / RECORDS_PER_DAY_ESTIMATE
            ),
            calorie_balance=CalorieBalance(
                deficit=consumed < burned,
                amount=abs(consumed - burned),
            ),
            most_frequent_workout=most_frequent(workout_stats.workout_types),
            most_frequent_meal=most_frequent(nutrition_stats.meal_types),
        )

    def _copy_or_new(self, summary: Optional[AnalyticsSummary], user_id: str) -> AnalyticsSummary:
        if summary is None:
            return AnalyticsSummary(user_id=user_id)
        return summary.model_copy(deep=True)

    def _refresh(self, summary: AnalyticsSummary, now: Optional[datetime]) -> AnalyticsSummary:
        self.workouts.finalize(summary.workout_stats)
        self.nutrition.finalize(summary.nutrition_stats)
        summary.overall_stats = self.compute_overall(
            summary.workout_stats, summary.nutrition_stats
        )
        summary.last_updated = now or datetime.now(timezone.utc)
        return summary


_default_engine = AnalyticsEngine()


def compute_summary(
    user_id: str,
    workouts: Iterable[Mapping[str, Any]],
    meals: Iterable[Mapping[str, Any]],
    now: Optional[datetime] = None,
) -> AnalyticsSummary:
    """Full recompute with the default engine."""
    return _default_engine.compute_summary(user_id, workouts, meals, now=now)


def apply_workout(
    summary: Optional[AnalyticsSummary],
    user_id: str,
    workout: Mapping[str, Any],
    now: Optional[datetime] = None,
) -> AnalyticsSummary:
    return _default_engine.apply_workout(summary, user_id, workout, now=now)


def apply_meal(
    summary: Optional[AnalyticsSummary],
    user_id: str,
    meal: Mapping[str, Any],
    now: Optional[datetime] = None,
) -> AnalyticsSummary:
    return _default_engine.apply_meal(summary, user_id, meal, now=now)
