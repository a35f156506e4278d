"""
Workout statistics strategy.

Counters:
- total workouts, duration (minutes) and calories burned
- frequency of each workout type and intensity
- per-month workouts/duration/calories

Derived:
- average calories and duration per workout
- latest-month trends
"""
from fittrack.schemas.analytics import WorkoutMonth, WorkoutStats, WorkoutTrends
from fittrack.services.analytics.adapter import NormalizedWorkout, RecordAdapter, get_adapter
from fittrack.services.analytics.strategies.base import (
    StatsStrategy,
    calculate_trend,
    increment,
    latest_two,
    safe_average,
    sorted_months,
)


class WorkoutStatsStrategy(StatsStrategy):
    """Statistics over workout records."""

    collection = "workouts"

    def __init__(self):
        self._adapter = get_adapter(self.collection)

    @property
    def adapter(self) -> RecordAdapter:
        return self._adapter

    def empty(self) -> WorkoutStats:
        return WorkoutStats()

    def accumulate(self, stats: WorkoutStats, record: NormalizedWorkout) -> None:
        stats.total_workouts += 1
        stats.total_duration += record.duration
        stats.total_calories_burned += record.calories_burned

        increment(stats.workout_types, record.workout_type)
        increment(stats.intensity_distribution, record.intensity)

        # Undated records count in the totals only
        month = record.month
        if month is None:
            return

        bucket = stats.monthly_stats.get(month)
        if bucket is None:
            bucket = stats.monthly_stats[month] = WorkoutMonth()
        bucket.workouts += 1
        bucket.duration += record.duration
        bucket.calories_burned += record.calories_burned

    def finalize(self, stats: WorkoutStats) -> None:
        stats.average_calories_per_workout = safe_average(
            stats.total_calories_burned, stats.total_workouts
        )
        stats.average_duration = safe_average(stats.total_duration, stats.total_workouts)
        stats.monthly_stats = sorted_months(stats.monthly_stats)
        stats.recent_trends = self._compute_trends(stats)

    def _compute_trends(self, stats: WorkoutStats) -> WorkoutTrends:
        latest = latest_two(stats.monthly_stats)
        if latest is None:
            return WorkoutTrends()

        current, previous = latest
        return WorkoutTrends(
            last_month_workouts=current.workouts,
            workouts_trend=calculate_trend(current.workouts, previous.workouts),
            calories_burned_trend=calculate_trend(
                current.calories_burned, previous.calories_burned
            ),
        )
