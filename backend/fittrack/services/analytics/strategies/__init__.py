"""
Collection-specific statistics strategies.

Each strategy keeps running counters for one record collection and
derives averages, trends and percentages from them.
"""
from fittrack.services.analytics.strategies.base import StatsStrategy
from fittrack.services.analytics.strategies.workouts import WorkoutStatsStrategy
from fittrack.services.analytics.strategies.nutrition import NutritionStatsStrategy

__all__ = [
    "StatsStrategy",
    "WorkoutStatsStrategy",
    "NutritionStatsStrategy",
]
