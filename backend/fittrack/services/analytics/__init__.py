"""
Analytics module - Workout and nutrition summary aggregation.

This module provides:
- Record adapters for normalizing raw workout and meal documents
- Statistics strategies for workouts and nutrition
- The pure aggregation engine (full recompute and single-record increments)
- The store-backed calculator used by the API
"""
from fittrack.services.analytics.adapter import (
    NormalizedWorkout,
    NormalizedMeal,
    RecordAdapter,
    WorkoutAdapter,
    MealAdapter,
    get_adapter,
)
from fittrack.services.analytics.engine import (
    AnalyticsEngine,
    compute_summary,
    apply_workout,
    apply_meal,
)
from fittrack.services.analytics.calculator import AnalyticsCalculator

__all__ = [
    # Data structures
    "NormalizedWorkout",
    "NormalizedMeal",
    # Adapters
    "RecordAdapter",
    "WorkoutAdapter",
    "MealAdapter",
    "get_adapter",
    # Engine
    "AnalyticsEngine",
    "compute_summary",
    "apply_workout",
    "apply_meal",
    # Calculator
    "AnalyticsCalculator",
]
