from fittrack.schemas.analytics import (
    AnalyticsSummary,
    WorkoutStats,
    NutritionStats,
    OverallStats,
    WorkoutMonth,
    NutritionMonth,
)
from fittrack.schemas.records import CreateWorkoutRequest, CreateMealRequest, RecordResponse
from fittrack.schemas.reports import WeeklyReport, WeeklyStats
from fittrack.schemas.profiles import ProfileRequest, ProfileResponse
from fittrack.schemas.plans import SavePlanRequest, PlanResponse

__all__ = [
    "AnalyticsSummary",
    "WorkoutStats",
    "NutritionStats",
    "OverallStats",
    "WorkoutMonth",
    "NutritionMonth",
    "CreateWorkoutRequest",
    "CreateMealRequest",
    "RecordResponse",
    "WeeklyReport",
    "WeeklyStats",
    "ProfileRequest",
    "ProfileResponse",
    "SavePlanRequest",
    "PlanResponse",
]
