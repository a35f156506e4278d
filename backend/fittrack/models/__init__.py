from fittrack.models.record import WorkoutRecord, MealRecord
from fittrack.models.analytics import AnalyticsDocument
from fittrack.models.report import Report
from fittrack.models.profile import UserProfile
from fittrack.models.plan import SavedPlan

__all__ = [
    "WorkoutRecord",
    "MealRecord",
    "AnalyticsDocument",
    "Report",
    "UserProfile",
    "SavedPlan",
]
