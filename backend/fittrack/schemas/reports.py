"""
Weekly report schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from fittrack.schemas.analytics import CamelModel


class WeeklyStats(CamelModel):
    """Totals for one user over one reporting window."""
    workouts: int = 0
    total_workout_duration: float = 0
    total_calories_burned: float = 0
    meals: int = 0
    total_calories_consumed: float = 0
    average_protein: float = 0
    average_carbs: float = 0
    average_fat: float = 0
    start_date: datetime
    end_date: datetime


class WeeklyReport(CamelModel):
    id: Optional[str] = None
    user_id: str
    type: str = "weekly"
    stats: WeeklyStats
    created_at: Optional[datetime] = Field(None, description="Set by the store")
