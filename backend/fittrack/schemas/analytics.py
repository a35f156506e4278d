"""
Analytics summary schemas.

The summary is persisted and served with camelCase keys
(``model_dump(by_alias=True)``); Python code uses the snake_case names.
"""
from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase document keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ========================================
# Workouts
# ========================================

class WorkoutMonth(CamelModel):
    """Monthly workout bucket."""
    workouts: int = 0
    duration: float = 0
    calories_burned: float = 0


class WorkoutTrends(CamelModel):
    """Latest month compared with the month before it."""
    last_month_workouts: int = 0
    workouts_trend: float = 0
    calories_burned_trend: float = 0


class WorkoutStats(CamelModel):
    total_workouts: int = 0
    total_duration: float = 0
    total_calories_burned: float = 0
    workout_types: Dict[str, int] = Field(default_factory=dict)
    intensity_distribution: Dict[str, int] = Field(default_factory=dict)
    average_calories_per_workout: float = 0
    average_duration: float = 0
    monthly_stats: Dict[str, WorkoutMonth] = Field(default_factory=dict)
    recent_trends: WorkoutTrends = Field(default_factory=WorkoutTrends)


# ========================================
# Nutrition
# ========================================

class NutritionMonth(CamelModel):
    """Monthly meal bucket."""
    meals: int = 0
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0


class MacroPercentages(CamelModel):
    """Macro split by weight, in whole percent."""
    protein: int = 0
    carbs: int = 0
    fat: int = 0


class NutritionTrends(CamelModel):
    last_month_meals: int = 0
    calories_trend: float = 0
    protein_trend: float = 0


class NutritionStats(CamelModel):
    total_meals: int = 0
    total_calories: float = 0
    total_protein: float = 0
    total_carbs: float = 0
    total_fat: float = 0
    meal_types: Dict[str, int] = Field(default_factory=dict)
    average_calories_per_meal: float = 0
    macros_percentage: MacroPercentages = Field(default_factory=MacroPercentages)
    monthly_stats: Dict[str, NutritionMonth] = Field(default_factory=dict)
    recent_trends: NutritionTrends = Field(default_factory=NutritionTrends)


# ========================================
# Overall
# ========================================

class CalorieBalance(CamelModel):
    deficit: bool = False  # consumed < burned
    amount: float = 0


class OverallStats(CamelModel):
    net_calories: float = 0
    # Heuristic: assumes 3 meals (or 3 workouts) per "day"
    average_daily_calories: float = 0
    average_daily_calories_burned: float = 0
    calorie_balance: CalorieBalance = Field(default_factory=CalorieBalance)
    most_frequent_workout: str = "None"
    most_frequent_meal: str = "None"


class AnalyticsSummary(CamelModel):
    """Denormalized per-user analytics document."""
    user_id: str
    workout_stats: WorkoutStats = Field(default_factory=WorkoutStats)
    nutrition_stats: NutritionStats = Field(default_factory=NutritionStats)
    overall_stats: OverallStats = Field(default_factory=OverallStats)
    last_updated: Optional[datetime] = None
    
    def to_document(self) -> dict:
        """Serialize to the JSON-safe persisted shape."""
        return self.model_dump(mode="json", by_alias=True)
    
    @classmethod
    def from_document(cls, data: dict) -> "AnalyticsSummary":
        """Load a persisted document; missing sections take their zero defaults."""
        return cls.model_validate(data)
