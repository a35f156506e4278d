"""
Nutrition statistics strategy.

Macro percentages are by weight (grams), not by calories, and each is
rounded on its own; the three may sum to 99-102.
"""
from fittrack.schemas.analytics import (
    MacroPercentages,
    NutritionMonth,
    NutritionStats,
    NutritionTrends,
)
from fittrack.services.analytics.adapter import NormalizedMeal, RecordAdapter, get_adapter
from fittrack.services.analytics.strategies.base import (
    StatsStrategy,
    calculate_trend,
    increment,
    latest_two,
    round_half_up,
    safe_average,
    sorted_months,
)


class NutritionStatsStrategy(StatsStrategy):
    """Statistics over meal records."""

    collection = "meals"

    def __init__(self):
        self._adapter = get_adapter(self.collection)

    @property
    def adapter(self) -> RecordAdapter:
        return self._adapter

    def empty(self) -> NutritionStats:
        return NutritionStats()

    def accumulate(self, stats: NutritionStats, record: NormalizedMeal) -> None:
        stats.total_meals += 1
        stats.total_calories += record.calories
        stats.total_protein += record.protein
        stats.total_carbs += record.carbs
        stats.total_fat += record.fat

        increment(stats.meal_types, record.meal_type)

        month = record.month
        if month is None:
            return

        bucket = stats.monthly_stats.get(month)
        if bucket is None:
            bucket = stats.monthly_stats[month] = NutritionMonth()
        bucket.meals += 1
        bucket.calories += record.calories
        bucket.protein += record.protein
        bucket.carbs += record.carbs
        bucket.fat += record.fat

    def finalize(self, stats: NutritionStats) -> None:
        stats.average_calories_per_meal = safe_average(stats.total_calories, stats.total_meals)
        stats.macros_percentage = self._compute_macros(stats)
        stats.monthly_stats = sorted_months(stats.monthly_stats)
        stats.recent_trends = self._compute_trends(stats)

    def _compute_macros(self, stats: NutritionStats) -> MacroPercentages:
        total_macros = stats.total_protein + stats.total_carbs + stats.total_fat
        if total_macros <= 0:
            return MacroPercentages()

        return MacroPercentages(
            protein=round_half_up(stats.total_protein / total_macros * 100),
            carbs=round_half_up(stats.total_carbs / total_macros * 100),
            fat=round_half_up(stats.total_fat / total_macros * 100),
        )

    def _compute_trends(self, stats: NutritionStats) -> NutritionTrends:
        latest = latest_two(stats.monthly_stats)
        if latest is None:
            return NutritionTrends()

        current, previous = latest
        return NutritionTrends(
            last_month_meals=current.meals,
            calories_trend=calculate_trend(current.calories, previous.calories),
            protein_trend=calculate_trend(current.protein, previous.protein),
        )
