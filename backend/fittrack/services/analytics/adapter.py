"""
Record Adapters - Normalize raw workout and meal documents.

Documents arrive from the store with loosely typed fields:
- ``createdAt`` as a store timestamp wrapper ({"seconds": ...}), an ISO
  string, epoch milliseconds or a datetime
- numeric fields as numbers, numeric strings, or missing
- category fields missing entirely

Adapters never raise on malformed input; unparseable values degrade to
``None`` (dates) or 0 (numbers).
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from fittrack.core.logging import get_logger
from fittrack.core.normalize import month_key, normalize_timestamp, to_number

logger = get_logger(__name__)

UNKNOWN_TYPE = "unknown"
DEFAULT_INTENSITY = "medium"


def _category(value: Any, default: str) -> str:
    if value is None or value == "":
        return default
    return str(value)


# ========================================
# Normalized Records
# ========================================

@dataclass
class NormalizedWorkout:
    """Workout after field normalization."""
    workout_type: str
    duration: float = 0
    calories_burned: float = 0
    intensity: str = DEFAULT_INTENSITY
    timestamp: Optional[datetime] = None
    record_id: Optional[str] = None

    @property
    def month(self) -> Optional[str]:
        return month_key(self.timestamp) if self.timestamp else None


@dataclass
class NormalizedMeal:
    """Meal after field normalization."""
    meal_type: str
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    name: Optional[str] = None
    timestamp: Optional[datetime] = None
    record_id: Optional[str] = None

    @property
    def month(self) -> Optional[str]:
        return month_key(self.timestamp) if self.timestamp else None


# ========================================
# Adapters
# ========================================

class RecordAdapter(ABC):
    """Abstract base class for record adapters."""

    record_kind: str = "unknown"

    @abstractmethod
    def normalize(self, raw_data: Mapping[str, Any]) -> Any:
        """
        Normalize a raw document.

        Args:
            raw_data: Document as returned by the store

        Returns:
            Normalized record
        """
        pass

    def _timestamp(self, raw_data: Mapping[str, Any]) -> Optional[datetime]:
        timestamp = normalize_timestamp(raw_data.get("createdAt"))
        if timestamp is None:
            logger.debug(
                "Record has no resolvable timestamp",
                record_kind=self.record_kind,
                record_id=raw_data.get("id"),
            )
        return timestamp


class WorkoutAdapter(RecordAdapter):
    """Adapter for workout documents."""

    record_kind = "workout"

    def normalize(self, raw_data: Mapping[str, Any]) -> NormalizedWorkout:
        return NormalizedWorkout(
            workout_type=_category(raw_data.get("type"), UNKNOWN_TYPE),
            duration=self._extract_duration(raw_data),
            calories_burned=to_number(raw_data.get("caloriesBurned")),
            intensity=_category(raw_data.get("intensity"), DEFAULT_INTENSITY),
            timestamp=self._timestamp(raw_data),
            record_id=raw_data.get("id"),
        )

    def _extract_duration(self, raw_data: Mapping[str, Any]) -> float:
        """Duration in minutes."""
        for key in ("duration", "durationMinutes"):
            if raw_data.get(key) is not None:
                return to_number(raw_data[key])
        return 0


class MealAdapter(RecordAdapter):
    """Adapter for meal documents."""

    record_kind = "meal"

    def normalize(self, raw_data: Mapping[str, Any]) -> NormalizedMeal:
        return NormalizedMeal(
            meal_type=_category(raw_data.get("type"), UNKNOWN_TYPE),
            calories=to_number(raw_data.get("calories")),
            protein=to_number(raw_data.get("protein")),
            carbs=to_number(raw_data.get("carbs")),
            fat=to_number(raw_data.get("fat")),
            name=raw_data.get("name"),
            timestamp=self._timestamp(raw_data),
            record_id=raw_data.get("id"),
        )


_ADAPTERS: Dict[str, RecordAdapter] = {
    "workouts": WorkoutAdapter(),
    "meals": MealAdapter(),
}


def get_adapter(collection: str) -> RecordAdapter:
    """
    Get the adapter for a record collection.

    Args:
        collection: "workouts" or "meals"

    Returns:
        RecordAdapter instance
    """
    adapter = _ADAPTERS.get(collection)
    if adapter is None:
        raise ValueError(f"No adapter for collection: {collection}")
    return adapter
