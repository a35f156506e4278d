"""
Workout and meal request/response schemas.
"""
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from fittrack.core.normalize import normalize_timestamp


class CreateWorkoutRequest(BaseModel):
    """Request to log a workout."""
    model_config = ConfigDict(allow_inf_nan=False)
    
    type: str = Field(..., min_length=1, description="Workout category, e.g. running")
    duration: float = Field(..., ge=0, description="Duration in minutes")
    intensity: Optional[Literal["low", "medium", "high"]] = Field(None, description="Perceived intensity")
    caloriesBurned: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None


class CreateMealRequest(BaseModel):
    """Request to log a meal."""
    model_config = ConfigDict(allow_inf_nan=False)
    
    type: str = Field(..., min_length=1, description="breakfast, lunch, dinner or snack")
    name: str = Field(..., min_length=1)
    calories: float = Field(0, ge=0)
    protein: float = Field(0, ge=0, description="Grams")
    carbs: float = Field(0, ge=0, description="Grams")
    fat: float = Field(0, ge=0, description="Grams")
    notes: Optional[str] = None


class RecordResponse(BaseModel):
    """A stored workout or meal document. ``createdAt`` is epoch milliseconds."""
    model_config = ConfigDict(extra="allow")
    
    id: str
    userId: str
    createdAt: Optional[int] = None
    type: Optional[str] = None


class CreatedResponse(BaseModel):
    id: str
    analyticsUpdated: bool


def record_payload(request: BaseModel) -> dict[str, Any]:
    """Document fields from a create request; unset optionals are omitted."""
    return request.model_dump(exclude_none=True)


def response_fields(document: dict[str, Any]) -> dict[str, Any]:
    """Stored document fields for a response; ``createdAt`` becomes epoch milliseconds."""
    created = normalize_timestamp(document.get("createdAt"))
    return {
        **document,
        "createdAt": int(created.timestamp() * 1000) if created else None,
    }
