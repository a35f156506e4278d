"""
Workout and Meal Records API endpoints.
"""
from typing import Any

from fastapi import APIRouter, Depends, Query

from fittrack.core.logging import get_logger
from fittrack.schemas.records import (
    CreateMealRequest,
    CreateWorkoutRequest,
    CreatedResponse,
    RecordResponse,
    record_payload,
    response_fields,
)
from fittrack.api.deps import get_record_service
from fittrack.services.records import RecordService

logger = get_logger(__name__)
router = APIRouter()


def _to_response(document: dict[str, Any]) -> RecordResponse:
    return RecordResponse(**response_fields(document))


# ========================================
# Workouts
# ========================================

@router.post("/{user_id}/workouts", response_model=CreatedResponse, status_code=201)
async def create_workout(
    user_id: str,
    request: CreateWorkoutRequest,
    service: RecordService = Depends(get_record_service),
):
    """
    Log a workout and fold it into the user's analytics.
    """
    logger.info("Logging workout", user_id=user_id, workout_type=request.type)
    
    record_id, analytics_updated = await service.log_workout(user_id, record_payload(request))
    
    return CreatedResponse(id=record_id, analyticsUpdated=analytics_updated)


@router.get("/{user_id}/workouts", response_model=list[RecordResponse])
async def list_workouts(
    user_id: str,
    limit: int = Query(10, ge=1, le=500),
    service: RecordService = Depends(get_record_service),
):
    """
    Get the most recent workouts, newest first.
    """
    workouts = await service.get_user_workouts(user_id, limit)
    return [_to_response(workout) for workout in workouts]


# ========================================
# Meals
# ========================================

@router.post("/{user_id}/meals", response_model=CreatedResponse, status_code=201)
async def create_meal(
    user_id: str,
    request: CreateMealRequest,
    service: RecordService = Depends(get_record_service),
):
    """
    Log a meal and fold it into the user's analytics.
    """
    logger.info("Logging meal", user_id=user_id, meal_type=request.type)
    
    record_id, analytics_updated = await service.log_meal(user_id, record_payload(request))
    
    return CreatedResponse(id=record_id, analyticsUpdated=analytics_updated)


@router.get("/{user_id}/meals", response_model=list[RecordResponse])
async def list_meals(
    user_id: str,
    limit: int = Query(10, ge=1, le=500),
    service: RecordService = Depends(get_record_service),
):
    """
    Get the most recent meals, newest first.
    """
    meals = await service.get_user_meals(user_id, limit)
    return [_to_response(meal) for meal in meals]
