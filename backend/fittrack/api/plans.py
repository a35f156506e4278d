"""
Saved Plans API endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, Query

from fittrack.core.logging import get_logger
from fittrack.schemas.plans import PlanResponse, SavePlanRequest
from fittrack.schemas.records import response_fields
from fittrack.api.deps import get_plan_service
from fittrack.services.plans import PlanService

logger = get_logger(__name__)
router = APIRouter()


@router.post("/{user_id}/plans", status_code=201)
async def save_plan(
    user_id: str,
    request: SavePlanRequest,
    service: PlanService = Depends(get_plan_service),
):
    """
    Save a plan; it becomes the user's current plan.
    """
    logger.info("Saving plan", user_id=user_id)
    
    plan_id = await service.save_plan(user_id, request.model_dump(exclude_none=True))
    return {"id": plan_id}


@router.get("/{user_id}/plans", response_model=list[PlanResponse])
async def list_plans(
    user_id: str,
    limit: int = Query(1, ge=1, le=50),
    service: PlanService = Depends(get_plan_service),
):
    """
    Get saved plans, newest first.
    """
    plans = await service.get_user_plans(user_id, limit)
    return [PlanResponse(**response_fields(plan)) for plan in plans]


@router.get("/{user_id}/plans/latest", response_model=PlanResponse)
async def get_latest_plan(
    user_id: str,
    service: PlanService = Depends(get_plan_service),
):
    """
    Get the user's current (most recently saved) plan.
    """
    plan = await service.get_latest_plan(user_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="No plan saved")
    
    return PlanResponse(**response_fields(plan))
