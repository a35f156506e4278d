"""
Analytics API endpoints.
"""
from fastapi import APIRouter, Depends

from fittrack.core.logging import get_logger
from fittrack.api.deps import get_calculator
from fittrack.services.analytics import AnalyticsCalculator

logger = get_logger(__name__)
router = APIRouter()


@router.get("/{user_id}/analytics")
async def get_analytics(
    user_id: str,
    calculator: AnalyticsCalculator = Depends(get_calculator),
):
    """
    Get the user's analytics summary.
    
    Computed and stored on first access; afterwards the stored summary is
    returned until the next recalculation.
    """
    summary = await calculator.get_summary(user_id)
    return summary.to_document()


@router.post("/{user_id}/analytics/recalculate")
async def recalculate_analytics(
    user_id: str,
    calculator: AnalyticsCalculator = Depends(get_calculator),
):
    """
    Recompute the user's analytics summary from their recent records.
    """
    logger.info("Recalculating analytics", user_id=user_id)
    
    summary = await calculator.recalculate(user_id)
    return summary.to_document()
