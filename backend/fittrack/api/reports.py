"""
Weekly Reports API endpoints.
"""
from fastapi import APIRouter, Depends, Query

from fittrack.core.logging import get_logger
from fittrack.api.deps import get_report_service
from fittrack.services.reports import WeeklyReportService

logger = get_logger(__name__)
router = APIRouter()


@router.get("/{user_id}/reports")
async def list_reports(
    user_id: str,
    limit: int = Query(4, ge=1, le=52),
    service: WeeklyReportService = Depends(get_report_service),
):
    """
    Get the most recent weekly reports, newest first.
    """
    reports = await service.get_weekly_reports(user_id, limit)
    return [report.model_dump(mode="json", by_alias=True) for report in reports]


@router.post("/{user_id}/reports/weekly", status_code=201)
async def generate_weekly_report(
    user_id: str,
    service: WeeklyReportService = Depends(get_report_service),
):
    """
    Generate a weekly report covering the last seven days.
    """
    logger.info("Generating weekly report", user_id=user_id)
    
    report = await service.generate_weekly_report(user_id)
    return report.model_dump(mode="json", by_alias=True)
