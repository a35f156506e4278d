"""
Shared API dependencies.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fittrack.core.database import get_db
from fittrack.services.analytics import AnalyticsCalculator
from fittrack.services.documents import DocumentStore, SqlDocumentStore
from fittrack.services.plans import PlanService
from fittrack.services.profiles import ProfileService
from fittrack.services.records import RecordService
from fittrack.services.reports import WeeklyReportService


def get_document_store(db: AsyncSession = Depends(get_db)) -> DocumentStore:
    """Document store for the request's database session."""
    return SqlDocumentStore(db)


def get_calculator(store: DocumentStore = Depends(get_document_store)) -> AnalyticsCalculator:
    return AnalyticsCalculator(store)


def get_record_service(
    store: DocumentStore = Depends(get_document_store),
    calculator: AnalyticsCalculator = Depends(get_calculator),
) -> RecordService:
    return RecordService(store, calculator)


def get_report_service(store: DocumentStore = Depends(get_document_store)) -> WeeklyReportService:
    return WeeklyReportService(store)


def get_profile_service(store: DocumentStore = Depends(get_document_store)) -> ProfileService:
    return ProfileService(store)


def get_plan_service(store: DocumentStore = Depends(get_document_store)) -> PlanService:
    return PlanService(store)
