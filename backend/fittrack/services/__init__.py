"""
Services module - Application business logic layer.

Modules:
- analytics: summary aggregation and store-backed access
- documents: document store boundary
- records: workout and meal logging
- reports: weekly reports
- profiles, plans: user profiles and saved plans
"""
# Main exports for convenience
from fittrack.services.analytics import AnalyticsCalculator, AnalyticsEngine
from fittrack.services.documents import DocumentStore, SqlDocumentStore
from fittrack.services.plans import PlanService
from fittrack.services.profiles import ProfileService
from fittrack.services.records import RecordService
from fittrack.services.reports import WeeklyReportService

__all__ = [
    "AnalyticsCalculator",
    "AnalyticsEngine",
    "DocumentStore",
    "SqlDocumentStore",
    "PlanService",
    "ProfileService",
    "RecordService",
    "WeeklyReportService",
]
