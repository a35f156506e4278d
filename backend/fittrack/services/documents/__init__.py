"""
Document storage boundary.
"""
from fittrack.services.documents.base import (
    ANALYTICS,
    MEALS,
    PLANS,
    PROFILES,
    REPORTS,
    WORKOUTS,
    DocumentStore,
    query_recent,
    sort_newest_first,
)
from fittrack.services.documents.sql import SqlDocumentStore

__all__ = [
    "ANALYTICS",
    "MEALS",
    "PLANS",
    "PROFILES",
    "REPORTS",
    "WORKOUTS",
    "DocumentStore",
    "SqlDocumentStore",
    "query_recent",
    "sort_newest_first",
]
