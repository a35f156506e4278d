"""
Saved plan database model.

The plan body is opaque JSON produced outside this service.
"""
from sqlalchemy import Index

from fittrack.models.record import UserDocumentMixin
from fittrack.core.database import Base


class SavedPlan(UserDocumentMixin, Base):
    """Saved fitness plan."""
    
    __tablename__ = "plans"
    __table_args__ = (
        Index("ix_plans_user_created", "user_id", "created_at"),
    )
