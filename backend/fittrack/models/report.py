"""
Periodic report database model.
"""
from sqlalchemy import Index

from fittrack.models.record import UserDocumentMixin
from fittrack.core.database import Base


class Report(UserDocumentMixin, Base):
    """Generated report (weekly). The report kind lives in ``data['type']``."""
    
    __tablename__ = "reports"
    __table_args__ = (
        Index("ix_reports_user_created", "user_id", "created_at"),
    )
