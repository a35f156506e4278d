"""
User profile database model.
"""
from sqlalchemy import Index

from fittrack.models.record import UserDocumentMixin
from fittrack.core.database import Base


class UserProfile(UserDocumentMixin, Base):
    """Profile of one user (name, body metrics, goals)."""
    
    __tablename__ = "profiles"
    __table_args__ = (
        Index("ix_profiles_user_created", "user_id", "created_at"),
    )
