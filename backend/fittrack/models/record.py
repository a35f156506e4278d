"""
Workout and meal record database models.

Records are stored as JSON documents; only the owner and creation time
are lifted into columns so they can be filtered and ordered on.
"""
import uuid
from datetime import datetime
from sqlalchemy import String, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column

from fittrack.core.database import Base, JSONDocument


class UserDocumentMixin:
    """Columns shared by per-user, time-ordered documents."""
    
    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4())
    )
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        index=True
    )
    data: Mapped[dict] = mapped_column(JSONDocument, nullable=False, default=dict)
    
    def to_dict(self) -> dict:
        """Convert to the document shape returned by the store."""
        return {
            **(self.data or {}),
            "id": self.id,
            "userId": self.user_id,
            "createdAt": self.created_at,
        }


class WorkoutRecord(UserDocumentMixin, Base):
    """Logged workout."""
    
    __tablename__ = "workouts"
    __table_args__ = (
        Index("ix_workouts_user_created", "user_id", "created_at"),
    )


class MealRecord(UserDocumentMixin, Base):
    """Logged meal."""
    
    __tablename__ = "meals"
    __table_args__ = (
        Index("ix_meals_user_created", "user_id", "created_at"),
    )
