"""
Analytics summary database model.
One denormalized summary document per user, overwritten wholesale.
"""
from datetime import datetime
from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from fittrack.core.database import Base, JSONDocument


class AnalyticsDocument(Base):
    """Persisted analytics summary keyed by user id."""
    
    __tablename__ = "analytics"
    
    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    data: Mapped[dict] = mapped_column(JSONDocument, nullable=False, default=dict)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow
    )
    
    def to_dict(self) -> dict:
        """Convert to the document shape returned by the store."""
        return {**(self.data or {}), "userId": self.user_id}
