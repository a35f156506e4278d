"""
Saved plan request/response schemas.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class SavePlanRequest(BaseModel):
    """Request to save a generated plan."""
    title: Optional[str] = None
    content: Dict[str, Any] = Field(..., description="Plan body as generated")


class PlanResponse(BaseModel):
    """A saved plan. ``createdAt`` is epoch milliseconds."""
    model_config = ConfigDict(extra="allow")
    
    id: str
    userId: str
    createdAt: Optional[int] = None
    title: Optional[str] = None
    content: Dict[str, Any] = Field(default_factory=dict)
