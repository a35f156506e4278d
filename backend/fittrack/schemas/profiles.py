"""
User profile request/response schemas.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProfileRequest(BaseModel):
    """
    Profile fields. On create, omitted fields are not stored; on update,
    only the fields sent are changed.
    """
    model_config = ConfigDict(allow_inf_nan=False)
    
    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = Field(None, ge=0, le=150)
    gender: Optional[str] = None
    weight: Optional[float] = Field(None, gt=0, description="Kilograms")
    height: Optional[float] = Field(None, gt=0, description="Centimetres")
    activityLevel: Optional[str] = Field(None, description="e.g. sedentary, moderate, active")
    fitnessGoal: Optional[str] = Field(None, description="e.g. general, weight_loss, muscle_gain")
    dietaryRestrictions: Optional[List[str]] = None


class ProfileResponse(BaseModel):
    """A stored profile. ``createdAt`` is epoch milliseconds."""
    model_config = ConfigDict(extra="allow")
    
    id: str
    userId: str
    createdAt: Optional[int] = None
    updatedAt: Optional[str] = None
