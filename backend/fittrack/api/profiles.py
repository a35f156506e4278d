"""
User Profile API endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException

from fittrack.core.exceptions import DocumentNotFoundError
from fittrack.core.logging import get_logger
from fittrack.schemas.profiles import ProfileRequest, ProfileResponse
from fittrack.schemas.records import response_fields
from fittrack.api.deps import get_profile_service
from fittrack.services.profiles import ProfileService

logger = get_logger(__name__)
router = APIRouter()


@router.post("/{user_id}/profile", status_code=201)
async def create_profile(
    user_id: str,
    request: ProfileRequest,
    service: ProfileService = Depends(get_profile_service),
):
    """
    Create the user's profile.
    """
    profile_id = await service.create_profile(user_id, request.model_dump(exclude_none=True))
    return {"id": profile_id}


@router.get("/{user_id}/profile", response_model=ProfileResponse)
async def get_profile(
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
):
    """
    Get the user's profile.
    """
    profile = await service.get_profile(user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    
    return ProfileResponse(**response_fields(profile))


@router.patch("/{user_id}/profile", response_model=ProfileResponse)
async def update_profile(
    user_id: str,
    request: ProfileRequest,
    service: ProfileService = Depends(get_profile_service),
):
    """
    Update the fields sent; other profile fields are kept.
    """
    profile = await service.get_profile(user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    
    try:
        updated = await service.update_profile(
            profile["id"], request.model_dump(exclude_unset=True)
        )
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail="Profile not found")
    
    return ProfileResponse(**response_fields(updated))
