"""
Profile Service - Create, read and update user profiles.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from fittrack.core.exceptions import DocumentNotFoundError
from fittrack.core.logging import get_logger
from fittrack.services.documents import PROFILES, DocumentStore, query_recent

logger = get_logger(__name__)


class ProfileService:
    """
    One profile document per user, looked up by ``userId``.

    Usage:
        service = ProfileService(store)
        profile_id = await service.create_profile(user_id, {"name": "Ana"})
        profile = await service.get_profile(user_id)
        await service.update_profile(profile["id"], {"weight": 61.5})
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    async def create_profile(self, user_id: str, data: Mapping[str, Any]) -> str:
        """
        Create a profile; the store assigns ``id`` and ``createdAt``.

        Returns:
            The new profile id
        """
        profile_id = await self.store.add(PROFILES, {**data, "userId": user_id})
        logger.info("Profile created", user_id=user_id, profile_id=profile_id)
        return profile_id

    async def get_profile(self, user_id: str) -> Optional[Dict[str, Any]]:
        """The user's profile, or None. If several exist the newest wins."""
        profiles = await query_recent(self.store, PROFILES, user_id, 1)
        if not profiles:
            logger.debug("No profile found", user_id=user_id)
            return None
        return profiles[0]

    async def update_profile(
        self,
        profile_id: str,
        data: Mapping[str, Any],
        now: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """
        Merge ``data`` into an existing profile and stamp ``updatedAt``.

        Args:
            profile_id: Profile document id
            data: Fields to change; fields not given keep their values
            now: Update time (defaults to current UTC time)

        Returns:
            The updated profile document

        Raises:
            DocumentNotFoundError: no profile with that id
        """
        existing = await self.store.get(PROFILES, profile_id)
        if existing is None:
            raise DocumentNotFoundError(PROFILES, profile_id)

        updated = {
            **existing,
            **data,
            "id": profile_id,
            "userId": existing["userId"],
            "updatedAt": (now or datetime.now(timezone.utc)).isoformat(),
        }
        await self.store.set(PROFILES, profile_id, updated)

        logger.info(
            "Profile updated",
            profile_id=profile_id,
            user_id=existing["userId"],
            fields=sorted(data),
        )
        return updated
