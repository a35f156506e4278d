"""
Plan Service - Persist and read saved fitness plans.
"""
from typing import Any, Dict, List, Mapping, Optional

from fittrack.core.config import settings
from fittrack.core.logging import get_logger
from fittrack.services.documents import PLANS, DocumentStore, query_recent

logger = get_logger(__name__)


class PlanService:
    """Saved plans of a user; the newest one is the current plan."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def save_plan(self, user_id: str, data: Mapping[str, Any]) -> str:
        """Store a plan and return its id."""
        plan_id = await self.store.add(PLANS, {**data, "userId": user_id})
        logger.info("Plan saved", user_id=user_id, plan_id=plan_id)
        return plan_id

    async def get_user_plans(self, user_id: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Most recent plans, newest first (only the current one by default)."""
        return await query_recent(
            self.store, PLANS, user_id, limit or settings.PLANS_DEFAULT_LIMIT
        )

    async def get_latest_plan(self, user_id: str) -> Optional[Dict[str, Any]]:
        plans = await self.get_user_plans(user_id, limit=1)
        return plans[0] if plans else None
