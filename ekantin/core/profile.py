"""
core/profile.py – ProfileService class.
Tanggung jawab: upsert `user_profiles` berdasarkan id (satu-satunya jalur tulis).
"""
import asyncio
import logging
from typing import Optional

from ..db.models import UserProfile
from ..db.session import Database
from .clock import Clock

logger = logging.getLogger(__name__)


class ProfileService:

    def __init__(self, db: Database, clock: Clock) -> None:
        self._db = db
        self._clock = clock

    async def upsert(
        self,
        user_id: Optional[str],
        email: Optional[str] = None,
        full_name: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> None:
        if not user_id:
            raise ValueError("User ID is required")
        profile = UserProfile(
            id=user_id,
            email=email or "",
            full_name=full_name or "",
            avatar_url=avatar_url or "",
            updated_at=self._clock(),
        )
        await asyncio.get_event_loop().run_in_executor(None, self._merge, profile)

    def _merge(self, profile: UserProfile) -> None:
        with self._db.session() as session:
            session.merge(profile)
        logger.info("[profile] upsert id=%s", profile.id)
