"""Request-scoped view of the user store bound to the current user."""

from __future__ import annotations

from collections.abc import Sequence

from ..auth.adapters.email import is_email
from ..logging import get_logger
from .models import UserRecord
from .store import UserStore

logger = get_logger(__name__)


class UserAPI:
    """
    User operations for one GraphQL operation.

    Every method acts on behalf of ``user``. When the request is anonymous
    (``user`` is None) reads return empty results and writes book nothing,
    instead of raising.
    """

    def __init__(self, store: UserStore, user: UserRecord | None = None):
        self.store = store
        self.user = user

    async def find_or_create_user(self, email: str | None = None) -> UserRecord | None:
        """Find or create the current user, or the user for ``email`` when anonymous."""
        if self.user is not None:
            email = self.user.email
        if not email or not is_email(email):
            return None

        users = await self.store.find_or_create(email)
        return users[0] if users else None

    async def get_launch_ids_by_user(self) -> list[str]:
        if self.user is None:
            return []
        return await self.store.get_launch_ids(self.user.id)

    async def is_booked_on_launch(self, launch_id: str) -> bool:
        if self.user is None:
            return False
        return await self.store.is_booked(self.user.id, launch_id)

    async def book_trips(self, launch_ids: Sequence[str]) -> list[str]:
        if self.user is None:
            logger.info("Anonymous booking attempt", launch_ids=list(launch_ids))
            return []
        return await self.store.book_trips(self.user.id, launch_ids)

    async def cancel_trip(self, launch_id: str) -> bool:
        if self.user is None:
            return False
        return await self.store.cancel_trip(self.user.id, launch_id)
