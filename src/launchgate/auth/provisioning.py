"""User provisioning for authenticated principals."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..logging import get_logger

if TYPE_CHECKING:
    from ..users.models import UserRecord
    from ..users.store import UserStore
    from .adapters.base import Principal

logger = get_logger(__name__)


async def ensure_local_user(store: UserStore, principal: Principal) -> UserRecord | None:
    """
    Find or create the local user for the principal's email (JIT provisioning).

    Returns the first matching record, or None when the principal carries no
    email or the store returns nothing.
    """
    email = principal.get("email")
    if not email:
        return None

    users = await store.find_or_create(email)
    if not users:
        logger.warning("User store returned no record", provider=principal["provider"])
        return None
    return users[0]
