from __future__ import annotations

import strawberry

from ...logging import get_logger
from ...users.api import UserAPI

logger = get_logger(__name__)


async def resolve_login(info: strawberry.Info, email: str | None) -> str | None:
    """
    Find or create the user for ``email`` and return a credential for it.

    The lookup ignores the caller's current identity. Returns None when the
    email is missing or not a valid address.
    """
    user = await UserAPI(info.context["user_store"]).find_or_create_user(email)
    if user is None:
        logger.info("Login rejected")
        return None

    logger.info("Login", user_id=user.id)
    return await info.context["auth_adapter"].issue_token(user.email)
