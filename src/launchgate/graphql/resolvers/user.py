from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from .launch import get_user_api, to_launch_type

if TYPE_CHECKING:
    from ..types.launch import Launch
    from ..types.user import User

logger = get_logger(__name__)


async def resolve_me(info: strawberry.Info) -> User | None:
    """Resolve the current user; None for anonymous requests."""
    from ..types.user import User as UserType

    user = await get_user_api(info).find_or_create_user()
    if user is None:
        return None
    return UserType(id=user.id, email=user.email)


async def resolve_user_trips(user: User, info: strawberry.Info) -> list[Launch]:
    """
    Resolve the launches booked by the user.

    Launches are loaded in one batch through the request's launch loader.
    Ids the upstream source no longer knows are dropped.
    """
    launch_ids = await get_user_api(info).get_launch_ids_by_user()
    if not launch_ids:
        return []

    launches = await info.context["loaders"].launch_loader.load_many(launch_ids)
    missing = [launch_id for launch_id, launch in zip(launch_ids, launches) if launch is None]
    if missing:
        logger.info("Booked launches missing upstream", user_id=str(user.id), launch_ids=missing)

    return [to_launch_type(launch) for launch in launches if launch is not None]
