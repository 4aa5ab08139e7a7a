from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry

from ...config import settings
from ...launches.models import PatchSize
from ...launches.pagination import canonical_order, paginate
from ...logging import get_logger

if TYPE_CHECKING:
    from ...launches.models import Launch as LaunchEntity
    from ...upstream.launch_api import LaunchAPI
    from ...users.api import UserAPI
    from ..types.launch import Launch, LaunchConnection

logger = get_logger(__name__)


def get_launch_api(info: strawberry.Info) -> LaunchAPI:
    return info.context["launch_api"]


def get_user_api(info: strawberry.Info) -> UserAPI:
    return info.context["user_api"]


def to_launch_type(launch: LaunchEntity) -> Launch:
    """Convert a canonical launch into the GraphQL type."""
    from ..types.launch import Launch as LaunchType
    from ..types.launch import Mission, Rocket

    rocket = None
    if launch.rocket.id is not None:
        rocket = Rocket(id=launch.rocket.id, name=launch.rocket.name, type=launch.rocket.type)

    return LaunchType(
        id=launch.id,
        site=launch.site,
        mission=Mission(
            name=launch.mission.name,
            patch_small=launch.mission.patch_small,
            patch_large=launch.mission.patch_large,
        ),
        rocket=rocket,
        cursor=launch.cursor,
    )


# Query resolvers
async def resolve_launches(
    info: strawberry.Info, page_size: int | None = None, after: str | None = None
) -> LaunchConnection:
    """
    Resolve one page of launches in reverse-chronological order.

    The full upstream list is fetched, put into canonical order and paginated
    after the ``after`` cursor.
    """
    from ..types.launch import LaunchConnection as LaunchConnectionType

    all_launches = canonical_order(await get_launch_api(info).get_all_launches())
    page = paginate(
        all_launches,
        after=after,
        page_size=page_size if page_size is not None else settings.default_page_size,
    )

    return LaunchConnectionType(
        cursor=page.cursor,
        has_more=page.has_more,
        launches=[to_launch_type(launch) for launch in page.items],
    )


async def resolve_launch(info: strawberry.Info, id: str) -> Launch | None:
    """Resolve a launch by id; None when the upstream source has no such launch."""
    launch = await get_launch_api(info).get_launch_by_id(str(id))
    return to_launch_type(launch) if launch is not None else None


# Field resolvers
def resolve_mission_patch(mission: Any, size: PatchSize | None = None) -> str | None:
    """Small patch for SMALL; the large patch otherwise, including when no size is given."""
    if size == PatchSize.SMALL:
        return mission.patch_small
    return mission.patch_large


async def resolve_is_booked(launch: Launch, info: strawberry.Info) -> bool:
    """Whether the current user booked the launch; always False for anonymous requests."""
    auth = info.context.get("auth")
    if auth is None or not auth.is_authenticated:
        return False
    return await get_user_api(info).is_booked_on_launch(str(launch.id))
