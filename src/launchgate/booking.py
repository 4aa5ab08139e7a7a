"""
Trip booking workflow.

Booking reports partial success instead of failing atomically: every
requested launch is read back from the upstream source whether or not the
store confirmed it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .logging import get_logger

if TYPE_CHECKING:
    from .launches.models import Launch
    from .upstream.launch_api import LaunchAPI
    from .users.api import UserAPI

logger = get_logger(__name__)

BOOKED_MESSAGE = "trips booked successfully"
CANCELLED_MESSAGE = "trip cancelled"
CANCEL_FAILED_MESSAGE = "failed to cancel trip"


@dataclass
class TripUpdate:
    """Outcome of a booking mutation."""

    success: bool
    message: str | None = None
    launches: list[Launch] | None = None


async def book_trips(
    user_api: UserAPI, launch_api: LaunchAPI, launch_ids: Sequence[str]
) -> TripUpdate:
    """
    Book each launch for the current user.

    ``success`` is true only when every requested id was booked. The message
    lists the ids that were not. ``launches`` always holds every requested
    launch the upstream source knows, booked or not.
    """
    launch_ids = [str(launch_id) for launch_id in launch_ids]
    booked = set(await user_api.book_trips(launch_ids))
    launches = await launch_api.get_launches_by_ids(launch_ids)

    failed = [launch_id for launch_id in launch_ids if launch_id not in booked]
    if failed:
        logger.info("Partial booking", requested=launch_ids, failed=failed)
        message = f"the following launches couldn't be booked: {', '.join(failed)}"
    else:
        message = BOOKED_MESSAGE

    return TripUpdate(success=not failed, message=message, launches=launches)


async def cancel_trip(user_api: UserAPI, launch_api: LaunchAPI, launch_id: str) -> TripUpdate:
    """Cancel one booking; a missing booking is reported, not raised."""
    launch_id = str(launch_id)
    if not await user_api.cancel_trip(launch_id):
        return TripUpdate(success=False, message=CANCEL_FAILED_MESSAGE, launches=None)

    launch = await launch_api.get_launch_by_id(launch_id)
    return TripUpdate(
        success=True,
        message=CANCELLED_MESSAGE,
        launches=[launch] if launch is not None else [],
    )
