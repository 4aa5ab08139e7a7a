from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import strawberry

from ... import booking
from .launch import get_launch_api, get_user_api, to_launch_type

if TYPE_CHECKING:
    from ..types.trip import TripUpdateResponse


def _to_response(update: booking.TripUpdate) -> TripUpdateResponse:
    from ..types.trip import TripUpdateResponse as TripUpdateResponseType

    return TripUpdateResponseType(
        success=update.success,
        message=update.message,
        launches=(
            [to_launch_type(launch) for launch in update.launches]
            if update.launches is not None
            else None
        ),
    )


async def resolve_book_trips(
    info: strawberry.Info, launch_ids: Sequence[str]
) -> TripUpdateResponse:
    update = await booking.book_trips(get_user_api(info), get_launch_api(info), launch_ids)
    return _to_response(update)


async def resolve_cancel_trip(info: strawberry.Info, launch_id: str) -> TripUpdateResponse:
    update = await booking.cancel_trip(get_user_api(info), get_launch_api(info), launch_id)
    return _to_response(update)
