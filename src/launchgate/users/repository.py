"""Repository helpers for users and their booked trips."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import LAUNCH_ID_MAX_LENGTH, Trips, Users


def _storable(launch_id: str) -> bool:
    return 0 < len(launch_id) <= LAUNCH_ID_MAX_LENGTH


async def find_or_create_user(session: AsyncSession, email: str) -> list[Users]:
    stmt = select(Users).where(Users.email == email)
    res = await session.execute(stmt)
    users = list(res.scalars().all())
    if users:
        return users

    # A concurrent request may insert the same email; the unique key settles it.
    await session.execute(
        insert(Users).values(email=email).on_conflict_do_nothing(index_elements=["email"])
    )
    res = await session.execute(stmt)
    return list(res.scalars().all())


async def get_launch_ids(session: AsyncSession, user_id: int) -> list[str]:
    stmt = select(Trips.launch_id).where(Trips.user_id == user_id).order_by(Trips.id)
    res = await session.execute(stmt)
    return [launch_id for launch_id in res.scalars().all() if launch_id]


async def is_booked(session: AsyncSession, user_id: int, launch_id: str) -> bool:
    if not _storable(launch_id):
        return False
    stmt = select(Trips.id).where(Trips.user_id == user_id, Trips.launch_id == launch_id).limit(1)
    res = await session.execute(stmt)
    return res.scalar_one_or_none() is not None


async def book_trips(session: AsyncSession, user_id: int, launch_ids: Sequence[str]) -> list[str]:
    """
    Book every id and return the ids booked afterwards, in request order.

    Already-booked ids count as booked. Ids that do not fit the launch_id column
    are skipped, so they come back as not booked instead of failing the batch.
    """
    storable = [launch_id for launch_id in dict.fromkeys(launch_ids) if _storable(launch_id)]
    if not storable:
        return []

    for launch_id in storable:
        await session.execute(
            insert(Trips)
            .values(user_id=user_id, launch_id=launch_id)
            .on_conflict_do_nothing(index_elements=["user_id", "launch_id"])
        )

    stmt = select(Trips.launch_id).where(
        Trips.user_id == user_id, Trips.launch_id.in_(storable)
    )
    res = await session.execute(stmt)
    booked = set(res.scalars().all())
    return [launch_id for launch_id in launch_ids if launch_id in booked]


async def cancel_trip(session: AsyncSession, user_id: int, launch_id: str) -> bool:
    if not _storable(launch_id):
        return False
    stmt = delete(Trips).where(Trips.user_id == user_id, Trips.launch_id == launch_id)
    res = await session.execute(stmt)
    return bool(res.rowcount)
