"""Persistent user store behind a small protocol."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from contextlib import AbstractAsyncContextManager
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from ..database.connection import get_async_session
from ..logging import get_logger
from . import repository
from .models import UserRecord

logger = get_logger(__name__)


class UserStore(Protocol):
    """Storage of users and the launches they booked.

    Implementations own consistency between concurrent operations; callers
    hold no locks.
    """

    async def find_or_create(self, email: str) -> list[UserRecord]:
        """Return the users matching ``email``, creating one if none exists."""
        ...

    async def get_launch_ids(self, user_id: str) -> list[str]:
        """Return the launch ids booked by the user, in booking order."""
        ...

    async def is_booked(self, user_id: str, launch_id: str) -> bool: ...

    async def book_trips(self, user_id: str, launch_ids: Sequence[str]) -> list[str]:
        """Book launches and return the ids that are booked afterwards."""
        ...

    async def cancel_trip(self, user_id: str, launch_id: str) -> bool:
        """Remove a booking; False when there was nothing to remove."""
        ...


class SqlUserStore:
    """UserStore over the SQLAlchemy async session pool."""

    def __init__(
        self,
        session_factory: Callable[
            [], AbstractAsyncContextManager[AsyncSession]
        ] = get_async_session,
    ):
        self._session_factory = session_factory

    async def find_or_create(self, email: str) -> list[UserRecord]:
        async with self._session_factory() as session:
            users = await repository.find_or_create_user(session, email)
            return [UserRecord(id=str(user.id), email=user.email) for user in users]

    async def get_launch_ids(self, user_id: str) -> list[str]:
        async with self._session_factory() as session:
            return await repository.get_launch_ids(session, int(user_id))

    async def is_booked(self, user_id: str, launch_id: str) -> bool:
        async with self._session_factory() as session:
            return await repository.is_booked(session, int(user_id), launch_id)

    async def book_trips(self, user_id: str, launch_ids: Sequence[str]) -> list[str]:
        async with self._session_factory() as session:
            booked = await repository.book_trips(session, int(user_id), launch_ids)
        logger.info("Trips booked", user_id=user_id, requested=len(launch_ids), booked=len(booked))
        return booked

    async def cancel_trip(self, user_id: str, launch_id: str) -> bool:
        async with self._session_factory() as session:
            removed = await repository.cancel_trip(session, int(user_id), launch_id)
        logger.info("Trip cancel", user_id=user_id, launch_id=launch_id, removed=removed)
        return removed
