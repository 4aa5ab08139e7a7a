"""Launch data source over the upstream REST API."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from ..launches.models import Launch
from ..launches.normalize import normalize_launches
from ..logging import get_logger
from .fetcher import Fetcher

logger = get_logger(__name__)


class LaunchAPI:
    """Fetch launches from the upstream source and return them normalized.

    The upstream order is not trusted; callers that need the canonical order
    apply ``canonical_order`` themselves.
    """

    def __init__(self, fetcher: Fetcher):
        self.fetcher = fetcher

    async def get_all_launches(self) -> list[Launch]:
        payload = await self.fetcher.get_json("launches")
        launches = normalize_launches(payload)
        logger.debug("Fetched launches", count=len(launches))
        return launches

    async def get_launch_by_id(self, launch_id: str) -> Launch | None:
        """Look up one launch by flight number; None when the upstream has no match."""
        payload = await self.fetcher.get_json("launches", {"flight_number": launch_id})
        launches = normalize_launches(payload)
        if not launches:
            logger.info("Launch not found", launch_id=launch_id)
            return None
        return launches[0]

    async def get_launches_by_ids(self, launch_ids: Sequence[str]) -> list[Launch]:
        """Look up several launches concurrently, dropping ids the upstream does not know."""
        results = await asyncio.gather(
            *(self.get_launch_by_id(launch_id) for launch_id in launch_ids)
        )
        return [launch for launch in results if launch is not None]
