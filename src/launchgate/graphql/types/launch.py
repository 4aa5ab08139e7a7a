"""
Launch GraphQL type definitions
"""

import strawberry

from ...launches.models import DEFAULT_PATCH_SIZE
from ...launches.models import PatchSize as PatchSizeEnum

PatchSize = strawberry.enum(PatchSizeEnum, description="Size of a mission patch image.")


@strawberry.type
class Rocket:
    """Rocket type for GraphQL API."""

    id: strawberry.ID
    name: str | None
    type: str | None


@strawberry.type
class Mission:
    """Mission type for GraphQL API."""

    name: str | None
    patch_small: strawberry.Private[str | None] = None
    patch_large: strawberry.Private[str | None] = None

    @strawberry.field
    def mission_patch(self, size: PatchSize | None = DEFAULT_PATCH_SIZE) -> str | None:
        """Get the mission patch image URL in the requested size."""
        from ..resolvers.launch import resolve_mission_patch

        return resolve_mission_patch(self, size)


@strawberry.type
class Launch:
    """Launch type for GraphQL API."""

    id: strawberry.ID
    site: str | None
    mission: Mission | None
    rocket: Rocket | None
    cursor: strawberry.Private[str | None] = None

    @strawberry.field
    async def is_booked(self, info: strawberry.Info) -> bool:
        """Whether the current user booked this launch."""
        from ..resolvers.launch import resolve_is_booked

        return await resolve_is_booked(self, info)


@strawberry.type(
    description=(
        "Simple wrapper around our list of launches that contains a cursor to the "
        "last item in the list. Pass this cursor to the launches query to fetch "
        "results after these."
    )
)
class LaunchConnection:
    cursor: str | None
    has_more: bool
    launches: list[Launch]
