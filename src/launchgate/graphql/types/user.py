"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .launch import Launch


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    email: str

    @strawberry.field
    async def trips(
        self, info: strawberry.Info
    ) -> list[Annotated["Launch", strawberry.lazy(".launch")]]:
        """Get the launches booked by this user."""
        from ..resolvers.user import resolve_user_trips

        return await resolve_user_trips(self, info)
