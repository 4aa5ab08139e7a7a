"""
Root GraphQL query definitions
"""

import strawberry

from ...config import settings
from ..types.launch import Launch, LaunchConnection
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def launches(
        self,
        info: strawberry.Info,
        page_size: int | None = settings.default_page_size,
        after: str | None = None,
    ) -> LaunchConnection:
        """Get a page of launches, newest first.

        pageSize must be >= 1; null means the default size. Pass the cursor of the
        previous page as ``after`` to continue.
        """
        from ..resolvers.launch import resolve_launches

        return await resolve_launches(info, page_size, after)

    @strawberry.field
    async def launch(self, info: strawberry.Info, id: strawberry.ID) -> Launch | None:
        """Get a launch by ID."""
        from ..resolvers.launch import resolve_launch

        return await resolve_launch(info, id)

    @strawberry.field
    async def me(self, info: strawberry.Info) -> User | None:
        """Get the current authenticated user."""
        from ..resolvers.user import resolve_me

        return await resolve_me(info)
