"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.trip import TripUpdateResponse


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="bookTrips")
    async def book_trips(
        self, info: strawberry.Info, launch_ids: list[strawberry.ID]
    ) -> TripUpdateResponse:
        """Book launches for the current user."""
        from ..resolvers.booking import resolve_book_trips

        return await resolve_book_trips(info, launch_ids)

    @strawberry.mutation(name="cancelTrip")
    async def cancel_trip(
        self, info: strawberry.Info, launch_id: strawberry.ID
    ) -> TripUpdateResponse:
        """Cancel a booked launch for the current user."""
        from ..resolvers.booking import resolve_cancel_trip

        return await resolve_cancel_trip(info, launch_id)

    @strawberry.mutation
    async def login(self, info: strawberry.Info, email: str | None = None) -> str | None:
        """Log in by email and get a token for the Authorization header."""
        from ..resolvers.auth import resolve_login

        return await resolve_login(info, email)
