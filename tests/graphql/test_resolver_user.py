"""
Tests for user GraphQL resolvers
"""

import pytest

from launchgate.graphql.resolvers.user import resolve_me, resolve_user_trips


class TestResolveMe:
    @pytest.mark.asyncio
    async def test_anonymous(self, make_info):
        assert await resolve_me(make_info()) is None

    @pytest.mark.asyncio
    async def test_authenticated(self, make_info, auth_context, sample_user):
        user = await resolve_me(make_info(auth_context))

        assert user is not None
        assert user.id == sample_user.id
        assert user.email == sample_user.email


class TestResolveUserTrips:
    @pytest.mark.asyncio
    async def test_no_trips(self, make_info, auth_context):
        info = make_info(auth_context)
        user = await resolve_me(info)

        assert await resolve_user_trips(user, info) == []

    @pytest.mark.asyncio
    async def test_trips_in_booking_order(self, make_info, auth_context, user_store, sample_user):
        user_store.trips[sample_user.id] = ["4", "1"]
        info = make_info(auth_context)
        user = await resolve_me(info)

        trips = await resolve_user_trips(user, info)

        assert [launch.id for launch in trips] == ["4", "1"]

    @pytest.mark.asyncio
    async def test_launches_missing_upstream_are_dropped(
        self, make_info, auth_context, user_store, sample_user
    ):
        user_store.trips[sample_user.id] = ["2", "404"]
        info = make_info(auth_context)
        user = await resolve_me(info)

        trips = await resolve_user_trips(user, info)

        assert [launch.id for launch in trips] == ["2"]
