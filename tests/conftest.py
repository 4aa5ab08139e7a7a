"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Callable, Generator, Mapping, Sequence
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from launchgate.auth.adapters.email import EmailTokenAdapter
from launchgate.auth.context import ANONYMOUS, AuthContext
from launchgate.dbmodels import LAUNCH_ID_MAX_LENGTH
from launchgate.graphql.context import create_context
from launchgate.users.models import UserRecord


def make_raw_launch(
    flight_number: int | None,
    launch_date_unix: int | None,
    *,
    mission_name: str | None = None,
    site_name: str | None = "CCAFS SLC 40",
    with_rocket: bool = True,
) -> dict[str, Any]:
    """Build an upstream launch record in the SpaceX v2 shape."""
    record: dict[str, Any] = {
        "flight_number": flight_number,
        "mission_name": mission_name or f"Mission {flight_number}",
        "launch_date_unix": launch_date_unix,
        "launch_site": {"site_id": "ccafs_slc_40", "site_name": site_name},
        "links": {
            "mission_patch": f"https://images.example.com/{flight_number}-large.png",
            "mission_patch_small": f"https://images.example.com/{flight_number}-small.png",
        },
    }
    if with_rocket:
        record["rocket"] = {
            "rocket_id": "falcon9",
            "rocket_name": "Falcon 9",
            "rocket_type": "FT",
        }
    return record


class FakeFetcher:
    """In-memory upstream source answering ``launches`` GETs from a list of records."""

    def __init__(self, records: Sequence[Mapping[str, Any]]):
        self.records = list(records)
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.error: Exception | None = None

    async def get_json(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        self.calls.append((path, dict(params or {})))
        if self.error is not None:
            raise self.error
        if path != "launches":
            return []
        if params and "flight_number" in params:
            wanted = str(params["flight_number"])
            return [r for r in self.records if str(r.get("flight_number")) == wanted]
        return list(self.records)


class InMemoryUserStore:
    """UserStore kept in dictionaries.

    Ids listed in ``unbookable`` and ids longer than the launch_id column are
    never confirmed.
    """

    def __init__(self):
        self.users: dict[str, UserRecord] = {}
        self.trips: dict[str, list[str]] = {}
        self.unbookable: set[str] = set()
        self.error: Exception | None = None
        self.calls: list[str] = []

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.error is not None:
            raise self.error

    async def find_or_create(self, email: str) -> list[UserRecord]:
        self._record("find_or_create")
        if email not in self.users:
            self.users[email] = UserRecord(id=str(len(self.users) + 1), email=email)
        return [self.users[email]]

    async def get_launch_ids(self, user_id: str) -> list[str]:
        self._record("get_launch_ids")
        return list(self.trips.get(user_id, []))

    async def is_booked(self, user_id: str, launch_id: str) -> bool:
        self._record("is_booked")
        return launch_id in self.trips.get(user_id, [])

    async def book_trips(self, user_id: str, launch_ids: Sequence[str]) -> list[str]:
        self._record("book_trips")
        trips = self.trips.setdefault(user_id, [])
        booked = []
        for launch_id in launch_ids:
            if launch_id in self.unbookable or len(launch_id) > LAUNCH_ID_MAX_LENGTH:
                continue
            if launch_id not in trips:
                trips.append(launch_id)
            booked.append(launch_id)
        return booked

    async def cancel_trip(self, user_id: str, launch_id: str) -> bool:
        self._record("cancel_trip")
        trips = self.trips.get(user_id, [])
        if launch_id not in trips:
            return False
        trips.remove(launch_id)
        return True


@pytest.fixture
def launch_record() -> Callable[..., dict[str, Any]]:
    """Factory for upstream launch records."""
    return make_raw_launch


@pytest.fixture
def raw_launches() -> list[dict[str, Any]]:
    """Five launches, deliberately not in chronological order."""
    return [
        make_raw_launch(3, 1_300_000_000),
        make_raw_launch(1, 1_100_000_000),
        make_raw_launch(5, 1_500_000_000),
        make_raw_launch(2, 1_200_000_000),
        make_raw_launch(4, 1_400_000_000),
    ]


@pytest.fixture
def fetcher(raw_launches: list[dict[str, Any]]) -> FakeFetcher:
    return FakeFetcher(raw_launches)


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def email_adapter() -> EmailTokenAdapter:
    return EmailTokenAdapter()


@pytest.fixture
def sample_user(user_store: InMemoryUserStore) -> UserRecord:
    """A user already present in the store."""
    user = UserRecord(id="1", email="astronaut@example.com")
    user_store.users[user.email] = user
    return user


@pytest.fixture
def auth_context(sample_user: UserRecord) -> AuthContext:
    """An authenticated context for the sample user."""
    return AuthContext(
        user=sample_user,
        principal={"provider": "email", "subject": sample_user.email, "email": sample_user.email},
        token="YXN0cm9uYXV0QGV4YW1wbGUuY29t",
    )


@pytest.fixture
def make_context(
    fetcher: FakeFetcher, user_store: InMemoryUserStore, email_adapter: EmailTokenAdapter
) -> Callable[..., dict[str, Any]]:
    """Build a GraphQL context over the in-memory fakes."""

    def _make(auth: AuthContext = ANONYMOUS) -> dict[str, Any]:
        return create_context(
            auth=auth, fetcher=fetcher, store=user_store, auth_adapter=email_adapter
        )

    return _make


@pytest.fixture
def make_info(make_context: Callable[..., dict[str, Any]]) -> Callable[..., Any]:
    """Create a mock GraphQL info object carrying a real context."""

    def _make(auth: AuthContext = ANONYMOUS) -> Any:
        info = MagicMock(spec=strawberry.Info)
        info.context = make_context(auth)
        return info

    return _make


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "requires_db: mark test as requiring database connection")
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
