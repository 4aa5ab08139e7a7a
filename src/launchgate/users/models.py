"""User records passed across the store boundary."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserRecord:
    """A persisted user; ``id`` is kept as a string for the GraphQL ID type."""

    id: str
    email: str
