"""Authentication context for request handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..users.models import UserRecord
    from .adapters.base import Principal


@dataclass(frozen=True)
class AuthContext:
    """Identity for one GraphQL operation, shared read-only by all its resolvers."""

    user: UserRecord | None = None
    principal: Principal | None = None
    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def user_id(self) -> str | None:
        return self.user.id if self.user else None


ANONYMOUS = AuthContext()
