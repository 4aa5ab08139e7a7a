"""Authentication for the GraphQL gateway."""

from .adapters.base import AuthAdapter, AuthenticationError, Principal
from .context import ANONYMOUS, AuthContext
from .factory import get_auth_adapter
from .middleware import build_auth_context

__all__ = [
    "ANONYMOUS",
    "AuthAdapter",
    "AuthContext",
    "AuthenticationError",
    "Principal",
    "build_auth_context",
    "get_auth_adapter",
]
