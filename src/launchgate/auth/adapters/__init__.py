"""Authentication adapters for the supported credential schemes."""

from .base import AuthAdapter, AuthenticationError, Principal
from .email import EmailTokenAdapter, is_email
from .none import NoAuthAdapter

__all__ = [
    "AuthAdapter",
    "AuthenticationError",
    "EmailTokenAdapter",
    "NoAuthAdapter",
    "Principal",
    "is_email",
]
