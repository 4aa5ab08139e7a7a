"""Factory for creating auth adapters based on configuration."""

from __future__ import annotations

from ..config import Settings, settings
from .adapters.base import AuthAdapter
from .adapters.email import EmailTokenAdapter
from .adapters.none import NoAuthAdapter


def get_auth_adapter(config: Settings | None = None) -> AuthAdapter:
    """Create and return the configured auth adapter."""
    config = config or settings
    provider = config.auth_provider.lower()

    if provider == "email":
        return EmailTokenAdapter()

    elif provider == "none":
        return NoAuthAdapter(
            default_email=config.dev_user_email,
            environment=config.environment,
        )

    else:
        raise ValueError(f"Unsupported auth provider: {provider}")
