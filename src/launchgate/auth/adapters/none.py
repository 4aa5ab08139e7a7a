"""No-auth adapter for local development without authentication."""

from __future__ import annotations

import base64

from ...logging import get_logger
from .base import AuthenticationError, Principal

logger = get_logger(__name__)


class NoAuthAdapter:
    """
    No-auth adapter that treats every request as the same development user.

    WARNING: Only use this in development environments!
    """

    def __init__(self, default_email: str = "dev@example.com", environment: str = "development"):
        if environment.lower() in ("production", "prod"):
            logger.error(
                "NoAuthAdapter detected in production environment! "
                "This is a security risk and should never be used in production.",
                environment=environment,
            )
            raise RuntimeError(
                "NoAuthAdapter cannot be used in production environments. "
                "Please configure the email token provider."
            )

        self.default_email = default_email
        logger.warning(
            "NoAuthAdapter is active - ALL requests act as the development user! "
            "This should ONLY be used in development.",
            email=default_email,
            environment=environment,
        )

    async def verify_token(self, token: str) -> Principal:
        """Any non-empty token maps to the development user."""
        if not token:
            raise AuthenticationError("Token required (even in no-auth mode)")

        return Principal(
            provider="none",
            subject=self.default_email,
            email=self.default_email,
            claims={"mode": "development"},
        )

    async def issue_token(self, email: str) -> str:
        return base64.b64encode(email.encode("ascii")).decode("ascii")
