"""Base authentication adapter interface and types."""

from __future__ import annotations

from typing import Literal, NotRequired, Protocol, TypedDict


class Principal(TypedDict):
    """Identity extracted from an incoming token."""

    provider: Literal["email", "none"]
    subject: str
    email: NotRequired[str]
    claims: NotRequired[dict]


class AuthAdapter(Protocol):
    """Provider-agnostic authentication adapter interface."""

    async def verify_token(self, token: str) -> Principal:
        """
        Verify a token and return the principal identity.

        Args:
            token: The credential taken from the Authorization header

        Returns:
            Principal containing identity information

        Raises:
            AuthenticationError: If the token does not decode to a valid identity
        """
        ...

    async def issue_token(self, email: str) -> str:
        """
        Issue a token that ``verify_token`` accepts for ``email``.

        Args:
            email: Email address of the user logging in

        Returns:
            Token string
        """
        ...


class AuthenticationError(Exception):
    """Raised when authentication fails."""

    pass
