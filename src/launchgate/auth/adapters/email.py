"""Email token adapter: the credential is the base64-encoded email address.

The token carries no signature. It identifies a user, it does not prove
anything about the caller.
"""

from __future__ import annotations

import base64
import binascii
import re

from .base import AuthenticationError, Principal


EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)+$"
)


def is_email(value: str) -> bool:
    """Syntactic email check."""
    return len(value) <= 254 and EMAIL_PATTERN.match(value) is not None


class EmailTokenAdapter:
    """Accept base64(email) tokens and issue them on login."""

    async def verify_token(self, token: str) -> Principal:
        if not token:
            raise AuthenticationError("Token required")

        try:
            email = base64.b64decode(token, validate=True).decode("ascii")
        except (binascii.Error, UnicodeDecodeError, ValueError) as e:
            raise AuthenticationError("Token is not a base64 email") from e

        if not is_email(email):
            raise AuthenticationError("Token does not contain a valid email")

        return Principal(provider="email", subject=email, email=email)

    async def issue_token(self, email: str) -> str:
        return base64.b64encode(email.encode("ascii")).decode("ascii")
