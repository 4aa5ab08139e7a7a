"""Build the per-operation authentication context from the credential header."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..logging import bind_user_id, get_logger
from .adapters.base import AuthAdapter, AuthenticationError
from .adapters.none import NoAuthAdapter
from .context import ANONYMOUS, AuthContext
from .provisioning import ensure_local_user

if TYPE_CHECKING:
    from ..users.store import UserStore

logger = get_logger(__name__)

BEARER_PREFIX = "Bearer "


def extract_token(authorization: str | None) -> str:
    """Take the raw credential from the header value; a ``Bearer`` prefix is optional."""
    if not authorization:
        return ""
    token = authorization.strip()
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX) :].strip()
    return token


async def build_auth_context(
    authorization: str | None,
    store: UserStore,
    adapter: AuthAdapter,
) -> AuthContext:
    """
    Derive the request identity from the ``Authorization`` header.

    A missing header or a credential that does not decode to a valid email
    gives the anonymous context; it is never an error. A valid credential is
    resolved to a user through find-or-create on the store. Store failures
    propagate to the caller.

    Args:
        authorization: Raw Authorization header value, if any
        store: User store used for find-or-create
        adapter: Adapter that decodes the credential

    Returns:
        AuthContext with the resolved user, or the anonymous context
    """
    token = extract_token(authorization)
    if not token:
        if not isinstance(adapter, NoAuthAdapter):
            return ANONYMOUS
        token = "dev-token"

    try:
        principal = await adapter.verify_token(token)
    except AuthenticationError as e:
        logger.debug("Credential rejected, continuing anonymously", reason=str(e))
        return ANONYMOUS

    user = await ensure_local_user(store, principal)
    if user is None:
        return ANONYMOUS

    bind_user_id(user.id)
    logger.debug("Request authenticated", provider=principal["provider"], user_id=user.id)
    return AuthContext(user=user, principal=principal, token=token)
