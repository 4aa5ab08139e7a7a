"""
Per-operation GraphQL context
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import Request

from ..auth.middleware import build_auth_context
from ..logging import get_logger
from ..upstream.launch_api import LaunchAPI
from ..users.api import UserAPI
from .loaders import Loaders

if TYPE_CHECKING:
    from ..auth.adapters.base import AuthAdapter
    from ..auth.context import AuthContext
    from ..upstream.fetcher import Fetcher
    from ..users.store import UserStore

logger = get_logger(__name__)


def create_context(
    auth: AuthContext,
    fetcher: Fetcher,
    store: UserStore,
    auth_adapter: AuthAdapter,
    request: Request | None = None,
) -> dict[str, Any]:
    """Assemble the data sources shared by every resolver of one operation."""
    launch_api = LaunchAPI(fetcher)
    return {
        "request": request,
        "auth": auth,
        "auth_adapter": auth_adapter,
        "launch_api": launch_api,
        "user_store": store,
        "user_api": UserAPI(store, auth.user),
        "loaders": Loaders(launch_api),
    }


async def get_context(request: Request) -> dict[str, Any]:
    """Build the context for one GraphQL request from the application state."""
    state = request.app.state
    auth = await build_auth_context(
        request.headers.get("authorization"),
        state.user_store,
        state.auth_adapter,
    )
    logger.debug("GraphQL context created", authenticated=auth.is_authenticated)
    return create_context(
        auth=auth,
        fetcher=state.fetcher,
        store=state.user_store,
        auth_adapter=state.auth_adapter,
        request=request,
    )
