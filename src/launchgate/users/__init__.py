"""User store and the request-scoped user API."""

from .api import UserAPI
from .models import UserRecord
from .store import SqlUserStore, UserStore

__all__ = ["SqlUserStore", "UserAPI", "UserRecord", "UserStore"]
