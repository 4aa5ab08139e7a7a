"""
launchgate backend
GraphQL gateway over the SpaceX launches REST API with trip booking
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
