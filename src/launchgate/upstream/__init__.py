"""Upstream REST source access."""

from .fetcher import CachedFetcher, Fetcher, UpstreamUnavailableError
from .launch_api import LaunchAPI

__all__ = ["CachedFetcher", "Fetcher", "LaunchAPI", "UpstreamUnavailableError"]
