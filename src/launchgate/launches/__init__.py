"""Canonical launch entities, normalization and cursor pagination."""

from .models import Launch, Mission, PatchSize, Rocket
from .normalize import normalize_launch, normalize_launches
from .pagination import DEFAULT_PAGE_SIZE, Page, canonical_order, paginate

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "Launch",
    "Mission",
    "Page",
    "PatchSize",
    "Rocket",
    "canonical_order",
    "normalize_launch",
    "normalize_launches",
    "paginate",
]
