"""Canonical launch entities produced by the normalizer."""

from dataclasses import dataclass, field
from enum import Enum


class PatchSize(Enum):
    """Size selector for a mission patch image."""

    SMALL = "SMALL"
    LARGE = "LARGE"


DEFAULT_PATCH_SIZE = PatchSize.LARGE


@dataclass(frozen=True)
class Mission:
    """Mission embedded in a launch.

    Both patch images are kept; the size is chosen when the field is resolved.
    """

    name: str | None = None
    patch_small: str | None = None
    patch_large: str | None = None


@dataclass(frozen=True)
class Rocket:
    """Rocket embedded in a launch, copied from the upstream record as-is."""

    id: str | None = None
    name: str | None = None
    type: str | None = None


@dataclass(frozen=True)
class Launch:
    """A launch in canonical shape.

    ``cursor`` identifies the launch's position in the reverse-chronological
    sequence. It is the string form of ``timestamp``, or ``n<id>`` for a launch
    without a date, and is unique within one normalized payload.
    """

    id: str
    cursor: str | None
    timestamp: int | None = None
    site: str | None = None
    mission: Mission = field(default_factory=Mission)
    rocket: Rocket = field(default_factory=Rocket)
