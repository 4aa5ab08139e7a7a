"""
Trip mutation result types
"""

import strawberry

from .launch import Launch


@strawberry.type
class TripUpdateResponse:
    """Result of booking or cancelling trips."""

    success: bool
    message: str | None
    launches: list[Launch] | None
