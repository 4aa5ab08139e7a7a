"""
Cursor pagination over an already-ordered sequence.

Pagination does not sort. Callers establish the canonical order first
(see ``canonical_order`` for launches) and then page through it.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .models import Launch

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20


@dataclass
class Page(Generic[T]):
    """One page of results plus the cursor to resume from."""

    items: list[T] = field(default_factory=list)
    cursor: str | None = None
    has_more: bool = False


def _cursor_of(item: object, get_cursor: Callable[[object], str | None] | None) -> str | None:
    cursor = getattr(item, "cursor", None)
    if cursor is None and get_cursor is not None:
        cursor = get_cursor(item)
    return cursor


def paginate(
    items: Sequence[T],
    after: str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
    get_cursor: Callable[[T], str | None] | None = None,
) -> Page[T]:
    """
    Return the page of ``items`` that follows the ``after`` cursor.

    With no ``after`` the page starts at the first item. Otherwise it starts
    right after the first item whose cursor equals ``after``; when no item
    matches, the page starts at the first item instead of failing. Items with
    no cursor never match.

    ``has_more`` is true when the last item of the page is not the last item
    of the whole sequence, compared by cursor.

    Args:
        items: Sequence in canonical order
        after: Cursor of the last item already seen
        page_size: Maximum number of items (callers pass values >= 1)
        get_cursor: Cursor accessor for items without a ``cursor`` attribute

    Returns:
        Page with the selected items, the last item's cursor and has_more
    """
    if page_size < 1 or not items:
        return Page()

    start = 0
    if after is not None:
        for index, item in enumerate(items):
            if _cursor_of(item, get_cursor) == after:
                start = index + 1
                break

    page_items = list(items[start : start + page_size])
    if not page_items:
        return Page()

    last_cursor = _cursor_of(page_items[-1], get_cursor)
    return Page(
        items=page_items,
        cursor=last_cursor,
        has_more=last_cursor != _cursor_of(items[-1], get_cursor),
    )


def canonical_order(launches: Sequence[Launch]) -> list[Launch]:
    """Sort launches reverse-chronologically; launches without a timestamp go last."""

    def sort_key(launch: Launch) -> tuple[bool, int, int]:
        flight = int(launch.id) if launch.id.isdigit() else 0
        return (launch.timestamp is not None, launch.timestamp or 0, flight)

    return sorted(launches, key=sort_key, reverse=True)
