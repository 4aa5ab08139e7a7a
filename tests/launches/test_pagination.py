"""
Tests for cursor pagination and canonical ordering
"""

from dataclasses import dataclass

import pytest

from launchgate.launches.models import Launch
from launchgate.launches.normalize import normalize_launches
from launchgate.launches.pagination import DEFAULT_PAGE_SIZE, Page, canonical_order, paginate


@dataclass
class Item:
    cursor: str | None


def make_items(count: int) -> list[Item]:
    return [Item(cursor=f"c{i}") for i in range(count)]


class TestPaginate:
    """Tests for paginate."""

    def test_empty_sequence(self):
        page = paginate([], after=None, page_size=5)

        assert page == Page(items=[], cursor=None, has_more=False)

    @pytest.mark.parametrize("count,page_size", [(10, 3), (3, 3), (2, 5), (1, 1)])
    def test_first_page(self, count, page_size):
        items = make_items(count)

        page = paginate(items, page_size=page_size)

        assert page.items == items[: min(page_size, count)]
        assert page.has_more == (page_size < count)
        assert page.cursor == page.items[-1].cursor

    def test_default_page_size(self):
        items = make_items(45)

        page = paginate(items)

        assert DEFAULT_PAGE_SIZE == 20
        assert len(page.items) == 20
        assert page.has_more is True

    def test_starts_after_cursor(self):
        items = make_items(6)

        page = paginate(items, after="c1", page_size=2)

        assert page.items == items[2:4]
        assert page.cursor == "c3"
        assert page.has_more is True

    def test_unknown_cursor_starts_from_beginning(self):
        items = make_items(4)

        page = paginate(items, after="does-not-exist", page_size=2)

        assert page.items == items[:2]

    def test_cursor_of_last_item_gives_empty_page(self):
        items = make_items(3)

        page = paginate(items, after="c2", page_size=2)

        assert page == Page()

    def test_items_without_cursor_never_match(self):
        items = [Item(cursor=None), Item(cursor="a"), Item(cursor="b")]

        page = paginate(items, after="a", page_size=5)

        assert page.items == [items[2]]
        assert page.has_more is False

    def test_page_size_below_one_gives_empty_page(self):
        assert paginate(make_items(3), page_size=0) == Page()

    def test_get_cursor_fallback(self):
        items = [{"key": "x"}, {"key": "y"}, {"key": "z"}]

        page = paginate(items, after="x", page_size=1, get_cursor=lambda item: item["key"])

        assert page.items == [{"key": "y"}]
        assert page.cursor == "y"
        assert page.has_more is True

    @pytest.mark.parametrize("count,page_size", [(0, 3), (7, 3), (9, 3), (5, 1), (4, 10)])
    def test_traversal_covers_sequence_once(self, count, page_size):
        items = make_items(count)
        seen: list[Item] = []
        after = None

        for _ in range(count + 2):
            page = paginate(items, after=after, page_size=page_size)
            seen.extend(page.items)
            if not page.has_more:
                break
            after = page.cursor

        assert seen == items


class TestMixedDatedAndDatelessLaunches:
    """Launches without a date stay reachable through the cursor."""

    @pytest.fixture
    def launches(self, launch_record):
        records = [
            launch_record(1, 100),
            launch_record(4, None),
            launch_record(2, 200),
            launch_record(5, None),
            launch_record(3, 300),
        ]
        return canonical_order(normalize_launches(records))

    def test_canonical_order(self, launches):
        assert [launch.id for launch in launches] == ["3", "2", "1", "5", "4"]

    def test_page_ending_on_dateless_launch_has_more(self, launches):
        page = paginate(launches, page_size=4)

        assert [launch.id for launch in page.items] == ["3", "2", "1", "5"]
        assert page.cursor == "n5"
        assert page.has_more is True

        rest = paginate(launches, after=page.cursor, page_size=4)
        assert [launch.id for launch in rest.items] == ["4"]
        assert rest.has_more is False

    @pytest.mark.parametrize("page_size", [1, 2, 3, 4, 5])
    def test_traversal_covers_every_launch_once(self, launches, page_size):
        seen: list[str] = []
        after = None

        for _ in range(len(launches) + 2):
            page = paginate(launches, after=after, page_size=page_size)
            seen.extend(launch.id for launch in page.items)
            if not page.has_more:
                break
            after = page.cursor

        assert seen == ["3", "2", "1", "5", "4"]


class TestCanonicalOrder:
    """Tests for canonical_order."""

    def test_reverse_chronological(self):
        launches = [
            Launch(id="2", cursor="200", timestamp=200),
            Launch(id="3", cursor="300", timestamp=300),
            Launch(id="1", cursor="100", timestamp=100),
        ]

        ordered = canonical_order(launches)

        assert [launch.id for launch in ordered] == ["3", "2", "1"]

    def test_launches_without_timestamp_go_last(self):
        launches = [
            Launch(id="9", cursor=None),
            Launch(id="1", cursor="100", timestamp=100),
        ]

        assert [launch.id for launch in canonical_order(launches)] == ["1", "9"]

    def test_does_not_mutate_input(self):
        launches = [
            Launch(id="1", cursor="100", timestamp=100),
            Launch(id="2", cursor="200", timestamp=200),
        ]

        canonical_order(launches)

        assert [launch.id for launch in launches] == ["1", "2"]
