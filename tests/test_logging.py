"""
Tests for the per-request log context
"""

import logging

import pytest
from structlog.contextvars import get_contextvars

from launchgate.logging import (
    bind_user_id,
    clear_request_context,
    configure_logging,
    set_request_context,
)


@pytest.fixture(autouse=True)
def clean_context():
    clear_request_context()
    yield
    clear_request_context()


class TestRequestContext:
    def test_generates_request_id(self):
        request_id = set_request_context()

        assert len(request_id) == 16
        assert get_contextvars() == {"request_id": request_id}

    def test_keeps_caller_request_id(self):
        assert set_request_context("abc-123") == "abc-123"

    @pytest.mark.parametrize("supplied", ["", "x" * 65, "bad\nid"])
    def test_replaces_unusable_request_id(self, supplied):
        assert set_request_context(supplied) != supplied

    def test_new_request_drops_previous_user(self):
        set_request_context("first")
        bind_user_id("7")
        assert get_contextvars() == {"request_id": "first", "user_id": "7"}

        set_request_context("second")

        assert get_contextvars() == {"request_id": "second"}

    def test_clear(self):
        set_request_context("r")
        bind_user_id("1")

        clear_request_context()

        assert get_contextvars() == {}


class TestConfigureLogging:
    @pytest.mark.parametrize(
        "debug, level, expected",
        [
            (False, None, logging.INFO),
            (True, None, logging.DEBUG),
            (True, "warning", logging.WARNING),
            (False, "nonsense", logging.INFO),
        ],
    )
    def test_root_level(self, debug, level, expected):
        configure_logging(debug=debug, level=level)

        assert logging.getLogger().level == expected
