"""Shared test fixtures."""

from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from giftlist.common.settings import FetchSettings
from giftlist.models import WishlistItem

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_response(status_code: int = 200, text: str = "") -> MagicMock:
    """Create a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def load_fixture():
    """Return a loader for HTML fixtures by file name."""
    def _load(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")
    return _load


@pytest.fixture
def amazon_html(load_fixture):
    return load_fixture("amazon_product.html")


@pytest.fixture
def robot_check_html(load_fixture):
    return load_fixture("robot_check.html")


@pytest.fixture
def fast_settings():
    """Fetch settings with a short timeout for tests."""
    return FetchSettings(timeout=0.5)


@pytest.fixture
def mock_session():
    """A requests.Session stand-in returning an empty 200 page."""
    session = MagicMock()
    session.get.return_value = make_response(200, "<html></html>")
    return session


@pytest.fixture
def now():
    """Fixed reference time for staleness checks."""
    return datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def linked_item():
    """Item with a link that has never been fetched."""
    return WishlistItem(
        id=1,
        name="Widget",
        link="https://www.amazon.com/dp/B0WIDGET",
        price=20.0,
    )
