"""Tests for giftlist/items/refresh.py"""

from dataclasses import replace
from datetime import date, datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import pytest

from giftlist.items.refresh import (
    ItemRefresher,
    apply_metadata,
    is_metadata_stale,
    should_refresh_metadata,
)
from giftlist.models import ProductMetadata, Retailer, WishlistItem


def success(name="Widget", price=19.99, image_url="https://m.media-amazon.com/images/I/w.jpg"):
    return ProductMetadata.from_fields(Retailer.AMAZON, name, price, image_url, "unused")


class TestIsMetadataStale:
    def test_never_fetched(self, now):
        assert is_metadata_stale(None, now) is True

    def test_exactly_24_hours(self, now):
        assert is_metadata_stale(now - timedelta(hours=24), now) is True

    def test_just_under_24_hours(self, now):
        assert is_metadata_stale(now - timedelta(hours=23, minutes=59), now) is False

    def test_older(self, now):
        assert is_metadata_stale(now - timedelta(days=3), now) is True

    def test_naive_timestamp_treated_as_utc(self, now):
        naive = (now - timedelta(hours=1)).replace(tzinfo=None)
        assert is_metadata_stale(naive, now) is False

    def test_defaults_to_current_time(self):
        assert is_metadata_stale(datetime.now(timezone.utc) - timedelta(hours=25)) is True


class TestShouldRefreshMetadata:
    def test_no_link(self, now):
        assert should_refresh_metadata(WishlistItem(id=1, name="Socks"), now) is False

    def test_never_fetched(self, linked_item, now):
        assert should_refresh_metadata(linked_item, now) is True

    def test_recently_fetched(self, linked_item, now):
        item = replace(linked_item, last_fetched_at=now - timedelta(hours=2))
        assert should_refresh_metadata(item, now) is False


class TestApplyMetadata:
    def test_success_copies_fields(self, linked_item, now):
        item = replace(linked_item, fetch_error="Request timeout")

        updated = apply_metadata(item, success(), fetched_at=now)

        assert updated.fetched_name == "Widget"
        assert updated.fetched_price == pytest.approx(19.99)
        assert updated.image_url == "https://m.media-amazon.com/images/I/w.jpg"
        assert updated.retailer == "Amazon"
        assert updated.fetch_error is None
        assert updated.last_fetched_at == now
        assert updated.snapshot_date == date(2026, 3, 1)

    def test_user_fields_untouched(self, linked_item, now):
        updated = apply_metadata(linked_item, success(name="Other"), fetched_at=now)
        assert updated.name == "Widget"
        assert updated.price == 20.0
        assert updated.link == linked_item.link

    def test_failure_keeps_previous_preview(self, linked_item, now):
        item = replace(linked_item, fetched_name="Old Name", fetched_price=10.0,
                       image_url="https://m.media-amazon.com/images/I/old.jpg")
        failure = ProductMetadata.failure("Access blocked by retailer", Retailer.AMAZON)

        updated = apply_metadata(item, failure, fetched_at=now)

        assert updated.fetched_name == "Old Name"
        assert updated.fetched_price == 10.0
        assert updated.image_url == "https://m.media-amazon.com/images/I/old.jpg"
        assert updated.fetch_error == "Access blocked by retailer"
        assert updated.last_fetched_at == now

    def test_does_not_modify_input(self, linked_item, now):
        apply_metadata(linked_item, success(), fetched_at=now)
        assert linked_item.fetched_name is None
        assert linked_item.last_fetched_at is None


class TestItemRefresher:
    @pytest.fixture
    def service(self):
        service = MagicMock()
        service.fetch_metadata.return_value = success()
        return service

    @pytest.fixture
    def items(self, now):
        return [
            WishlistItem(id=1, name="Never fetched", link="https://www.amazon.com/dp/1"),
            WishlistItem(id=2, name="Fresh", link="https://www.amazon.com/dp/2",
                         last_fetched_at=now - timedelta(hours=1)),
            WishlistItem(id=3, name="No link"),
            WishlistItem(id=4, name="Stale", link="https://www.amazon.com/dp/4",
                         last_fetched_at=now - timedelta(hours=30)),
        ]

    def test_refreshes_only_due_items(self, service, items, now):
        report = ItemRefresher(service, delay=0).refresh(items, now=now)

        fetched = [c.args[0] for c in service.fetch_metadata.call_args_list]
        assert fetched == ["https://www.amazon.com/dp/1", "https://www.amazon.com/dp/4"]
        assert (report.refreshed, report.failed, report.skipped) == (2, 0, 2)
        assert [item.id for item in report.items] == [1, 2, 3, 4]
        assert report.items[0].fetched_name == "Widget"
        assert report.items[1] is items[1]

    def test_force_refreshes_all_linked(self, service, items, now):
        report = ItemRefresher(service, delay=0).refresh(items, force=True, now=now)
        assert service.fetch_metadata.call_count == 3
        assert report.skipped == 1

    def test_counts_failures(self, service, items, now):
        service.fetch_metadata.return_value = ProductMetadata.failure("Request timeout", Retailer.AMAZON)

        report = ItemRefresher(service, delay=0).refresh(items, now=now)

        assert report.failed == 2
        assert report.items[0].fetch_error == "Request timeout"

    def test_delay_between_requests(self, service, items, now):
        with patch("giftlist.items.refresh.time.sleep") as sleep:
            ItemRefresher(service, delay=1.5).refresh(items, now=now)
        sleep.assert_called_once_with(1.5)

    def test_empty_list(self, service):
        report = ItemRefresher(service, delay=0).refresh([])
        assert report.items == []
        service.fetch_metadata.assert_not_called()

    def test_item_loaded_with_blank_timestamp_is_refreshed(self, service, now):
        item = WishlistItem.from_dict({
            "id": 9,
            "name": "Lamp",
            "link": "https://www.amazon.com/dp/9",
            "last_fetched_at": "",
        })

        report = ItemRefresher(service, delay=0).refresh([item], now=now)

        assert report.refreshed == 1
        assert report.items[0].last_fetched_at is not None
