"""
Product Page Fetcher

Downloads a product page with browser-like headers and translates every
anticipated failure (timeouts, blocks, missing pages, CAPTCHA interstitials)
into a FetchError carrying a user-facing reason.
"""

from __future__ import annotations

import logging

import requests

from ..common.constants import (
    ACCESS_BLOCKED,
    BLOCKED_STATUS_CODES,
    BOT_DETECTED,
    FETCH_FAILED,
    NOT_FOUND_STATUS_CODES,
    PRODUCT_NOT_FOUND,
    REQUEST_TIMEOUT,
)
from ..common.settings import FetchSettings
from ..models import Retailer
from .url_utils import get_origin

logger = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """A product page could not be fetched; `reason` is the user-facing message."""

    def __init__(self, reason: str, status_code: int | None = None):
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


def reason_for_status(status_code: int) -> str:
    """Map an HTTP error status to a failure reason."""
    if status_code in BLOCKED_STATUS_CODES:
        return ACCESS_BLOCKED
    if status_code in NOT_FOUND_STATUS_CODES:
        return PRODUCT_NOT_FOUND
    return FETCH_FAILED


class ProductPageFetcher:
    """
    Fetches product page HTML.

    Usage:
        fetcher = ProductPageFetcher(FetchSettings(timeout=5))
        html = fetcher.fetch("https://www.amazon.com/dp/B0XXX", Retailer.AMAZON)
    """

    def __init__(
        self,
        settings: FetchSettings | None = None,
        session: requests.Session | None = None,
    ):
        """
        Initialize the fetcher.

        Args:
            settings: Request configuration (defaults to FetchSettings())
            session: Optional shared session; a fresh one is opened per call otherwise
        """
        self.settings = settings or FetchSettings()
        self._session = session

    def build_headers(self, url: str, retailer: Retailer) -> dict:
        """Request headers for a page, with a same-site Referer for Amazon."""
        headers = dict(self.settings.headers)
        if retailer == Retailer.AMAZON:
            headers["Referer"] = get_origin(url)
        return headers

    def fetch(self, url: str, retailer: Retailer = Retailer.UNKNOWN) -> str:
        """
        Fetch a normalized product URL.

        Args:
            url: Normalized absolute URL
            retailer: Retailer detected for the URL

        Returns:
            Page HTML

        Raises:
            FetchError: On timeout, HTTP error, transport error or bot block
        """
        headers = self.build_headers(url, retailer)

        if self._session is not None:
            html = self._get(self._session, url, headers)
        else:
            with requests.Session() as session:
                html = self._get(session, url, headers)

        if self.is_bot_block(html):
            logger.warning("Bot detection page returned for %s", url)
            raise FetchError(BOT_DETECTED)

        return html

    def _get(self, session: requests.Session, url: str, headers: dict) -> str:
        session.max_redirects = self.settings.max_redirects

        try:
            response = session.get(
                url,
                headers=headers,
                timeout=self.settings.timeout,
                allow_redirects=True,
            )
        except requests.exceptions.Timeout as e:
            logger.warning("Timed out fetching %s: %s", url, e)
            raise FetchError(REQUEST_TIMEOUT) from e
        except requests.exceptions.RequestException as e:
            logger.warning("Request failed for %s: %s", url, e)
            raise FetchError(FETCH_FAILED) from e

        if response.status_code >= 400:
            reason = reason_for_status(response.status_code)
            logger.warning("HTTP %d for %s (%s)", response.status_code, url, reason)
            raise FetchError(reason, status_code=response.status_code)

        logger.debug("Fetched %s (%d chars)", url, len(response.text or ""))
        return response.text or ""

    def is_bot_block(self, html: str) -> bool:
        """True if a short page carries a CAPTCHA/robot-check marker."""
        if len(html) >= self.settings.bot_check_max_length:
            return False
        return any(marker in html for marker in self.settings.bot_markers)
