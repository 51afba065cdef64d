"""
Fetch Settings

Immutable configuration for product page requests. Defaults mimic organic
desktop browser traffic; tests and scripts pass their own instance.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

DEFAULT_HEADERS = {
    "User-Agent": DEFAULT_USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,"
              "image/avif,image/webp,image/apng,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    # requests only decodes brotli when the optional brotli package is present
    "Accept-Encoding": "gzip, deflate",
    "DNT": "1",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-Site": "none",
    "Cache-Control": "max-age=0",
}

DEFAULT_BOT_MARKERS = (
    "captcha",
    "api-services-support@amazon.com",
    "Robot Check",
)


@dataclass(frozen=True)
class FetchSettings:
    """Request configuration for ProductPageFetcher."""
    timeout: float = 8.0
    max_redirects: int = 5
    headers: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    bot_check_max_length: int = 10_000
    bot_markers: Tuple[str, ...] = DEFAULT_BOT_MARKERS

    def __post_init__(self):
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.max_redirects < 0:
            raise ValueError(f"max_redirects must not be negative, got {self.max_redirects}")
