#!/usr/bin/env python3
"""
Single Product Preview

Fetches the preview (name, price, image) for one product link and prints a
report. Retailer is auto-detected from the URL.

Usage:
    python3 fetch_metadata.py --url https://www.amazon.com/dp/B0XXX
    python3 fetch_metadata.py --url target.com/p/item --output-json out/preview.json
    python3 fetch_metadata.py --url https://shop.example.com/item --timeout 4 --verbose

Environment (.env supported):
    GIFTLIST_CONFIG         Path to a fetch settings YAML file
    GIFTLIST_FETCH_TIMEOUT  Request timeout in seconds
"""

import argparse
import json
import logging
import os
import sys
from dataclasses import replace

from dotenv import load_dotenv

from giftlist.common import load_fetch_settings, setup_logging
from giftlist.common.settings import FetchSettings
from giftlist.extraction import MetadataService, detect_retailer, normalize_url
from giftlist.models import ProductMetadata

logger = logging.getLogger(__name__)


def resolve_settings(config_path: str = None, timeout: float = None) -> FetchSettings:
    """Build fetch settings from config file, environment and CLI overrides."""
    config_path = config_path or os.environ.get("GIFTLIST_CONFIG")
    if config_path:
        settings = load_fetch_settings(config_path)
    else:
        try:
            settings = load_fetch_settings()
        except FileNotFoundError:
            logger.debug("No config/fetch_settings.yaml found, using defaults")
            settings = FetchSettings()

    if timeout is None and os.environ.get("GIFTLIST_FETCH_TIMEOUT"):
        timeout = float(os.environ["GIFTLIST_FETCH_TIMEOUT"])
    if timeout is not None:
        settings = replace(settings, timeout=timeout)

    return settings


def print_report(url: str, normalized: str, metadata: ProductMetadata):
    """Print a preview report."""
    print("\n" + "=" * 80)
    print("PRODUCT PREVIEW")
    print("=" * 80)

    print(f"\nInput URL: {url}")
    print(f"Normalized: {normalized or 'INVALID'}")
    print(f"Retailer: {metadata.retailer}")

    print("\n" + "-" * 80)
    fields = [
        ("Name", metadata.name),
        ("Price", f"{metadata.price:.2f}" if metadata.price is not None else ""),
        ("Image", metadata.image_url),
    ]
    for label, value in fields:
        status = "OK" if value else "MISSING"
        print(f"  [{status:7}] {label:10} {value or 'MISSING'}")

    print("\n" + "-" * 80)
    if metadata.success:
        print("\n  Preview fetched successfully")
    else:
        print(f"\n  FAILED: {metadata.error}")

    print("\n" + "=" * 80)


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Fetch a product preview for a wishlist link"
    )
    parser.add_argument(
        "--url",
        required=True,
        help="Product URL (scheme optional)"
    )
    parser.add_argument(
        "--output-json",
        help="Write the result as JSON to this path"
    )
    parser.add_argument(
        "--config",
        help="Fetch settings YAML (default: config/fetch_settings.yaml)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Debug logging and full JSON output"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    normalized = normalize_url(args.url)
    print(f"Fetching from: {detect_retailer(normalized).value}")
    print(f"URL: {args.url}")

    try:
        settings = resolve_settings(args.config, args.timeout)
    except (FileNotFoundError, ValueError) as e:
        print(f"\nConfiguration error: {e}")
        sys.exit(2)

    metadata = MetadataService(settings).fetch_metadata(args.url)
    print_report(args.url, normalized, metadata)

    if args.output_json:
        output_dir = os.path.dirname(args.output_json)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(args.output_json, 'w', encoding='utf-8') as f:
            json.dump(metadata.to_dict(), f, indent=2, ensure_ascii=False)
        print(f"\nResult saved to: {args.output_json}")

    if args.verbose:
        print(json.dumps(metadata.to_dict(), indent=2, ensure_ascii=False))

    sys.exit(0 if metadata.success else 1)


if __name__ == "__main__":
    main()
