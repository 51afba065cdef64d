"""
URL Utilities

Normalizes user-supplied product links, classifies retailers by hostname
and checks whether a scraped image URL plausibly points at an image.
"""

import re
from typing import Optional
from urllib.parse import quote, urljoin, urlparse, urlunparse

from ..common.constants import IMAGE_CDN_HOSTS, IMAGE_EXTENSIONS, RETAILER_DOMAINS
from ..models import Retailer

_SCHEME_PATTERN = re.compile(r'^[a-z][a-z0-9+.-]*$')
_HOST_PATTERN = re.compile(r'^[a-z0-9._~%-]+$')
_IPV6_PATTERN = re.compile(r'^[0-9a-f:.]+$')
# http(s) scheme followed by a wrong number of slashes, e.g. "https:/amazon.com"
_WEB_SCHEME_PREFIX = re.compile(r'^(https?):/*', re.IGNORECASE)

# Characters kept as-is when re-quoting a path
_PATH_SAFE = "/%:@!$&'()*+,;=-._~"


def _parse_absolute(candidate: str) -> Optional[str]:
    """Return the canonical form of an absolute URL, or None if it is not one."""
    try:
        parsed = urlparse(candidate)
        host = parsed.hostname
        port = parsed.port
    except ValueError:
        return None

    scheme = parsed.scheme.lower()
    if not scheme or not _SCHEME_PATTERN.match(scheme) or not host:
        return None

    if not host.isascii():
        try:
            host = host.encode('idna').decode('ascii')
        except UnicodeError:
            return None

    if ':' in host:
        if not _IPV6_PATTERN.match(host):
            return None
        netloc = f"[{host}]"
    else:
        if not _HOST_PATTERN.match(host) or host.startswith('.') or '..' in host:
            return None
        netloc = host

    if port is not None:
        netloc = f"{netloc}:{port}"

    userinfo = parsed.netloc.rpartition('@')[0]
    if userinfo:
        netloc = f"{userinfo}@{netloc}"

    path = _remove_dot_segments(quote(parsed.path or '/', safe=_PATH_SAFE))

    return urlunparse((scheme, netloc, path, parsed.params, parsed.query, parsed.fragment))


def _remove_dot_segments(path: str) -> str:
    """Resolve ./ and ../ segments (RFC 3986, section 5.2.4)."""
    if not path.startswith('/'):
        path = '/' + path

    output = []
    for segment in path.split('/')[1:]:
        if segment == '..':
            if output:
                output.pop()
        elif segment != '.':
            output.append(segment)

    resolved = '/' + '/'.join(output)
    if path.endswith(('/.', '/..')) and not resolved.endswith('/'):
        resolved += '/'
    return resolved


def normalize_url(url: str) -> str:
    """
    Validate and canonicalize a product link.

    Links typed without a scheme are retried with https://, http(s) links
    with a mistyped number of slashes are repaired and internationalised
    hostnames are converted to punycode.

    Args:
        url: Raw link as entered by the user

    Returns:
        Canonical absolute URL, or "" if the link cannot be repaired

    Examples:
        >>> normalize_url("amazon.com/dp/ABC")
        'https://amazon.com/dp/ABC'
        >>> normalize_url("not a url")
        ''
    """
    if not url or not isinstance(url, str):
        return ""

    candidate = url.strip()
    if not candidate or any(ch.isspace() for ch in candidate):
        return ""

    normalized = _parse_absolute(candidate)
    if normalized:
        return normalized

    typo = _WEB_SCHEME_PREFIX.match(candidate)
    if typo:
        repaired = f"{typo.group(1)}://{candidate[typo.end():]}"
        return _parse_absolute(repaired) or ""

    # Only links typed without a scheme are worth repairing
    if '://' in candidate:
        return ""
    return _parse_absolute(f"https://{candidate}") or ""


def detect_retailer(url: str) -> Retailer:
    """
    Detect the retailer from a URL's hostname.

    Args:
        url: Absolute URL (unparsable input is tolerated)

    Returns:
        Matching Retailer, or Retailer.UNKNOWN
    """
    try:
        hostname = (urlparse(url).hostname or "").lower()
    except (TypeError, ValueError, AttributeError):
        return Retailer.UNKNOWN

    for fragment, name in RETAILER_DOMAINS:
        if fragment in hostname:
            return Retailer(name)

    return Retailer.UNKNOWN


def is_valid_image_url(url: Optional[str]) -> bool:
    """
    Check whether a URL plausibly points to an image.

    Accepts http(s) URLs whose path ends in a known image extension, or
    that are served from a known retailer image CDN.

    Args:
        url: Candidate image URL

    Returns:
        True if the URL looks like an image resource
    """
    if not url or not isinstance(url, str):
        return False

    try:
        parsed = urlparse(url.strip())
        hostname = (parsed.hostname or "").lower()
    except ValueError:
        return False

    if parsed.scheme.lower() not in ('http', 'https') or not hostname:
        return False

    if parsed.path.lower().endswith(IMAGE_EXTENSIONS):
        return True

    return any(hostname == cdn or hostname.endswith('.' + cdn) for cdn in IMAGE_CDN_HOSTS)


def resolve_url(base_url: str, candidate: Optional[str]) -> str:
    """Resolve a relative or protocol-relative link against the page URL."""
    if not candidate:
        return ""
    candidate = candidate.strip()
    if not candidate:
        return ""
    try:
        return urljoin(base_url, candidate)
    except ValueError:
        return ""


def get_origin(url: str) -> str:
    """Return scheme://host/ for a normalized URL."""
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}/"
