"""URL and local path handling for import hrefs."""

import os
import logging
from typing import Optional
from urllib.parse import urljoin, urlparse

import chardet

def is_valid_url(url: str) -> bool:
    """Check if string is an absolute URL with scheme and host.

    Args:
        url: URL to check

    Returns:
        True if valid URL
    """
    try:
        result = urlparse(url)
        return all([result.scheme, result.netloc])
    except Exception:
        return False

def is_protocol_relative(url: str) -> bool:
    """Check if URL is protocol-relative (``//host/path``)."""
    return url.startswith('//')

def is_file_url(url: str) -> bool:
    """Check if URL uses the ``file:`` scheme."""
    return urlparse(url).scheme == 'file'

def resolve_href(href: str, base: Optional[str] = None) -> str:
    """Resolve an import href into something fetchable.

    Protocol-relative hrefs are pinned to https. Relative hrefs are joined
    onto ``base``, which may be a URL or a local file/directory path.

    Args:
        href: Href as written in the ``@import`` rule
        base: Optional base URL or path

    Returns:
        Absolute URL or local path
    """
    if is_protocol_relative(href):
        return f"https:{href}"
    if is_valid_url(href) or is_file_url(href):
        return href
    if not base:
        return href
    if is_valid_url(base):
        return urljoin(base, href)

    # Local base: a file resolves against its directory
    if is_file_url(base):
        base = urlparse(base).path
    base_dir = base if os.path.isdir(base) else os.path.dirname(base)
    if href.startswith('/'):
        return os.path.normpath(href)
    return os.path.normpath(os.path.join(base_dir, href))

def to_local_path(location: str) -> str:
    """Strip a ``file:`` scheme from a location, if present."""
    if is_file_url(location):
        return urlparse(location).path
    return location

def detect_encoding(raw_data: bytes) -> str:
    """Detect the encoding of raw stylesheet bytes.

    Args:
        raw_data: Undecoded payload

    Returns:
        Detected encoding, utf-8 when detection fails
    """
    try:
        result = chardet.detect(raw_data)
        return result['encoding'] or 'utf-8'
    except Exception as e:
        logging.error(f"Error detecting encoding: {e}")
        return 'utf-8'

# Exported functions
__all__ = [
    'is_valid_url',
    'is_protocol_relative',
    'is_file_url',
    'resolve_href',
    'to_local_path',
    'detect_encoding',
]
