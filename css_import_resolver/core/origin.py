"""Origin classification of import hrefs."""

import re

# Absolute http(s) URLs and protocol-relative URLs leave the document's origin
_CROSS_ORIGIN_PATTERN = re.compile(r'^https?://|^//', re.IGNORECASE)

def is_cross_origin(href: str) -> bool:
    """Classify an href as cross-origin or same-origin.

    Args:
        href: Href of an ``@import`` rule

    Returns:
        True for ``http://``, ``https://`` and ``//`` hrefs, False otherwise
    """
    return bool(_CROSS_ORIGIN_PATTERN.match(href or ''))

# Exported functions
__all__ = ['is_cross_origin']
