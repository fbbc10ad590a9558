"""Conversion of fetched CSS data into stylesheet descriptors."""

import logging
import xml.dom
from typing import Any, Optional, Sequence, Union

import cssutils

from .descriptor import StylesheetDescriptor
from ..utils.error import AssemblyError
from ..utils.url import detect_encoding

logger = logging.getLogger(__name__)

# cssutils reports every unknown property; keep it quiet
cssutils.log.setLevel(logging.CRITICAL)

def _no_fetch(url: str) -> None:
    """cssutils fetcher that never loads imports; the resolver owns fetching."""
    return None

def decode_data(data: Union[str, bytes]) -> str:
    """Turn a fetched payload into text.

    Args:
        data: Payload as returned by the fetcher

    Returns:
        Decoded CSS text

    Raises:
        AssemblyError: If the payload is not text or cannot be decoded
    """
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray)):
        encoding = detect_encoding(bytes(data))
        try:
            return bytes(data).decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise AssemblyError(f"Cannot decode stylesheet data as {encoding}: {e}")
    raise AssemblyError(f"Stylesheet data must be text, got {type(data).__name__}")

def parse_stylesheet(text: str, href: Optional[str] = None, strict: bool = False) -> Any:
    """Parse CSS text into a cssutils stylesheet.

    ``@import`` rules are kept as rules; their targets are not loaded.

    Args:
        text: CSS text
        href: Optional href recorded on the sheet
        strict: Raise on syntax errors instead of skipping them

    Returns:
        cssutils ``CSSStyleSheet``

    Raises:
        AssemblyError: If parsing fails
    """
    parser = cssutils.CSSParser(raiseExceptions=strict, fetcher=_no_fetch,
                                validate=False)
    try:
        return parser.parseString(text, href=href)
    except (xml.dom.DOMException, ValueError) as e:
        raise AssemblyError(f"Invalid stylesheet data: {e}")

def convert_data_to_stylesheet(data: Union[str, bytes],
                               is_cross_origin: bool = False,
                               priority: Sequence[int] = (),
                               root: Any = None,
                               shadow_id: Optional[str] = None,
                               strict: bool = False) -> StylesheetDescriptor:
    """Build a descriptor from raw stylesheet data.

    Args:
        data: Fetched payload or concatenated rule text
        is_cross_origin: Origin classification of the payload
        priority: Priority path of the resulting fragment
        root: Containing document/tree
        shadow_id: Shadow tree id
        strict: Raise on syntax errors instead of skipping them

    Returns:
        StylesheetDescriptor wrapping the parsed sheet

    Raises:
        AssemblyError: If the data is malformed
    """
    text = decode_data(data)
    sheet = parse_stylesheet(text, strict=strict)
    logger.debug(f"Assembled stylesheet at priority {list(priority)} "
                 f"({len(sheet.cssRules)} rules)")
    return StylesheetDescriptor(
        sheet=sheet,
        is_cross_origin=is_cross_origin,
        priority=tuple(priority),
        root=root,
        shadow_id=shadow_id
    )

# Exported functions
__all__ = ['decode_data', 'parse_stylesheet', 'convert_data_to_stylesheet']
