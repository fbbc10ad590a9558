"""Stylesheet descriptors and resolution options."""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Union

from ..utils.config import MAX_IMPORT_URLS, REQUEST_TIMEOUT
from ..utils.error import ConfigurationError

Priority = Tuple[int, ...]

@dataclass(frozen=True)
class StylesheetDescriptor:
    """One resolved stylesheet fragment and where it came from."""
    sheet: Any
    is_cross_origin: bool = False
    priority: Priority = ()
    root: Any = None
    shadow_id: Optional[str] = None

    @property
    def css_text(self) -> str:
        """Serialized text of the wrapped sheet (empty if it has none)."""
        text = getattr(self.sheet, 'cssText', '')
        if isinstance(text, bytes):
            return text.decode('utf-8')
        return text or ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'priority': list(self.priority),
            'isCrossOrigin': self.is_cross_origin,
            'shadowId': self.shadow_id,
            'cssText': self.css_text,
        }

# A leaf descriptor, a branch of nested results, or nothing at all
ResolveResult = Union[StylesheetDescriptor, List['ResolveResult'], None]

Fetcher = Callable[..., Awaitable[Union[str, bytes]]]
Assembler = Callable[..., Union[StylesheetDescriptor, Awaitable[StylesheetDescriptor]]]

def _default_assembler(*args, **kwargs):
    # Imported lazily: the assembler module depends on this one
    from .assembler import convert_data_to_stylesheet
    return convert_data_to_stylesheet(*args, **kwargs)

@dataclass
class ResolveOptions:
    """Options threaded through every recursive resolution call.

    Attributes:
        fetch: Async callable ``fetch(url, timeout=...)`` returning the payload
        root_node: Containing document/tree, passed through untouched
        shadow_id: Shadow tree id, passed through untouched
        timeout: Per-fetch timeout in seconds
        convert_data_to_stylesheet: Assembler turning payloads into descriptors
        max_import_urls: Import-count ceiling for one session
    """
    fetch: Optional[Fetcher] = None
    root_node: Any = None
    shadow_id: Optional[str] = None
    timeout: float = REQUEST_TIMEOUT
    convert_data_to_stylesheet: Assembler = field(default=_default_assembler)
    max_import_urls: int = MAX_IMPORT_URLS

    def validate(self, require_fetch: bool = True) -> None:
        """Check option values.

        Args:
            require_fetch: Whether a missing fetcher is an error

        Raises:
            ConfigurationError: If any option is invalid
        """
        if self.fetch is None and require_fetch:
            raise ConfigurationError("A fetch callable is required")
        if self.fetch is not None and not callable(self.fetch):
            raise ConfigurationError("fetch must be callable")
        if not callable(self.convert_data_to_stylesheet):
            raise ConfigurationError("convert_data_to_stylesheet must be callable")
        if self.timeout is None or self.timeout <= 0:
            raise ConfigurationError("Timeout must be positive")
        if self.max_import_urls < 0:
            raise ConfigurationError("Import ceiling cannot be negative")

# Exported names
__all__ = [
    'Priority',
    'StylesheetDescriptor',
    'ResolveResult',
    'ResolveOptions',
    'Fetcher',
    'Assembler',
]
