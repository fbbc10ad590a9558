"""Resolve stylesheets and their @import rules into ordered fragments."""

from .core import (
    StylesheetDescriptor,
    ResolveOptions,
    resolve_stylesheet,
    resolve_stylesheets,
    resolve_stylesheets_sync,
    flatten_results,
    convert_data_to_stylesheet,
    parse_stylesheet,
    is_cross_origin,
)
from .managers import ImportRegistry, NetworkManager
from .utils.config import VERSION as __version__
from .utils.error import (
    CSSImportResolverError,
    FetchError,
    AssemblyError,
    ConfigurationError,
)

__all__ = [
    'StylesheetDescriptor',
    'ResolveOptions',
    'resolve_stylesheet',
    'resolve_stylesheets',
    'resolve_stylesheets_sync',
    'flatten_results',
    'convert_data_to_stylesheet',
    'parse_stylesheet',
    'is_cross_origin',
    'ImportRegistry',
    'NetworkManager',
    'CSSImportResolverError',
    'FetchError',
    'AssemblyError',
    'ConfigurationError',
]
