"""Error utility for CSS Import Resolver."""

class CSSImportResolverError(Exception):
    """Base exception for CSS Import Resolver."""
    pass

class FetchError(CSSImportResolverError):
    """Raised when an imported stylesheet cannot be fetched."""
    pass

class AssemblyError(CSSImportResolverError):
    """Raised when fetched data cannot be turned into a stylesheet."""
    pass

class ConfigurationError(CSSImportResolverError):
    """Raised when configuration is invalid."""
    pass

# Exported exceptions
__all__ = [
    'CSSImportResolverError',
    'FetchError',
    'AssemblyError',
    'ConfigurationError',
]
