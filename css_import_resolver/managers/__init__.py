"""Session-scoped managers for CSS Import Resolver."""

from .base import BaseManager
from .registry import ImportRegistry
from .network import NetworkManager

# Exported classes
__all__ = [
    'BaseManager',
    'ImportRegistry',
    'NetworkManager',
]
