"""Base manager class for CSS Import Resolver."""

import logging
from typing import Dict, Any, Optional
from abc import ABC, abstractmethod
from ..utils.error import CSSImportResolverError

class BaseManager(ABC):
    """Base class for session-scoped resource managers."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def check_resources(self) -> bool:
        """Check resource usage against limits.

        Returns:
            True while usage is within limits
        """
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get resource usage statistics."""
        pass

    def log_error(self, message: str, error: Optional[Exception] = None) -> None:
        if error:
            self.logger.error(f"{message}: {error}")
        else:
            self.logger.error(message)

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)

    def log_info(self, message: str) -> None:
        self.logger.info(message)

    def log_debug(self, message: str) -> None:
        self.logger.debug(message)

    def handle_error(self, error: Exception, message: str,
                     error_class: type = CSSImportResolverError) -> None:
        """Log an error and re-raise it as a resolver error.

        Args:
            error: Exception to handle
            message: Error message
            error_class: Exception type to raise

        Raises:
            CSSImportResolverError: Always, chained to ``error``
        """
        self.log_error(message, error)
        raise error_class(f"{message}: {error}") from error

    def cleanup(self) -> None:
        """Release held resources."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup()

# Exported class
__all__ = ['BaseManager']
