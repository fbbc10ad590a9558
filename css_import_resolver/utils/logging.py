"""Logging utility for CSS Import Resolver."""

import logging
import os
from typing import Optional

import cssutils

from .config import LOG_FORMAT, LOG_DATE_FORMAT

def setup_logging(log_level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """Set up logging configuration.

    Args:
        log_level: Root log level
        log_file: Optional file to log to in addition to stderr
    """
    handlers = [logging.StreamHandler()]
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers
    )

    # cssutils reports every unknown property; keep it quiet
    cssutils.log.setLevel(logging.CRITICAL)

def get_logger(name):
    """Get a logger instance for the specified module.
    
    Args:
        name: Name of the module
        
    Returns:
        Logger instance
    """
    return logging.getLogger(name)

# Exported functions
__all__ = ['setup_logging', 'get_logger']
