"""Configuration utility for CSS Import Resolver."""

# Project version
VERSION = "1.0.0"

# Import-count ceiling per resolution session
MAX_IMPORT_URLS = 10

# Timeouts (in seconds)
REQUEST_TIMEOUT = 30

# Connection pool / worker threads used for fetching
POOL_SIZE = 10

# User-Agent for requests
USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) '
    'AppleWebKit/537.36 (KHTML, like Gecko) '
    'Chrome/91.0.4472.124 Safari/537.36'
)

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Exported config
__all__ = [
    'VERSION',
    'MAX_IMPORT_URLS',
    'REQUEST_TIMEOUT', 'POOL_SIZE',
    'USER_AGENT',
    'LOG_FORMAT', 'LOG_DATE_FORMAT',
]
