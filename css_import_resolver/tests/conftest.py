"""Pytest configuration for CSS Import Resolver tests."""

import asyncio
import logging
import pytest

from ..core.descriptor import ResolveOptions
from ..core.rules import IMPORT_RULE
from ..managers.registry import ImportRegistry
from ..utils.error import FetchError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

STYLE_RULE = 1

class FakeRule:
    """Minimal stand-in for a CSSOM rule."""

    def __init__(self, css_text='', type=STYLE_RULE, href=None):
        self.cssText = css_text
        self.type = type
        self.href = href

def import_rule(href):
    return FakeRule(f'@import "{href}";', type=IMPORT_RULE, href=href)

def style_rule(css_text):
    return FakeRule(css_text)

class FakeSheet:
    """Minimal stand-in for a stylesheet exposing ``cssRules``."""

    def __init__(self, rules=None):
        self.cssRules = rules

class FakeFetcher:
    """Async fetcher serving CSS text from a dict and recording calls.

    ``delays`` lets a test make earlier imports finish later.
    """

    def __init__(self, resources, delays=None, failures=()):
        self.resources = resources
        self.delays = delays or {}
        self.failures = set(failures)
        self.calls = []

    async def __call__(self, url, timeout=None):
        self.calls.append((url, timeout))
        await asyncio.sleep(self.delays.get(url, 0))
        if url in self.failures or url not in self.resources:
            raise FetchError(f"Failed to fetch {url}")
        return self.resources[url]

    @property
    def urls(self):
        return [url for url, _ in self.calls]

@pytest.fixture
def registry():
    """Fresh import registry."""
    return ImportRegistry(max_import_urls=10)

@pytest.fixture
def make_options():
    """Factory for resolve options around a fetcher."""
    def _make(fetcher, **kwargs):
        kwargs.setdefault('root_node', 'document')
        kwargs.setdefault('shadow_id', None)
        kwargs.setdefault('timeout', 5)
        return ResolveOptions(fetch=fetcher, **kwargs)
    return _make

@pytest.fixture(scope='session')
def sample_css():
    """Return sample CSS content for testing."""
    return """
    body {
        color: #333;
        font-family: Arial, sans-serif;
    }

    .container {
        max-width: 1200px;
        margin: 0 auto;
    }
    """
