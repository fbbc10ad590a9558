"""Recursive resolution of ``@import`` rules into stylesheet fragments.

A top-level sheet is resolved into a tree of results: each fetched import
becomes a branch that is itself resolved, and the sheet's own non-import
rules become one extra fragment. Every fragment carries a priority path so
that document order can be recovered after the concurrent branches finish
in arbitrary order.
"""

import asyncio
import dataclasses
import inspect
import logging
from typing import Any, List, Sequence

from .descriptor import ResolveOptions, ResolveResult, StylesheetDescriptor
from .origin import is_cross_origin as classify_origin
from .priority import child_priority, priority_sort_key
from .rules import get_import_href, get_rules, partition_rules, rules_to_text
from ..managers.network import NetworkManager
from ..managers.registry import ImportRegistry

logger = logging.getLogger(__name__)

async def _assemble(options: ResolveOptions, data: Any, is_cross_origin: bool,
                    priority: Sequence[int]) -> StylesheetDescriptor:
    result = options.convert_data_to_stylesheet(
        data=data,
        is_cross_origin=is_cross_origin,
        priority=tuple(priority),
        root=options.root_node,
        shadow_id=options.shadow_id
    )
    if inspect.isawaitable(result):
        result = await result
    return result

async def _resolve_import(href: str, options: ResolveOptions, priority: Sequence[int],
                          registry: ImportRegistry) -> ResolveResult:
    """Fetch one import and resolve whatever it imports in turn."""
    cross_origin = classify_origin(href)
    logger.debug(f"Fetching {href} at priority {list(priority)}")
    data = await options.fetch(href, timeout=options.timeout)
    result = await _assemble(options, data, cross_origin, priority)

    # Guard against cyclic or explosive import graphs
    if not registry.check_resources():
        logger.warning(f"Not following imports of {href}")
        return result

    return await resolve_stylesheet(result.sheet, options, priority, registry,
                                    is_cross_origin=cross_origin)

async def resolve_stylesheet(sheet: Any, options: ResolveOptions,
                             priority: Sequence[int], registry: ImportRegistry,
                             is_cross_origin: bool = False) -> ResolveResult:
    """Resolve a stylesheet and everything it imports.

    Args:
        sheet: Object exposing ``cssRules``
        options: Resolution options (fetcher, assembler, ceiling, ...)
        priority: Priority path of ``sheet``, empty for a top-level sheet
        registry: Hrefs already fetched in this session, shared by reference;
            its ceiling stops recursion
        is_cross_origin: Origin stamped on fragments made from ``sheet`` itself

    Returns:
        None for a sheet without rules, a single descriptor for a sheet
        without imports, otherwise a list of nested results

    Raises:
        FetchError: If any import cannot be fetched
        AssemblyError: If any fetched payload cannot be assembled
    """
    priority = tuple(priority)
    rules = get_rules(sheet)
    if not rules:
        return None

    import_rules, other_rules = partition_rules(rules)
    if not import_rules:
        return StylesheetDescriptor(
            sheet=sheet,
            is_cross_origin=is_cross_origin,
            priority=priority,
            root=options.root_node,
            shadow_id=options.shadow_id
        )

    # Registration happens before the first await so that concurrent
    # branches can never dispatch the same href twice
    to_fetch = []
    for rule in import_rules:
        href = get_import_href(rule)
        if href is not None and registry.register(href):
            to_fetch.append(href)

    branches = [
        _resolve_import(href, options, child_priority(priority, index), registry)
        for index, href in enumerate(to_fetch)
    ]
    if other_rules:
        branches.append(_assemble(options, rules_to_text(other_rules),
                                  is_cross_origin, priority))

    # Fail fast: siblings of a failed branch keep running uncancelled and
    # gather retrieves their late exceptions
    return list(await asyncio.gather(*branches))

def flatten_results(result: ResolveResult) -> List[StylesheetDescriptor]:
    """Flatten nested results and sort them into cascade order.

    Args:
        result: Value returned by ``resolve_stylesheet``

    Returns:
        Descriptors sorted by priority path
    """
    descriptors = []
    pending = [result]
    while pending:
        item = pending.pop()
        if item is None:
            continue
        if isinstance(item, StylesheetDescriptor):
            descriptors.append(item)
        else:
            pending.extend(item)
    return sorted(descriptors, key=lambda d: priority_sort_key(d.priority))

async def _resolve_session(sheet: Any, options: ResolveOptions,
                           is_cross_origin: bool) -> List[StylesheetDescriptor]:
    registry = ImportRegistry(max_import_urls=options.max_import_urls)
    result = await resolve_stylesheet(sheet, options, (), registry, is_cross_origin)
    descriptors = flatten_results(result)
    logger.info(f"Resolved {len(descriptors)} stylesheet fragments "
                f"from {len(registry)} imports")
    return descriptors

async def resolve_stylesheets(sheet: Any, options: ResolveOptions,
                              is_cross_origin: bool = False) -> List[StylesheetDescriptor]:
    """Resolve a top-level stylesheet into ordered fragments.

    Starts a fresh session: empty priority path and a new registry bounded
    by ``options.max_import_urls``. Without a configured fetcher a
    ``NetworkManager`` is used for the session.

    Args:
        sheet: Object exposing ``cssRules``
        options: Resolution options
        is_cross_origin: Origin of the top-level sheet

    Returns:
        Flat list of descriptors in cascade order

    Raises:
        ConfigurationError: If options are invalid
        FetchError: If any import cannot be fetched
        AssemblyError: If any fetched payload cannot be assembled
    """
    options.validate(require_fetch=False)
    if options.fetch is not None:
        return await _resolve_session(sheet, options, is_cross_origin)

    network = NetworkManager(request_timeout=options.timeout)
    try:
        options = dataclasses.replace(options, fetch=network.fetch_async)
        return await _resolve_session(sheet, options, is_cross_origin)
    finally:
        # Fetches still running after a failure must not block the loop
        network.cleanup(wait=False)

def resolve_stylesheets_sync(sheet: Any, options: ResolveOptions,
                             is_cross_origin: bool = False) -> List[StylesheetDescriptor]:
    """Blocking wrapper around ``resolve_stylesheets``."""
    return asyncio.run(resolve_stylesheets(sheet, options, is_cross_origin))

# Exported functions
__all__ = [
    'resolve_stylesheet',
    'flatten_results',
    'resolve_stylesheets',
    'resolve_stylesheets_sync',
]
