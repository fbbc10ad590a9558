"""Core import resolution functionality."""

from .descriptor import StylesheetDescriptor, ResolveOptions
from .origin import is_cross_origin
from .priority import child_priority, priority_sort_key
from .rules import partition_rules, is_import_rule
from .assembler import convert_data_to_stylesheet, parse_stylesheet
from .resolver import (
    resolve_stylesheet,
    resolve_stylesheets,
    resolve_stylesheets_sync,
    flatten_results,
)

__all__ = [
    'StylesheetDescriptor',
    'ResolveOptions',
    'is_cross_origin',
    'child_priority',
    'priority_sort_key',
    'partition_rules',
    'is_import_rule',
    'convert_data_to_stylesheet',
    'parse_stylesheet',
    'resolve_stylesheet',
    'resolve_stylesheets',
    'resolve_stylesheets_sync',
    'flatten_results',
]
