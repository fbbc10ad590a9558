#!/usr/bin/env python3
"""
Command-line interface for CSS Import Resolver.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from css_import_resolver.core.assembler import decode_data, parse_stylesheet
from css_import_resolver.core.descriptor import ResolveOptions, StylesheetDescriptor
from css_import_resolver.core.resolver import resolve_stylesheets_sync
from css_import_resolver.managers.network import NetworkManager
from css_import_resolver.utils.config import MAX_IMPORT_URLS, REQUEST_TIMEOUT
from css_import_resolver.utils.error import CSSImportResolverError
from css_import_resolver.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Resolve a stylesheet and its @import rules into ordered fragments'
    )

    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument(
        '-f', '--file',
        help='Path to CSS file',
        type=Path
    )
    source_group.add_argument(
        '-u', '--url',
        help='URL of the stylesheet',
        type=str
    )

    parser.add_argument(
        '--base-url',
        help='Base URL or path for relative imports (defaults to the source)',
        type=str
    )
    parser.add_argument(
        '-o', '--output',
        help='Write fragments to this file instead of stdout',
        type=Path
    )
    parser.add_argument(
        '--format',
        help='Output format',
        choices=['text', 'json'],
        default='text'
    )
    parser.add_argument(
        '--shadow-id',
        help='Shadow tree id stamped on every fragment',
        type=str
    )

    parser.add_argument(
        '--timeout',
        help='Request timeout in seconds',
        type=float,
        default=REQUEST_TIMEOUT
    )
    parser.add_argument(
        '--max-imports',
        help='Maximum number of distinct imports to fetch before recursion stops',
        type=int,
        default=MAX_IMPORT_URLS
    )

    parser.add_argument(
        '-v', '--verbose',
        help='Enable verbose output',
        action='store_true'
    )

    return parser.parse_args(argv)

def format_fragments(descriptors: List[StylesheetDescriptor], output_format: str = 'text') -> str:
    """Render resolved fragments for output.

    Args:
        descriptors: Fragments in cascade order
        output_format: 'text' or 'json'

    Returns:
        Rendered output
    """
    if output_format == 'json':
        return json.dumps([d.to_dict() for d in descriptors], indent=2)

    blocks = []
    for descriptor in descriptors:
        origin = 'cross-origin' if descriptor.is_cross_origin else 'same-origin'
        header = f"/* priority={list(descriptor.priority)} {origin} */"
        blocks.append(f"{header}\n{descriptor.css_text}")
    return '\n\n'.join(blocks)

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    source = args.url or str(args.file)
    base_url = args.base_url or source

    try:
        with NetworkManager(base_url=base_url, request_timeout=args.timeout) as network:
            if args.url:
                data = network.fetch(args.url, timeout=args.timeout)
            else:
                data = args.file.read_bytes()
            sheet = parse_stylesheet(decode_data(data), href=source)

            options = ResolveOptions(
                fetch=network.fetch_async,
                shadow_id=args.shadow_id,
                timeout=args.timeout,
                max_import_urls=args.max_imports
            )
            descriptors = resolve_stylesheets_sync(sheet, options)

        output = format_fragments(descriptors, args.format)
        if args.output:
            args.output.write_text(output)
            logger.info(f"Fragments saved to {args.output}")
        else:
            print(output)
        return 0

    except (CSSImportResolverError, OSError) as e:
        logger.error(f"Error: {str(e)}")
        return 1

if __name__ == '__main__':
    sys.exit(main())
