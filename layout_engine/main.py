#!/usr/bin/env python3
"""
Command line entry point: lay out an HTML file and print its box geometry.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from layout_engine.errors import LayoutError
from layout_engine.layout.box_metrics import Dimensions
from layout_engine.layout.layout import LayoutBox, layout_tree
from layout_engine.parser.html_parser import load_styled_tree
from layout_engine.utils.config import Config
from layout_engine.utils.logging import PerformanceLogger, configure_logging, log_exception

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Lay out an HTML document with CSS block layout")
    parser.add_argument('file', help='HTML file to lay out')
    parser.add_argument('--width', type=float, default=None, help='Viewport width in px')
    parser.add_argument('--config', type=str, default=None, help='Path to a JSON config file')
    parser.add_argument('--anonymous-inline-boxes', action='store_true',
                        help='Group inline children into anonymous inline containers')
    parser.add_argument('--format', choices=('json', 'text'), default='text', help='Output format')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def format_tree(box: LayoutBox, depth: int = 0) -> List[str]:
    """
    Render a laid-out box tree as indented text lines.

    Args:
        box: Root box
        depth: Indentation level

    Returns:
        List[str]: One line per box
    """
    d = box.dimensions
    node = box.style_node.node if box.style_node is not None else None
    label = getattr(node, 'name', node) if node is not None else 'anonymous'
    lines = [f"{'  ' * depth}{box.box_type.value} <{label}> "
             f"x={d.x:g} y={d.y:g} w={d.width:g} h={d.height:g}"]
    for child in box.children:
        lines.extend(format_tree(child, depth + 1))
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line tool."""
    args = parse_arguments(argv)
    config = Config(args.config)

    log_level = "DEBUG" if args.debug else config.get('logging.level', 'INFO')
    configure_logging(console_level=log_level, log_file=config.get('logging.file'))

    width = args.width if args.width is not None else config.viewport_width
    anonymous_inline_boxes = args.anonymous_inline_boxes or config.anonymous_inline_boxes
    perf = PerformanceLogger(logger, "layout")

    try:
        with open(args.file, 'r', encoding='utf-8') as f:
            html_content = f.read()
    except OSError as e:
        log_exception(logger, e, f"Cannot read {args.file}")
        return 1

    try:
        perf.start("style tree")
        styled_root = load_styled_tree(html_content)
        perf.end("style tree")

        perf.start("layout")
        root_box = layout_tree(styled_root, Dimensions.viewport(width, config.viewport_height),
                               anonymous_inline_boxes)
        perf.end("layout")
    except (LayoutError, ValueError) as e:
        log_exception(logger, e, "Layout failed")
        return 1

    if args.format == 'json':
        print(json.dumps(root_box.to_dict(), indent=2))
    else:
        print('\n'.join(format_tree(root_box)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
