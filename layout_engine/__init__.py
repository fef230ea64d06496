"""
Layout Engine - CSS block layout for styled document trees.
"""

from layout_engine.utils.logging import setup_logging

logger = setup_logging(console_level="WARNING")

from layout_engine.css.values import AUTO, Keyword, Length, Unit, px
from layout_engine.errors import (
    DisplayNoneRootError,
    LayoutError,
    MissingStyleNodeError,
    UnsupportedBoxError,
)
from layout_engine.layout import BoxType, Dimensions, EdgeSizes, LayoutBox, Rect, build_layout_tree, layout_tree
from layout_engine.style import Display, StyledNode

__version__ = "0.1.0"
__description__ = "CSS block layout for styled document trees"

__all__ = [
    'AUTO',
    'BoxType',
    'Dimensions',
    'Display',
    'DisplayNoneRootError',
    'EdgeSizes',
    'Keyword',
    'LayoutBox',
    'LayoutError',
    'Length',
    'MissingStyleNodeError',
    'Rect',
    'StyledNode',
    'Unit',
    'UnsupportedBoxError',
    'build_layout_tree',
    'layout_tree',
    'px',
]

logger.info(f"Layout Engine v{__version__} initialized")
