"""
Block layout: box tree construction and geometry resolution.
"""

from .box_metrics import Dimensions, EdgeSizes, Rect
from .layout import BoxType, LayoutBox, build_layout_tree, layout_tree

__all__ = [
    'BoxType',
    'Dimensions',
    'EdgeSizes',
    'LayoutBox',
    'Rect',
    'build_layout_tree',
    'layout_tree',
]
