"""
Styled node tree.
"""

from .styled_node import Display, StyledNode

__all__ = ['Display', 'StyledNode']
