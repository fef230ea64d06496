"""
Styled node tree consumed by the layout engine.

A styled node pairs a document node with its specified CSS values. The tree is
treated as read-only by layout: boxes only keep references to it.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from layout_engine.css.values import Keyword, Value
from layout_engine.parser.css_parser import parse_declarations


class Display(Enum):
    """Outer display type of a styled node."""
    BLOCK = 'block'
    INLINE = 'inline'
    NONE = 'none'


class StyledNode:
    """
    A document node together with its specified values.

    Args:
        node: The source document node (a tag name, a parsed element, ...)
        specified_values: Mapping of property name to value
        children: Styled child nodes in source order
    """

    def __init__(self, node: Any = None,
                 specified_values: Optional[Dict[str, Value]] = None,
                 children: Optional[Iterable['StyledNode']] = None):
        self.node = node
        self.specified_values: Dict[str, Value] = dict(specified_values or {})
        self.children: List['StyledNode'] = list(children or [])

    @classmethod
    def from_css(cls, node: Any = None, css_text: str = '',
                 children: Optional[Iterable['StyledNode']] = None) -> 'StyledNode':
        """
        Build a styled node from a CSS declaration block.

        Args:
            node: The source document node
            css_text: Declarations such as ``"display: block; width: 100px"``
            children: Styled child nodes in source order

        Returns:
            StyledNode: The new styled node
        """
        return cls(node, parse_declarations(css_text), children)

    def value(self, name: str) -> Optional[Value]:
        """Return the specified value of a property, if there is one."""
        return self.specified_values.get(name)

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        """
        Return the value of ``name``, falling back to ``fallback_name``
        (usually a shorthand such as ``margin``), then to ``default``.
        """
        value = self.value(name)
        if value is not None:
            return value
        value = self.value(fallback_name)
        if value is not None:
            return value
        return default

    def display(self) -> Display:
        """
        Return the display type of this node.

        Anything other than ``block`` or ``none`` counts as inline, which is
        also the initial value of the property.
        """
        value = self.value('display')
        if isinstance(value, Keyword):
            if value.name == 'block':
                return Display.BLOCK
            if value.name == 'none':
                return Display.NONE
        return Display.INLINE

    def __repr__(self) -> str:
        return f"StyledNode({self.node!r}, {len(self.children)} children)"
