"""
HTML front-end.

Builds a styled node tree from markup. Markup is parsed with BeautifulSoup
using the html5lib tree builder; specified values come only from ``style``
attributes, with a default ``display`` chosen from the tag name.
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

from layout_engine.css.values import Keyword
from layout_engine.parser.css_parser import parse_declarations
from layout_engine.style.styled_node import StyledNode

logger = logging.getLogger(__name__)

BLOCK_ELEMENTS = {
    'html', 'body', 'div', 'p', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'ul', 'ol', 'li', 'table', 'tr', 'td', 'th', 'form', 'fieldset', 'hr',
    'pre', 'blockquote', 'article', 'section', 'header', 'footer', 'nav',
    'aside', 'main', 'figure', 'figcaption', 'dl', 'dt', 'dd', 'address',
}

# Elements that never generate boxes
HIDDEN_ELEMENTS = {
    'head', 'title', 'meta', 'link', 'style', 'script', 'noscript',
    'template', 'base',
}


def default_display(tag_name: str) -> Keyword:
    """
    Return the user-agent ``display`` value for a tag.

    Args:
        tag_name: Lower-case tag name

    Returns:
        Keyword: ``block``, ``inline`` or ``none``
    """
    if tag_name in HIDDEN_ELEMENTS:
        return Keyword('none')
    if tag_name in BLOCK_ELEMENTS:
        return Keyword('block')
    return Keyword('inline')


class HTMLParser:
    """HTML parser producing styled node trees."""

    def __init__(self):
        """Initialize the HTML parser."""
        logger.debug("HTML parser initialized")

    def parse(self, html_content: str) -> BeautifulSoup:
        """
        Parse HTML content into a document.

        Args:
            html_content: HTML content to parse

        Returns:
            BeautifulSoup: Parsed document
        """
        if isinstance(html_content, bytes):
            html_content = html_content.decode('utf-8', errors='replace')
        return BeautifulSoup(html_content, 'html5lib')

    def style_tree(self, element: Tag) -> StyledNode:
        """
        Build a styled node tree for an element and its element descendants.

        Args:
            element: Root element

        Returns:
            StyledNode: Styled tree rooted at ``element``
        """
        tag_name = element.name.lower()
        values = {'display': default_display(tag_name)}
        values.update(parse_declarations(element.get('style', '')))

        children = [self.style_tree(child) for child in element.children
                    if isinstance(child, Tag)]
        return StyledNode(element, values, children)

    def load(self, html_content: str) -> StyledNode:
        """
        Parse markup and return the styled tree rooted at ``<html>``.

        Args:
            html_content: HTML content to parse

        Returns:
            StyledNode: Styled document tree
        """
        document = self.parse(html_content)
        root: Optional[Tag] = document.find('html')
        if root is None:
            raise ValueError("Document has no root element")
        tree = self.style_tree(root)
        logger.debug(f"Styled tree built for <{root.name}>")
        return tree


def load_styled_tree(html_content: str) -> StyledNode:
    """Parse markup into a styled node tree."""
    return HTMLParser().load(html_content)
