"""
Basic CSS block layout.

Builds a tree of layout boxes from a styled node tree and resolves the
geometry of every block box in normal flow:
http://www.w3.org/TR/CSS2/visudet.html#blockwidth
"""

import logging
from enum import Enum
from typing import Dict, List, Optional

from layout_engine.css.values import AUTO, ZERO, Length, Unit, is_auto, px
from layout_engine.errors import DisplayNoneRootError, MissingStyleNodeError, UnsupportedBoxError
from layout_engine.layout.box_metrics import Dimensions
from layout_engine.style.styled_node import Display, StyledNode

logger = logging.getLogger(__name__)


class BoxType(Enum):
    """Kind of box generated for a node."""
    BLOCK = 'block'
    INLINE = 'inline'
    INLINE_CONTAINER = 'inline-container'


class LayoutBox:
    """
    Represents a box in the layout tree.

    Block and inline boxes refer to the styled node that generated them; the
    anonymous inline container has none.
    """

    def __init__(self, box_type: BoxType, style_node: Optional[StyledNode] = None):
        """
        Initialize a layout box.

        Args:
            box_type: Kind of box
            style_node: The styled node that generated this box
        """
        if box_type is BoxType.INLINE_CONTAINER:
            if style_node is not None:
                raise ValueError("An inline container cannot have a style node")
        elif style_node is None:
            raise ValueError(f"A {box_type.value} box needs a style node")

        self.box_type = box_type
        self.style_node = style_node
        self.dimensions = Dimensions()
        self.children: List['LayoutBox'] = []

    def get_style_node(self) -> StyledNode:
        """
        Return the styled node that generated this box.

        Raises:
            MissingStyleNodeError: If this is an anonymous inline container
        """
        if self.box_type is BoxType.INLINE_CONTAINER:
            raise MissingStyleNodeError(self.box_type)
        return self.style_node

    # Tree construction

    def push_block(self, child: 'LayoutBox') -> None:
        self.children.append(child)

    def push_inline(self, child: 'LayoutBox', anonymous_inline_boxes: bool = False) -> None:
        """
        Add an inline-level child.

        Inline children are appended directly unless ``anonymous_inline_boxes``
        is set, in which case runs of inline children of a block box share an
        anonymous inline container.
        """
        if anonymous_inline_boxes:
            self.get_inline_container().children.append(child)
        else:
            self.children.append(child)

    def get_inline_container(self) -> 'LayoutBox':
        """
        Return the box that should receive the next inline child.

        Inline boxes and inline containers take inline children themselves.
        A block box reuses its trailing inline container or starts a new one.
        """
        if self.box_type in (BoxType.INLINE, BoxType.INLINE_CONTAINER):
            return self

        if self.children and self.children[-1].box_type is BoxType.INLINE_CONTAINER:
            return self.children[-1]

        container = LayoutBox(BoxType.INLINE_CONTAINER)
        self.children.append(container)
        return container

    # Layout

    def layout(self, containing_block: Dimensions) -> None:
        """
        Lay out this box and its descendants.

        Only block boxes are laid out; inline boxes and inline containers keep
        their default dimensions since inline formatting is not supported.

        Args:
            containing_block: Dimensions of the containing block
        """
        if self.box_type is BoxType.BLOCK:
            self.layout_block(containing_block)
        else:
            logger.debug(f"Skipping layout of {self.box_type.value} box")

    def layout_block(self, containing_block: Dimensions) -> None:
        """
        Lay out a block-level element and its descendants.

        Args:
            containing_block: Dimensions of the containing block
        """
        # Child width depends on this width, so it is resolved before the children
        self.calculate_block_width(containing_block)

        self.layout_block_content(containing_block)

        # This height depends on the children, so it is resolved after them
        self.calculate_block_height()

    def calculate_block_width(self, containing_block: Dimensions) -> None:
        """
        Calculate the width of a block-level non-replaced element in normal flow.

        Resolves ``width``, ``margin-left`` and ``margin-right`` so that the
        horizontal edges plus the width add up to the containing block width,
        then stores the horizontal metrics and the content ``x``.

        Args:
            containing_block: Dimensions of the containing block
        """
        style = self.get_style_node()

        width = style.value('width') or AUTO

        margin_left = style.lookup('margin-left', 'margin', AUTO)
        margin_right = style.lookup('margin-right', 'margin', AUTO)

        border_left = style.lookup('border-left-width', 'border-width', ZERO)
        border_right = style.lookup('border-right-width', 'border-width', ZERO)

        padding_left = style.lookup('padding-left', 'padding', ZERO)
        padding_right = style.lookup('padding-right', 'padding', ZERO)

        total = sum(value.to_px() for value in (
            margin_left, margin_right, border_left, border_right,
            padding_left, padding_right, width))

        # A fixed width wider than the container leaves no room for auto margins
        if not is_auto(width) and total > containing_block.width:
            if is_auto(margin_left):
                margin_left = ZERO
            if is_auto(margin_right):
                margin_right = ZERO

        # Each branch below grows the total by exactly `underflow`
        underflow = containing_block.width - total
        width_auto = is_auto(width)
        left_auto = is_auto(margin_left)
        right_auto = is_auto(margin_right)

        if not width_auto and not left_auto and not right_auto:
            # Overconstrained: margin-right takes the difference
            logger.debug(f"Overconstrained width, margin-right adjusted by {underflow}")
            margin_right = px(margin_right.to_px() + underflow)
        elif not width_auto and not left_auto and right_auto:
            margin_right = px(underflow)
        elif not width_auto and left_auto and not right_auto:
            margin_left = px(underflow)
        elif width_auto:
            if left_auto:
                margin_left = ZERO
            if right_auto:
                margin_right = ZERO
            width = px(underflow)
        else:
            # Both margins auto: center the box
            margin_left = px(underflow / 2.0)
            margin_right = px(underflow / 2.0)

        d = self.dimensions
        d.width = width.to_px()

        d.padding.left = padding_left.to_px()
        d.padding.right = padding_right.to_px()

        d.border.left = border_left.to_px()
        d.border.right = border_right.to_px()

        d.margin.left = margin_left.to_px()
        d.margin.right = margin_right.to_px()

        d.x = containing_block.x + d.margin.left + d.border.left + d.padding.left

    def layout_block_content(self, containing_block: Dimensions) -> None:
        """
        Position the content area and stack the children inside it.

        Children are placed top to bottom in source order. Adjacent margins are
        not collapsed.

        Args:
            containing_block: Dimensions of the containing block
        """
        style = self.get_style_node()
        d = self.dimensions

        # An auto top or bottom margin is used as zero
        d.margin.top = style.lookup('margin-top', 'margin', ZERO).to_px()
        d.margin.bottom = style.lookup('margin-bottom', 'margin', ZERO).to_px()

        d.border.top = style.lookup('border-top-width', 'border-width', ZERO).to_px()
        d.border.bottom = style.lookup('border-bottom-width', 'border-width', ZERO).to_px()

        d.padding.top = style.lookup('padding-top', 'padding', ZERO).to_px()
        d.padding.bottom = style.lookup('padding-bottom', 'padding', ZERO).to_px()

        d.y = containing_block.y + d.margin.top + d.border.top + d.padding.top

        content_height = 0.0
        for child in self.children:
            child.layout(d)

            child.dimensions.y = d.y + content_height
            content_height += child.dimensions.margin_box_height()

        d.height = content_height

    def calculate_block_height(self) -> None:
        """Use an explicit pixel ``height`` in place of the content height."""
        height = self.get_style_node().value('height')
        if isinstance(height, Length) and height.unit is Unit.PX:
            self.dimensions.height = height.amount

    def to_dict(self) -> Dict[str, object]:
        """
        Serialize this box and its descendants.

        Returns:
            Dict[str, object]: Box type, source tag, dimensions and children
        """
        node = self.style_node.node if self.style_node is not None else None
        return {
            'box_type': self.box_type.value,
            'node': getattr(node, 'name', node) if node is not None else None,
            'dimensions': self.dimensions.to_dict(),
            'children': [child.to_dict() for child in self.children],
        }

    def __repr__(self) -> str:
        return f"LayoutBox({self.box_type.name}, {len(self.children)} children)"


def build_layout_tree(node: StyledNode, anonymous_inline_boxes: bool = False) -> LayoutBox:
    """
    Build the tree of layout boxes without doing any layout calculations.

    Args:
        node: Root of the styled tree
        anonymous_inline_boxes: Group inline children of block boxes into
            anonymous inline containers

    Returns:
        LayoutBox: Root of the box tree

    Raises:
        DisplayNoneRootError: If ``node`` has ``display: none``
    """
    display = node.display()
    if display is Display.BLOCK:
        root = LayoutBox(BoxType.BLOCK, node)
    elif display is Display.INLINE:
        root = LayoutBox(BoxType.INLINE, node)
    else:
        raise DisplayNoneRootError(node)

    for child in node.children:
        child_display = child.display()
        if child_display is Display.BLOCK:
            root.push_block(build_layout_tree(child, anonymous_inline_boxes))
        elif child_display is Display.INLINE:
            root.push_inline(build_layout_tree(child, anonymous_inline_boxes),
                             anonymous_inline_boxes)
        else:
            logger.debug(f"Skipping {child!r} with display: none")

    return root


def layout_tree(node: StyledNode, containing_block: Dimensions,
                anonymous_inline_boxes: bool = False) -> LayoutBox:
    """
    Transform a styled tree into a laid-out box tree.

    Args:
        node: Root of the styled tree
        containing_block: Initial containing block, usually the viewport
        anonymous_inline_boxes: Group inline children into anonymous containers

    Returns:
        LayoutBox: Root of the laid-out box tree

    Raises:
        DisplayNoneRootError: If the root has ``display: none``
        UnsupportedBoxError: If the root is not a block box
    """
    root_box = build_layout_tree(node, anonymous_inline_boxes)
    if root_box.box_type is not BoxType.BLOCK:
        raise UnsupportedBoxError(root_box.box_type)

    root_box.layout(containing_block)
    logger.debug(f"Laid out box tree in a {containing_block.width}px containing block")
    return root_box
