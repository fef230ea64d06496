"""
CSS box model geometry. All sizes are in px.
"""

from typing import Dict


class EdgeSizes:
    """Widths of one box edge (padding, border or margin) on each side."""

    def __init__(self, left: float = 0.0, right: float = 0.0,
                 top: float = 0.0, bottom: float = 0.0):
        self.left = left
        self.right = right
        self.top = top
        self.bottom = bottom

    def copy(self) -> 'EdgeSizes':
        return EdgeSizes(self.left, self.right, self.top, self.bottom)

    def to_dict(self) -> Dict[str, float]:
        return {'left': self.left, 'right': self.right,
                'top': self.top, 'bottom': self.bottom}

    def __eq__(self, other) -> bool:
        return isinstance(other, EdgeSizes) and self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (f"EdgeSizes(left={self.left}, right={self.right}, "
                f"top={self.top}, bottom={self.bottom})")


class Rect:
    """An axis-aligned rectangle in document coordinates."""

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 width: float = 0.0, height: float = 0.0):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def expanded_by(self, edge: EdgeSizes) -> 'Rect':
        """Return a new rectangle grown outward by ``edge`` on every side."""
        return Rect(
            self.x - edge.left,
            self.y - edge.top,
            self.width + edge.left + edge.right,
            self.height + edge.top + edge.bottom,
        )

    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}

    def __eq__(self, other) -> bool:
        return isinstance(other, Rect) and self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Rect(x={self.x}, y={self.y}, width={self.width}, height={self.height})"


class Dimensions:
    """
    Represents the CSS box model metrics for a layout box.

    ``x`` and ``y`` are the position of the content area relative to the
    document origin, so they already include this box's own margin, border
    and padding. ``width`` and ``height`` are the content area size.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 width: float = 0.0, height: float = 0.0,
                 padding: EdgeSizes = None, border: EdgeSizes = None,
                 margin: EdgeSizes = None):
        # Position of the content area
        self.x = x
        self.y = y

        # Content area size
        self.width = width
        self.height = height

        # Surrounding edges
        self.padding = padding if padding is not None else EdgeSizes()
        self.border = border if border is not None else EdgeSizes()
        self.margin = margin if margin is not None else EdgeSizes()

    @classmethod
    def viewport(cls, width: float, height: float = 0.0) -> 'Dimensions':
        """
        Create the initial containing block for a viewport.

        Args:
            width: Viewport width
            height: Viewport height (unused by block layout)

        Returns:
            Dimensions: Containing block anchored at the document origin
        """
        return cls(width=width, height=height)

    def copy(self) -> 'Dimensions':
        return Dimensions(self.x, self.y, self.width, self.height,
                          self.padding.copy(), self.border.copy(), self.margin.copy())

    def content_box(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def padding_box(self) -> Rect:
        """The area covered by the content area plus its padding."""
        return self.content_box().expanded_by(self.padding)

    def border_box(self) -> Rect:
        """The area covered by the content area plus padding and borders."""
        return self.padding_box().expanded_by(self.border)

    def margin_box(self) -> Rect:
        """The area covered by the content area plus padding, borders, and margin."""
        return self.border_box().expanded_by(self.margin)

    def margin_box_height(self) -> float:
        """Total height of the box including its margins, border, and padding."""
        return (self.height
                + self.padding.top + self.padding.bottom
                + self.border.top + self.border.bottom
                + self.margin.top + self.margin.bottom)

    def margin_box_width(self) -> float:
        """Total width of the box including its margins, border, and padding."""
        return (self.width
                + self.padding.left + self.padding.right
                + self.border.left + self.border.right
                + self.margin.left + self.margin.right)

    def to_dict(self) -> Dict[str, object]:
        return {
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'padding': self.padding.to_dict(),
            'border': self.border.to_dict(),
            'margin': self.margin.to_dict(),
        }

    def __eq__(self, other) -> bool:
        return isinstance(other, Dimensions) and self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return (f"Dimensions(x={self.x}, y={self.y}, width={self.width}, "
                f"height={self.height}, padding={self.padding!r}, "
                f"border={self.border!r}, margin={self.margin!r})")
