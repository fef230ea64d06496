"""
Exceptions raised by the layout engine.

All of these describe a broken document-model contract rather than a
recoverable runtime condition, so the layout pass is aborted.
"""


class LayoutError(Exception):
    """Base class for layout failures."""


class DisplayNoneRootError(LayoutError):
    """The root of a box tree was asked for but its node has ``display: none``."""

    def __init__(self, node=None):
        self.node = node
        super().__init__("Root node has display: none")


class MissingStyleNodeError(LayoutError):
    """A style query was made on an anonymous box that has no source node."""

    def __init__(self, box_type=None):
        self.box_type = box_type
        super().__init__("Anonymous inline container has no style node")


class UnsupportedBoxError(LayoutError):
    """Top-level layout was requested for a box that is not a block box."""

    def __init__(self, box_type=None):
        self.box_type = box_type
        name = getattr(box_type, 'name', box_type)
        super().__init__(f"Only block boxes can be laid out at the root, got {name}")
