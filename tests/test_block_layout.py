"""Tests for block content layout, stacking and height resolution."""

import pytest

from layout_engine import (
    AUTO,
    Dimensions,
    Keyword,
    Length,
    StyledNode,
    Unit,
    UnsupportedBoxError,
    layout_tree,
    px,
)
from layout_engine.layout.layout import BoxType, LayoutBox


def node(display, children=(), **values):
    specified = {'display': Keyword(display)}
    for name, value in values.items():
        specified[name.replace('_', '-')] = value
    return StyledNode(display, specified, children)


def block(children=(), **values):
    return node('block', children, **values)


def inline(children=(), **values):
    return node('inline', children, **values)


def test_siblings_stack_in_source_order():
    first = block(height=px(50))
    second = block([block(height=px(20))])
    root = layout_tree(block([first, second]), Dimensions.viewport(800))

    a, b = root.children
    assert b.dimensions.y == a.dimensions.y + 50
    assert b.dimensions.height == 20
    assert root.dimensions.height == 70


def test_stacking_uses_margin_box_height():
    children = [
        block(height=px(10), margin=px(5), padding=px(2), border_width=px(1)),
        block(height=px(30), margin_top=px(7)),
        block(),
        block(height=px(4)),
    ]
    root = layout_tree(block(children, padding=px(3)), Dimensions.viewport(500))

    boxes = root.children
    assert boxes[0].dimensions.y == root.dimensions.y
    for current, following in zip(boxes, boxes[1:]):
        assert following.dimensions.y == current.dimensions.y + current.dimensions.margin_box_height()
    assert root.dimensions.height == sum(b.dimensions.margin_box_height() for b in boxes)


def test_margins_do_not_collapse():
    children = [block(height=px(10), margin_bottom=px(20)),
                block(height=px(10), margin_top=px(30))]
    root = layout_tree(block(children), Dimensions.viewport(100))
    assert root.dimensions.height == 10 + 20 + 30 + 10


def test_content_origin_includes_top_edges():
    root = layout_tree(block(margin_top=px(10), border_top_width=px(2), padding_top=px(3)),
                       Dimensions(x=0, y=100, width=300))
    assert root.dimensions.y == 115
    assert root.dimensions.height == 0


def test_auto_vertical_margins_are_zero():
    root = layout_tree(block(margin=AUTO), Dimensions.viewport(300))
    d = root.dimensions
    assert d.margin.top == 0
    assert d.margin.bottom == 0


def test_explicit_height_overrides_children():
    children = [block(height=px(40)), block(height=px(40))]
    root = layout_tree(block(children, height=px(50)), Dimensions.viewport(300))
    assert root.dimensions.height == 50
    # overflow stays visible: children keep their positions
    assert root.children[1].dimensions.y == root.dimensions.y + 40


def test_non_pixel_height_is_ignored():
    root = layout_tree(block([block(height=px(12))], height=Length(50, Unit.PERCENT)),
                       Dimensions.viewport(300))
    assert root.dimensions.height == 12


def test_empty_block_has_zero_height():
    root = layout_tree(block(), Dimensions.viewport(300))
    assert root.dimensions.height == 0


def test_children_use_parent_content_width():
    child = block()
    root = layout_tree(block([child], padding=px(10), width=px(200), margin_left=px(0)),
                       Dimensions.viewport(800))
    c = root.children[0].dimensions
    assert c.width == 200
    assert c.x == 10


def test_inline_children_keep_default_geometry():
    root = layout_tree(block([inline(width=px(100)), block(height=px(5))]),
                       Dimensions.viewport(300))
    span, div = root.children
    assert span.box_type is BoxType.INLINE
    assert span.dimensions.width == 0
    assert span.dimensions.height == 0
    assert span.dimensions.y == root.dimensions.y
    assert div.dimensions.y == root.dimensions.y


def test_inline_root_is_unsupported():
    with pytest.raises(UnsupportedBoxError):
        layout_tree(inline(), Dimensions.viewport(300))


def test_layout_on_inline_box_is_a_no_op():
    box = LayoutBox(BoxType.INLINE, inline(width=px(10)))
    box.layout(Dimensions(x=5, y=5, width=300))
    assert box.dimensions == Dimensions()


def test_relayout_does_not_touch_style_tree():
    styled = block([block(height=px(10))], margin=px(4))
    before = dict(styled.specified_values)
    first = layout_tree(styled, Dimensions.viewport(300))
    second = layout_tree(styled, Dimensions.viewport(300))
    assert styled.specified_values == before
    assert first.dimensions == second.dimensions
    assert first is not second


def test_to_dict_serializes_tree():
    root = layout_tree(block([block(height=px(10))]), Dimensions.viewport(100))
    data = root.to_dict()
    assert data['box_type'] == 'block'
    assert data['node'] == 'block'
    assert data['dimensions']['width'] == 100
    assert data['children'][0]['dimensions']['height'] == 10
