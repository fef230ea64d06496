"""Tests for layout tree construction."""

import pytest

from layout_engine import DisplayNoneRootError, Keyword, MissingStyleNodeError, StyledNode, build_layout_tree
from layout_engine.layout.layout import BoxType, LayoutBox


def node(name, display, children=()):
    return StyledNode(name, {'display': Keyword(display)}, children)


def test_box_types_follow_display():
    tree = node('body', 'block', [node('p', 'block'), node('span', 'inline')])
    root = build_layout_tree(tree)

    assert root.box_type is BoxType.BLOCK
    assert root.get_style_node() is tree
    assert [child.box_type for child in root.children] == [BoxType.BLOCK, BoxType.INLINE]


def test_display_none_children_are_omitted():
    tree = node('body', 'block', [
        node('a', 'block'),
        node('hidden', 'none', [node('inner', 'block')]),
        node('b', 'block'),
    ])
    root = build_layout_tree(tree)

    assert len(root.children) == len(tree.children) - 1
    assert [child.style_node.node for child in root.children] == ['a', 'b']


def test_children_keep_source_order_recursively():
    tree = node('body', 'block', [
        node('one', 'block', [node('one-a', 'block'), node('one-b', 'inline')]),
        node('two', 'inline'),
        node('three', 'block'),
    ])
    root = build_layout_tree(tree)

    assert [c.style_node.node for c in root.children] == ['one', 'two', 'three']
    assert [c.style_node.node for c in root.children[0].children] == ['one-a', 'one-b']


def test_missing_display_builds_inline_box():
    root = build_layout_tree(StyledNode('span', {}))
    assert root.box_type is BoxType.INLINE


def test_display_none_root_fails():
    with pytest.raises(DisplayNoneRootError):
        build_layout_tree(node('html', 'none'))


def test_boxes_start_with_empty_dimensions():
    root = build_layout_tree(node('body', 'block', [node('p', 'block')]))
    assert root.dimensions.width == 0
    assert root.children[0].dimensions.height == 0


def test_inline_container_has_no_style():
    container = LayoutBox(BoxType.INLINE_CONTAINER)
    with pytest.raises(MissingStyleNodeError):
        container.get_style_node()


def test_inline_container_rejects_style_node():
    with pytest.raises(ValueError):
        LayoutBox(BoxType.INLINE_CONTAINER, node('x', 'block'))


def test_block_box_requires_style_node():
    with pytest.raises(ValueError):
        LayoutBox(BoxType.BLOCK)


def test_anonymous_inline_boxes_group_runs():
    tree = node('body', 'block', [
        node('a', 'inline'),
        node('b', 'inline'),
        node('div', 'block'),
        node('c', 'inline'),
    ])
    root = build_layout_tree(tree, anonymous_inline_boxes=True)

    kinds = [child.box_type for child in root.children]
    assert kinds == [BoxType.INLINE_CONTAINER, BoxType.BLOCK, BoxType.INLINE_CONTAINER]
    assert [c.style_node.node for c in root.children[0].children] == ['a', 'b']
    assert [c.style_node.node for c in root.children[2].children] == ['c']


def test_inline_box_takes_inline_children_directly():
    tree = node('span', 'inline', [node('em', 'inline')])
    root = build_layout_tree(tree, anonymous_inline_boxes=True)
    assert [child.box_type for child in root.children] == [BoxType.INLINE]
