"""Tests for the CSS declaration parser and the HTML front-end."""

import pytest

from layout_engine import AUTO, Dimensions, Display, Keyword, Length, StyledNode, Unit, layout_tree, px
from layout_engine.parser.css_parser import expand_box_shorthand, parse_declarations
from layout_engine.parser.html_parser import default_display, load_styled_tree


def test_parse_keywords_and_lengths():
    values = parse_declarations("display: block; width: 100px; margin-left: auto; height: 0")
    assert values['display'] == Keyword('block')
    assert values['width'] == px(100)
    assert values['margin-left'] == AUTO
    assert values['height'] == px(0)


def test_parse_other_units():
    values = parse_declarations("width: 50%; padding-left: 2em")
    assert values['width'] == Length(50, Unit.PERCENT)
    assert values['padding-left'] == Length(2, Unit.EM)


def test_single_value_shorthand_is_kept():
    values = parse_declarations("margin: auto; border-width: 2px")
    assert values == {'margin': AUTO, 'border-width': px(2)}


def test_multi_value_shorthand_is_expanded():
    values = parse_declarations("margin: 10px auto")
    assert values['margin-top'] == px(10)
    assert values['margin-bottom'] == px(10)
    assert values['margin-left'] == AUTO
    assert values['margin-right'] == AUTO
    assert 'margin' not in values


def test_expand_box_shorthand():
    a, b, c, d = px(1), px(2), px(3), px(4)
    assert expand_box_shorthand([a]) == [a, a, a, a]
    assert expand_box_shorthand([a, b, c]) == [a, b, c, b]
    assert expand_box_shorthand([a, b, c, d]) == [a, b, c, d]
    with pytest.raises(ValueError):
        expand_box_shorthand([a, b, c, d, a])


def test_empty_declarations():
    assert parse_declarations("") == {}


def test_from_css_builds_styled_node():
    styled = StyledNode.from_css('div', 'display: block; width: 100px; margin: 0 auto')
    assert styled.display() is Display.BLOCK
    root = layout_tree(StyledNode.from_css('body', 'display: block', [styled]),
                       Dimensions.viewport(800))
    assert root.children[0].dimensions.margin.left == 350


def test_default_display_by_tag():
    assert default_display('div') == Keyword('block')
    assert default_display('span') == Keyword('inline')
    assert default_display('script') == Keyword('none')


def test_html_document_lays_out():
    html = """
    <html>
      <head><title>ignored</title></head>
      <body style="margin: 0">
        <div style="height: 50px"></div>
        <div style="display: none; height: 999px"></div>
        <div><p style="height: 20px"></p></div>
      </body>
    </html>
    """
    styled = load_styled_tree(html)
    assert styled.node.name == 'html'

    root = layout_tree(styled, Dimensions.viewport(640))
    body, = root.children
    assert body.style_node.node.name == 'body'
    first, second = body.children
    assert first.dimensions.width == 640
    assert second.dimensions.y == first.dimensions.y + 50
    assert second.dimensions.height == 20
    assert body.dimensions.height == 70


def test_later_shorthand_overrides_earlier_longhand():
    values = parse_declarations("margin-left: 5px; margin: 10px")
    assert values == {'margin': px(10)}

    styled = StyledNode.from_css('div', 'display: block; margin-left: 5px; margin: 10px')
    root = layout_tree(styled, Dimensions.viewport(800))
    assert root.dimensions.margin.left == 10


def test_later_longhand_overrides_earlier_shorthand():
    values = parse_declarations("padding: 4px; padding-top: 1px")
    assert values == {'padding': px(4), 'padding-top': px(1)}
