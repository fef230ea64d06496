"""
CSS declaration parser.

Turns declaration blocks (``"width: 100px; margin: auto"``) into the value
model consumed by layout. Parsing is delegated to cssutils; this module only
maps its property values onto keywords and lengths.
"""

import logging
from typing import Dict, List, Optional

import cssutils

from layout_engine.css.values import Keyword, Length, Unit, Value

# cssutils reports every unknown property; layout only cares about a handful
cssutils.log.setLevel(logging.CRITICAL)

logger = logging.getLogger(__name__)

# Box shorthands and the longhands they expand to, in top/right/bottom/left order
BOX_SHORTHANDS = {
    'margin': ('margin-top', 'margin-right', 'margin-bottom', 'margin-left'),
    'padding': ('padding-top', 'padding-right', 'padding-bottom', 'padding-left'),
    'border-width': ('border-top-width', 'border-right-width',
                     'border-bottom-width', 'border-left-width'),
}

UNITS = {unit.value: unit for unit in Unit}


def parse_value(item) -> Optional[Value]:
    """
    Convert a single cssutils value into a layout value.

    Args:
        item: A ``cssutils.css.Value`` (or subclass)

    Returns:
        Optional[Value]: The converted value, or None if layout cannot use it
    """
    if item.type == cssutils.css.Value.IDENT:
        return Keyword(item.value)

    if item.type == cssutils.css.Value.NUMBER:
        # Unitless numbers (usually ``0``) are taken as pixels
        return Length(item.value, Unit.PX)

    if item.type in (cssutils.css.Value.DIMENSION, cssutils.css.Value.PERCENTAGE):
        unit = UNITS.get((item.dimension or '').lower())
        if unit is None:
            logger.debug(f"Unsupported unit in {item.cssText!r}")
            return None
        return Length(item.value, unit)

    logger.debug(f"Unsupported value {item.cssText!r} of type {item.type}")
    return None


def expand_box_shorthand(values: List[Value]) -> List[Value]:
    """
    Expand 1-4 shorthand components into top/right/bottom/left.

    Args:
        values: Components in the order they were written

    Returns:
        List[Value]: Four values in top/right/bottom/left order
    """
    if len(values) == 1:
        return values * 4
    if len(values) == 2:
        vertical, horizontal = values
        return [vertical, horizontal, vertical, horizontal]
    if len(values) == 3:
        top, horizontal, bottom = values
        return [top, horizontal, bottom, horizontal]
    if len(values) == 4:
        return list(values)
    raise ValueError(f"Box shorthand takes 1 to 4 values, got {len(values)}")


def parse_declarations(css_text: str) -> Dict[str, Value]:
    """
    Parse a declaration block into specified values.

    Single-value shorthands are kept under the shorthand name so that the
    longhand lookup falls back to them. Shorthands with several components
    are expanded into their longhands.

    Args:
        css_text: Declaration block without braces

    Returns:
        Dict[str, Value]: Specified values by property name
    """
    values: Dict[str, Value] = {}
    if not css_text or not css_text.strip():
        return values

    style = cssutils.parseStyle(css_text)

    for prop in style.getProperties(all=False):
        name = prop.name.lower()
        items = list(prop.propertyValue)
        converted = [parse_value(item) for item in items]

        if not converted or any(value is None for value in converted):
            logger.debug(f"Skipping declaration {name}: {prop.value}")
            continue

        if len(converted) == 1:
            # A later shorthand overrides longhands declared before it
            for longhand in BOX_SHORTHANDS.get(name, ()):
                values.pop(longhand, None)
            values[name] = converted[0]
        elif name in BOX_SHORTHANDS and len(converted) <= 4:
            for longhand, value in zip(BOX_SHORTHANDS[name], expand_box_shorthand(converted)):
                values[longhand] = value
        else:
            logger.debug(f"Skipping multi-value declaration {name}: {prop.value}")

    return values
