"""
CSS value types consumed by layout.
"""

from .values import AUTO, ZERO, Keyword, Length, Unit, Value, is_auto, px

__all__ = ['AUTO', 'ZERO', 'Keyword', 'Length', 'Unit', 'Value', 'is_auto', 'px']
