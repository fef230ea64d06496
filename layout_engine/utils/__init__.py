"""
Utility modules for the layout engine.
"""

from layout_engine.utils.config import Config
from layout_engine.utils.logging import setup_logging, log_exception, PerformanceLogger

__all__ = [
    'Config',
    'setup_logging',
    'log_exception',
    'PerformanceLogger',
]
