"""
Pattern catalogue and period detection for 2-D Conway life.
"""

from .detector import PatternPeriod, detect_period
from .shapes import PATTERNS, PatternInfo, get_pattern, translate

__all__ = [
    'PATTERNS',
    'PatternInfo',
    'PatternPeriod',
    'detect_period',
    'get_pattern',
    'translate',
]
