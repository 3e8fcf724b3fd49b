"""
Grouping and statistics module.
"""

from .quartiles import (
    QuartileSummary,
    QuartileCalculator,
    quantile,
    compute_quartiles,
    group_quartiles,
)

__all__ = [
    'QuartileSummary',
    'QuartileCalculator',
    'quantile',
    'compute_quartiles',
    'group_quartiles',
]
