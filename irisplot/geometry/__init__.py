"""
Scales and pixel-space geometry module.
"""

from .scales import LinearScale, BandScale
from .layout import ChartLayout, Margin, LAYOUTS, get_layout
from .mapper import GeometryMapper, PlotPoint, BoxGeometry, PALETTE

__all__ = [
    'LinearScale',
    'BandScale',
    'ChartLayout',
    'Margin',
    'LAYOUTS',
    'get_layout',
    'GeometryMapper',
    'PlotPoint',
    'BoxGeometry',
    'PALETTE',
]
