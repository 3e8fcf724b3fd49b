"""
Chart dimensions for the two page layouts.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Margin:
    top: int
    right: int
    bottom: int
    left: int


@dataclass(frozen=True)
class ChartLayout:
    """
    Outer size, margins and legend placement of one chart.

    ``legend_offset`` is the legend's x position relative to the plot width;
    ``x_domain_padding`` is added to the upper x-domain bound of the scatter
    plot to leave room for the legend.
    """
    outer_width: int
    outer_height: int
    margin: Margin
    x_domain_padding: float = 0.0
    legend_offset: float = 20.0

    @property
    def width(self) -> int:
        return self.outer_width - self.margin.left - self.margin.right

    @property
    def height(self) -> int:
        return self.outer_height - self.margin.top - self.margin.bottom

    @property
    def legend_x(self) -> float:
        return self.width + self.legend_offset


LAYOUTS: Dict[str, Dict[str, ChartLayout]] = {
    'wide': {
        'scatter': ChartLayout(1000, 500, Margin(20, 150, 50, 60),
                               x_domain_padding=0.5, legend_offset=20),
        'boxplot': ChartLayout(1000, 500, Margin(20, 30, 50, 60)),
    },
    'compact': {
        'scatter': ChartLayout(500, 400, Margin(20, 30, 50, 60),
                               x_domain_padding=0.0, legend_offset=-80),
        'boxplot': ChartLayout(500, 400, Margin(20, 30, 50, 60)),
    },
}


def get_layout(name: str, chart: str) -> ChartLayout:
    """
    Look up the layout of ``chart`` (``'scatter'`` or ``'boxplot'``).

    Raises
    ------
    ValueError
        If the layout or chart name is unknown
    """
    if name not in LAYOUTS:
        raise ValueError(f"Unknown layout: {name} (choose from {sorted(LAYOUTS)})")
    charts = LAYOUTS[name]
    if chart not in charts:
        raise ValueError(f"Unknown chart: {chart}")
    return charts[chart]
