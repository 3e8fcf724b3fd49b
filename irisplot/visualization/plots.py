"""
Plot utilities for drawing pixel-space geometry with matplotlib.
"""

import matplotlib.pyplot as plt
import seaborn as sns
from typing import Optional, Sequence, Tuple, Union
from pathlib import Path

from irisplot.geometry.layout import ChartLayout
from irisplot.geometry.scales import BandScale, LinearScale
from irisplot.utils.logger import LoggerMixin

POINTS_PER_INCH = 72


class PlotUtilities(LoggerMixin):
    """
    Figure setup, axis formatting and saving for the Iris charts.

    Axes are set up in pixel coordinates of the plot area (origin at the top
    left, y growing downwards), so geometry from ``GeometryMapper`` is drawn
    unchanged.
    """

    def __init__(self, style: str = 'default', color_palette: str = 'tab10'):
        """
        Initialize plot utilities.

        Parameters
        ----------
        style : str
            Matplotlib style
        color_palette : str
            Seaborn color palette
        """
        self.style = style
        self.color_palette = color_palette

        try:
            plt.style.use(style)
        except (OSError, ValueError):
            self.logger.warning(f"Style '{style}' not found, using default")

        try:
            sns.set_palette(color_palette)
        except ValueError:
            self.logger.warning(f"Color palette '{color_palette}' not found, using default")

    @staticmethod
    def marker_size(radius: float, dpi: int = 100) -> float:
        """Scatter marker area (points squared) for a circle of ``radius`` pixels."""
        diameter_pt = 2 * radius * POINTS_PER_INCH / dpi
        return diameter_pt ** 2

    def setup_figure(
        self,
        layout: ChartLayout,
        dpi: int = 100
    ) -> Tuple[plt.Figure, plt.Axes]:
        """
        Create a figure of the layout's outer size with one plot-area axes.

        Parameters
        ----------
        layout : ChartLayout
            Chart dimensions and margins
        dpi : int
            Pixels per inch

        Returns
        -------
        tuple
            (figure, axes)
        """
        fig = plt.figure(
            figsize=(layout.outer_width / dpi, layout.outer_height / dpi),
            dpi=dpi
        )
        margin = layout.margin
        ax = fig.add_axes([
            margin.left / layout.outer_width,
            margin.bottom / layout.outer_height,
            layout.width / layout.outer_width,
            layout.height / layout.outer_height,
        ])
        ax.set_xlim(0, layout.width)
        ax.set_ylim(layout.height, 0)
        return fig, ax

    def format_axis(
        self,
        ax: plt.Axes,
        x_scale: Union[LinearScale, BandScale],
        y_scale: LinearScale,
        xlabel: str = '',
        ylabel: str = '',
        title: str = ''
    ) -> None:
        """
        Place ticks from the scales and label the axes.

        Parameters
        ----------
        ax : plt.Axes
            Pixel-space axes
        x_scale : LinearScale or BandScale
            Horizontal scale (band centres become category ticks)
        y_scale : LinearScale
            Vertical scale
        xlabel : str
            X-axis label
        ylabel : str
            Y-axis label
        title : str
            Plot title
        """
        if isinstance(x_scale, BandScale):
            ax.set_xticks([x_scale.center(label) for label in x_scale.domain])
            ax.set_xticklabels([str(label) for label in x_scale.domain])
        else:
            self._set_linear_ticks(ax.set_xticks, ax.set_xticklabels, x_scale)
        self._set_linear_ticks(ax.set_yticks, ax.set_yticklabels, y_scale)

        ax.spines['top'].set_visible(False)
        ax.spines['right'].set_visible(False)

        if xlabel:
            ax.set_xlabel(xlabel, fontsize=12)
        if ylabel:
            ax.set_ylabel(ylabel, fontsize=12)
        if title:
            ax.set_title(title, fontsize=14, fontweight='bold')

    @staticmethod
    def _set_linear_ticks(set_ticks, set_labels, scale: LinearScale) -> None:
        values = scale.ticks()
        set_ticks([scale(v) for v in values])
        set_labels(tick_labels(values))

    def save_figure(
        self,
        fig: plt.Figure,
        filename: Union[str, Path],
        dpi: Optional[int] = None
    ) -> Path:
        """
        Save figure to file; the format follows the file suffix.

        Parameters
        ----------
        fig : plt.Figure
            Matplotlib figure
        filename : str or Path
            Output filename
        dpi : int, optional
            DPI for raster formats (the figure's own DPI by default)

        Returns
        -------
        Path
            Path written
        """
        filepath = Path(filename)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fig.savefig(filepath, dpi=dpi or fig.dpi)
        self.logger.info(f"Saved figure to {filepath}")
        return filepath

    def close_all(self) -> None:
        """Close all matplotlib figures."""
        plt.close('all')


def tick_labels(values: Sequence[float]) -> list:
    """Compact labels for tick values (``1`` rather than ``1.0``)."""
    return [f"{v:g}" for v in values]
