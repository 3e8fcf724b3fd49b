"""
Map Iris records and quartile summaries to pixel-space chart primitives.
"""

import pandas as pd
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass

from irisplot.analysis.quartiles import QuartileSummary, group_quartiles
from irisplot.data.loader import species_domain
from irisplot.geometry.layout import ChartLayout, get_layout
from irisplot.geometry.scales import BandScale, LinearScale
from irisplot.utils.logger import LoggerMixin

PALETTE = {
    'setosa': '#1f77b4',
    'versicolor': '#ff7f0e',
    'virginica': '#2ca02c',
}
FALLBACK_COLOR = '#7f7f7f'


@dataclass(frozen=True)
class PlotPoint:
    """
    One record placed on the scatter plot.
    """
    x: float
    y: float
    color: str
    species: str


@dataclass(frozen=True)
class BoxGeometry:
    """
    Pixel geometry of one species' box, median line and whiskers.

    Vertical positions are pixel rows, so ``box_top <= box_bottom`` on an
    inverted y axis.
    """
    species: str
    x: float
    width: float
    box_top: float
    box_bottom: float
    median_y: float
    whisker_top: float
    whisker_bottom: float
    summary: QuartileSummary

    @property
    def center(self) -> float:
        return self.x + self.width / 2

    @property
    def box_height(self) -> float:
        return self.box_bottom - self.box_top


class GeometryMapper(LoggerMixin):
    """
    Build scales and plot primitives for the scatter plot and the boxplot.
    """

    def __init__(self, config: Optional[Dict] = None, layout: Optional[str] = None):
        """
        Initialize geometry mapper.

        Parameters
        ----------
        config : dict, optional
            Configuration dictionary (``chart`` and ``data`` sections)
        layout : str, optional
            Layout name overriding ``chart.layout``
        """
        self.config = config or {}
        chart_config = self.config.get('chart', {}) or {}
        data_config = self.config.get('data', {}) or {}
        analysis_config = self.config.get('analysis', {}) or {}

        self.layout_name = layout or chart_config.get('layout', 'wide')
        self.scatter_layout: ChartLayout = get_layout(self.layout_name, 'scatter')
        self.box_layout: ChartLayout = get_layout(self.layout_name, 'boxplot')
        self.box_padding = chart_config.get('box_padding', 0.2)
        self.palette = chart_config.get('palette') or {}
        self.configured_species = data_config.get('species')
        self.box_value_col = analysis_config.get('value_column') or 'petal_length'

    def color_for(self, species: str) -> str:
        """Fixed categorical colour for a species label."""
        if species in self.palette:
            return self.palette[species]
        key = species[len('Iris-'):] if species.startswith('Iris-') else species
        return PALETTE.get(key, FALLBACK_COLOR)

    def species_domain(self, data: pd.DataFrame) -> List[str]:
        """
        Ordered species labels for the categorical axis and legend.

        Labels present in the data but outside the fixed domain are appended
        in order of first appearance.
        """
        present = list(data['species'].unique())
        domain = species_domain(present, self.configured_species)
        return domain + [label for label in present if label not in domain]

    def scatter_scales(self, data: pd.DataFrame) -> Tuple[LinearScale, LinearScale]:
        """
        Scales for the scatter plot.

        Returns
        -------
        tuple
            (x scale over petal length, y scale over petal width)
        """
        layout = self.scatter_layout
        x = LinearScale.from_values(
            data['petal_length'],
            (0, layout.width),
            pad_upper=layout.x_domain_padding
        )
        y = LinearScale.from_values(data['petal_width'], (layout.height, 0))
        return x, y

    def scatter_points(self, data: pd.DataFrame) -> List[PlotPoint]:
        """
        Place every record on the scatter plot, in record order.

        Parameters
        ----------
        data : pd.DataFrame
            Records

        Returns
        -------
        list of PlotPoint
            Points in pixel space
        """
        x, y = self.scatter_scales(data)
        xs = x(data['petal_length'].to_numpy())
        ys = y(data['petal_width'].to_numpy())

        points = [
            PlotPoint(x=float(px), y=float(py), color=self.color_for(species), species=species)
            for px, py, species in zip(xs, ys, data['species'])
        ]
        self.logger.debug(f"Mapped {len(points)} scatter points")
        return points

    def box_scales(self, data: pd.DataFrame) -> Tuple[BandScale, LinearScale]:
        """
        Scales for the boxplot.

        Returns
        -------
        tuple
            (band scale over species, y scale over the analysed measurement)
        """
        layout = self.box_layout
        x = BandScale(self.species_domain(data), (0, layout.width), padding=self.box_padding)
        y = LinearScale.from_values(data[self.box_value_col], (layout.height, 0))
        return x, y

    def box_geometries(
        self,
        data: pd.DataFrame,
        summaries: Optional[Dict[str, QuartileSummary]] = None
    ) -> Dict[str, BoxGeometry]:
        """
        Box, median and whisker positions for each species.

        Parameters
        ----------
        data : pd.DataFrame
            Records (the y domain spans every value of the analysed column)
        summaries : dict, optional
            Precomputed ``{species: QuartileSummary}``; computed from ``data``
            when omitted

        Returns
        -------
        dict
            ``{species: BoxGeometry}`` in species-domain order
        """
        x, y = self.box_scales(data)
        if summaries is None:
            summaries = group_quartiles(data, self.box_value_col, 'species', order=x.domain)

        geometries = {}
        for species, summary in summaries.items():
            geometries[species] = BoxGeometry(
                species=species,
                x=x(species),
                width=x.bandwidth,
                box_top=y(summary.q3),
                box_bottom=y(summary.q1),
                median_y=y(summary.median),
                whisker_top=y(summary.upper_whisker),
                whisker_bottom=y(summary.lower_whisker),
                summary=summary
            )

        self.logger.debug(f"Mapped {len(geometries)} boxes")
        return geometries
