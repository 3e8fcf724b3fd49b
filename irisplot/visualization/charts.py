"""
Scatter plot and boxplot generation for the Iris dataset.
"""

import pandas as pd
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
from pathlib import Path
from typing import Dict, Optional, Union

from irisplot.analysis.quartiles import QuartileCalculator, QuartileSummary
from irisplot.geometry.mapper import GeometryMapper
from irisplot.visualization.plots import PlotUtilities
from irisplot.utils.logger import LoggerMixin


class ChartGenerator(LoggerMixin):
    """
    Render the Iris scatter plot and side-by-side boxplot.
    """

    def __init__(self, config: Optional[Dict] = None, layout: Optional[str] = None):
        """
        Initialize chart generator.

        Parameters
        ----------
        config : dict, optional
            Configuration dictionary
        layout : str, optional
            Layout name overriding ``chart.layout`` (``'wide'`` or ``'compact'``)
        """
        self.config = config or {}

        general = self.config.get('general', {}) or {}
        self.style = general.get('style', 'default')
        self.color_palette = general.get('color_palette', 'tab10')
        self.dpi = general.get('dpi', 100)
        self.save_format = general.get('save_format', 'svg')
        self.save_dir = Path(general.get('save_dir', 'charts'))

        chart = self.config.get('chart', {}) or {}
        self.point_radius = chart.get('point_radius', 5)
        self.box_fill = chart.get('box_fill', '#69b3a2')
        self.legend_spacing = chart.get('legend_spacing', 20)

        self.mapper = GeometryMapper(self.config, layout=layout)
        self.calculator = QuartileCalculator(config=self.config)
        self.plotter = PlotUtilities(self.style, self.color_palette)

        self.logger.info(f"Initialized ChartGenerator ({self.mapper.layout_name} layout)")

    def generate_all_charts(
        self,
        data: pd.DataFrame,
        output_dir: Optional[Union[str, Path]] = None
    ) -> Dict[str, Path]:
        """
        Render both charts and write the quartile table.

        Parameters
        ----------
        data : pd.DataFrame
            Loaded records
        output_dir : str or Path, optional
            Output directory (``general.save_dir`` by default)

        Returns
        -------
        dict
            ``{'scatter': path, 'boxplot': path, 'quartiles': path}``
        """
        output_path = Path(output_dir) if output_dir is not None else self.save_dir
        output_path.mkdir(parents=True, exist_ok=True)

        self.logger.info(f"Generating charts for {len(data)} records...")

        summaries = self.calculator.summarize(data, order=self.mapper.species_domain(data))

        outputs = {
            'scatter': output_path / f"scatter.{self.save_format}",
            'boxplot': output_path / f"boxplot.{self.save_format}",
            'quartiles': output_path / "quartiles.csv",
        }

        self.plot_scatter(data, save_path=outputs['scatter'])
        self.plot_boxplot(data, summaries=summaries, save_path=outputs['boxplot'])
        self.plotter.close_all()

        self.calculator.to_frame(summaries).to_csv(outputs['quartiles'], index=False)
        self.logger.info(f"Saved quartile table to {outputs['quartiles']}")

        self.logger.info(f"Saved all charts to {output_path}")
        return outputs

    def plot_scatter(
        self,
        data: pd.DataFrame,
        save_path: Optional[Path] = None
    ) -> plt.Figure:
        """
        Plot petal length against petal width, coloured by species, with a legend.

        Parameters
        ----------
        data : pd.DataFrame
            Loaded records
        save_path : Path, optional
            Path to save figure

        Returns
        -------
        plt.Figure
            Matplotlib figure
        """
        layout = self.mapper.scatter_layout
        x, y = self.mapper.scatter_scales(data)
        points = self.mapper.scatter_points(data)
        size = self.plotter.marker_size(self.point_radius, self.dpi)

        fig, ax = self.plotter.setup_figure(layout, self.dpi)

        ax.scatter(
            [p.x for p in points],
            [p.y for p in points],
            s=size,
            c=[p.color for p in points],
            linewidths=0
        )

        self.plotter.format_axis(ax, x, y, xlabel="Petal Length", ylabel="Petal Width")

        # Legend rows sit outside the axes in the wide layout
        for i, species in enumerate(self.mapper.species_domain(data)):
            cy = i * self.legend_spacing
            ax.scatter(
                [layout.legend_x], [cy],
                s=size,
                c=[self.mapper.color_for(species)],
                linewidths=0,
                clip_on=False
            )
            ax.text(layout.legend_x + 15, cy + 5, species, va='baseline', clip_on=False)

        if save_path:
            self.plotter.save_figure(fig, save_path, dpi=self.dpi)
        else:
            plt.show()

        return fig

    def plot_boxplot(
        self,
        data: pd.DataFrame,
        summaries: Optional[Dict[str, QuartileSummary]] = None,
        save_path: Optional[Path] = None
    ) -> plt.Figure:
        """
        Plot side-by-side Tukey boxes of the analysed measurement per species.

        Parameters
        ----------
        data : pd.DataFrame
            Loaded records
        summaries : dict, optional
            Precomputed ``{species: QuartileSummary}``
        save_path : Path, optional
            Path to save figure

        Returns
        -------
        plt.Figure
            Matplotlib figure
        """
        layout = self.mapper.box_layout
        x, y = self.mapper.box_scales(data)
        geometries = self.mapper.box_geometries(data, summaries)

        fig, ax = self.plotter.setup_figure(layout, self.dpi)

        for box in geometries.values():
            ax.plot(
                [box.center, box.center],
                [box.whisker_bottom, box.whisker_top],
                color='black',
                linewidth=1,
                zorder=1
            )
            ax.add_patch(Rectangle(
                (box.x, box.box_top),
                box.width,
                box.box_height,
                facecolor=self.box_fill,
                edgecolor='none',
                zorder=2
            ))
            ax.plot(
                [box.x, box.x + box.width],
                [box.median_y, box.median_y],
                color='black',
                linewidth=1,
                zorder=3
            )

        ylabel = self.mapper.box_value_col.replace("_", " ").title()
        self.plotter.format_axis(ax, x, y, ylabel=ylabel)

        if save_path:
            self.plotter.save_figure(fig, save_path, dpi=self.dpi)
        else:
            plt.show()

        return fig
