"""
Visualization and charting module.
"""

from .charts import ChartGenerator
from .plots import PlotUtilities

__all__ = ['ChartGenerator', 'PlotUtilities']
