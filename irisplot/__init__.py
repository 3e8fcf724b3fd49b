"""
Iris Charts

Loads the Iris flower dataset, summarises petal measurements per species and
maps them to pixel-space geometry for a scatter plot and a side-by-side boxplot.
"""

__version__ = "1.0.0"
__author__ = "Iris Charts Team"
