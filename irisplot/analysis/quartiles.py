"""
Quartile statistics per species for Tukey boxplots.
"""

import pandas as pd
import numpy as np
from typing import Dict, Iterable, List, Optional, Sequence
from dataclasses import dataclass

from irisplot.utils.errors import DataFormatError
from irisplot.utils.helpers import is_finite_array
from irisplot.utils.logger import LoggerMixin

WHISKER_FACTOR = 1.5


@dataclass(frozen=True)
class QuartileSummary:
    """
    Quartiles of one group of measurements.
    """
    q1: float
    median: float
    q3: float
    iqr: float
    count: int = 0

    @property
    def lower_whisker(self) -> float:
        return self.q1 - WHISKER_FACTOR * self.iqr

    @property
    def upper_whisker(self) -> float:
        return self.q3 + WHISKER_FACTOR * self.iqr

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            'count': self.count,
            'q1': self.q1,
            'median': self.median,
            'q3': self.q3,
            'iqr': self.iqr,
            'lower_whisker': self.lower_whisker,
            'upper_whisker': self.upper_whisker
        }


def quantile(values: Sequence[float], p: float) -> float:
    """
    Quantile by linear interpolation between order statistics.

    For ``n`` sorted values the position is ``i = p * (n - 1)``; the result
    lies between the values at ``floor(i)`` and ``ceil(i)``. This is numpy's
    default ``'linear'`` method.

    Parameters
    ----------
    values : sequence of float
        Values in any order
    p : float
        Probability in [0, 1]

    Returns
    -------
    float
        Estimated quantile
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Quantile probability must be in [0, 1], got {p}")

    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        raise DataFormatError("Cannot compute a quantile of no values")

    return float(np.quantile(arr, p))


def compute_quartiles(values: Iterable[float]) -> QuartileSummary:
    """
    Compute Q1, median, Q3 and IQR of a group of values.

    Parameters
    ----------
    values : iterable of float
        Measurements in any order

    Returns
    -------
    QuartileSummary
        Quartile summary

    Raises
    ------
    DataFormatError
        If there are no values or any value is not finite
    """
    arr = np.asarray(list(values), dtype=float)
    if arr.size == 0:
        raise DataFormatError("Cannot summarise an empty group")
    if not is_finite_array(arr):
        raise DataFormatError("Group contains non-finite values")

    q1, median, q3 = (float(q) for q in np.quantile(arr, [0.25, 0.5, 0.75]))

    return QuartileSummary(q1=q1, median=median, q3=q3, iqr=q3 - q1, count=int(arr.size))


def group_quartiles(
    data: pd.DataFrame,
    value_col: str = 'petal_length',
    key_col: str = 'species',
    order: Optional[List[str]] = None
) -> Dict[str, QuartileSummary]:
    """
    Summarise ``value_col`` for every ``key_col`` group.

    Parameters
    ----------
    data : pd.DataFrame
        Records
    value_col : str
        Numeric column to summarise
    key_col : str
        Grouping column
    order : list of str, optional
        Preferred key order; keys not listed follow in order of first appearance

    Returns
    -------
    dict
        Insertion-ordered ``{key: QuartileSummary}``. Keys without records
        are not included.
    """
    groups = {key: frame[value_col] for key, frame in data.groupby(key_col, sort=False)}

    keys = [key for key in (order or []) if key in groups]
    keys += [key for key in groups if key not in keys]

    return {key: compute_quartiles(groups[key]) for key in keys}


class QuartileCalculator(LoggerMixin):
    """
    Compute per-species quartiles with configured columns.
    """

    def __init__(
        self,
        value_col: Optional[str] = None,
        key_col: str = 'species',
        config: Optional[Dict] = None
    ):
        """
        Initialize quartile calculator.

        Parameters
        ----------
        value_col : str, optional
            Numeric column to summarise (``analysis.value_column`` by default,
            then ``'petal_length'``)
        key_col : str
            Grouping column
        config : dict, optional
            Configuration dictionary (uses the ``analysis`` section)
        """
        self.config = config or {}
        analysis_config = self.config.get('analysis', {}) or {}

        self.value_col = value_col or analysis_config.get('value_column') or 'petal_length'
        self.key_col = key_col

    def summarize(
        self,
        data: pd.DataFrame,
        order: Optional[List[str]] = None
    ) -> Dict[str, QuartileSummary]:
        """
        Compute the ordered quartile mapping for ``data``.

        Parameters
        ----------
        data : pd.DataFrame
            Records
        order : list of str, optional
            Preferred key order

        Returns
        -------
        dict
            ``{species: QuartileSummary}``
        """
        summaries = group_quartiles(data, self.value_col, self.key_col, order)

        self.logger.info(
            f"Computed quartiles of '{self.value_col}' for {len(summaries)} groups"
        )
        for key, summary in summaries.items():
            self.logger.debug(
                f"{key}: n={summary.count} q1={summary.q1:.3f} "
                f"median={summary.median:.3f} q3={summary.q3:.3f} iqr={summary.iqr:.3f}"
            )

        return summaries

    def to_frame(self, summaries: Dict[str, QuartileSummary]) -> pd.DataFrame:
        """
        Convert summaries to a DataFrame, one row per group.

        Parameters
        ----------
        summaries : dict
            ``{species: QuartileSummary}``

        Returns
        -------
        pd.DataFrame
            Summary table
        """
        rows = [{self.key_col: key, **summary.to_dict()} for key, summary in summaries.items()]
        columns = [self.key_col, 'count', 'q1', 'median', 'q3', 'iqr',
                   'lower_whisker', 'upper_whisker']
        return pd.DataFrame(rows, columns=columns)
