"""
Helper functions and utilities.
"""

import re
import numpy as np
from typing import Iterable, List, Union

__all__ = ['ensure_list', 'normalize_name', 'is_finite_array']


def ensure_list(value: Union[str, Iterable]) -> List:
    """
    Ensure value is a list.

    Parameters
    ----------
    value : str or iterable
        Value to convert

    Returns
    -------
    list
        Value as list
    """
    if isinstance(value, list):
        return value
    if isinstance(value, str):
        return [value]
    return list(value)


def normalize_name(name: str) -> str:
    """
    Reduce a column header to a comparison key.

    ``'PetalLength'``, ``'petalLength'``, ``'petal_length'`` and
    ``'Petal Length'`` all become ``'petallength'``.
    """
    return re.sub(r'[\s_\-\.]+', '', str(name)).lower()


def is_finite_array(values) -> bool:
    """Return True if every element of ``values`` is a finite number."""
    arr = np.asarray(values, dtype=float)
    return bool(np.isfinite(arr).all())
