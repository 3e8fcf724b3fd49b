"""
Linear and banded scales mapping data values to pixel positions.
"""

import math
import numpy as np
from matplotlib.ticker import MaxNLocator
from typing import Hashable, Iterable, List, Sequence, Tuple, Union

from irisplot.utils.errors import DataFormatError

Number = Union[int, float]


class LinearScale:
    """
    Continuous scale from a numeric domain ``[lo, hi]`` to a pixel range ``[p0, p1]``.

    An inverted range (``p0 > p1``) is used for vertical axes where pixel rows
    grow downwards.
    """

    def __init__(
        self,
        domain: Sequence[Number],
        output_range: Sequence[Number],
        clamp: bool = False
    ):
        lo, hi = float(domain[0]), float(domain[1])
        if not (math.isfinite(lo) and math.isfinite(hi)):
            raise DataFormatError(f"Scale domain must be finite, got [{lo}, {hi}]")
        if lo == hi:
            raise DataFormatError(f"Scale domain has zero width: [{lo}, {hi}]")

        self.domain = (lo, hi)
        self.range = (float(output_range[0]), float(output_range[1]))
        self.clamp = clamp

    @classmethod
    def from_values(
        cls,
        values: Iterable[Number],
        output_range: Sequence[Number],
        pad_upper: float = 0.0,
        clamp: bool = False
    ) -> 'LinearScale':
        """
        Build a scale whose domain spans ``[min(values), max(values) + pad_upper]``.
        """
        arr = np.asarray(list(values), dtype=float)
        if arr.size == 0:
            raise DataFormatError("Cannot derive a scale domain from no values")
        return cls((float(arr.min()), float(arr.max()) + pad_upper), output_range, clamp=clamp)

    def __call__(self, value):
        lo, hi = self.domain
        p0, p1 = self.range

        t = (np.asarray(value, dtype=float) - lo) / (hi - lo)
        if self.clamp:
            t = np.clip(t, 0.0, 1.0)
        # Weighted form returns the range bounds exactly at t == 0 and t == 1
        out = p0 * (1.0 - t) + p1 * t

        if np.ndim(out) == 0:
            return float(out)
        return out

    def invert(self, pixel):
        """Map a pixel position back to a domain value."""
        lo, hi = self.domain
        p0, p1 = self.range
        if p0 == p1:
            raise ValueError("Cannot invert a scale with a zero-width range")

        t = (np.asarray(pixel, dtype=float) - p0) / (p1 - p0)
        if self.clamp:
            t = np.clip(t, 0.0, 1.0)
        out = lo * (1.0 - t) + hi * t

        if np.ndim(out) == 0:
            return float(out)
        return out

    def ticks(self, count: int = 10) -> List[float]:
        """
        Evenly spaced round values inside the domain, for axis drawing.

        Parameters
        ----------
        count : int
            Approximate number of ticks

        Returns
        -------
        list of float
            Tick values, ascending
        """
        if count <= 0:
            return []

        lo, hi = sorted(self.domain)
        locator = MaxNLocator(nbins=count, steps=[1, 2, 5, 10])
        # Rounding strips float noise such as 0.6000000000000001
        values = np.round(locator.tick_values(lo, hi), 12)
        return [float(v) for v in values if lo <= v <= hi]

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, range={self.range}, clamp={self.clamp})"


class BandScale:
    """
    Categorical scale dividing a pixel range into equal padded bands.

    Inner and outer padding are both ``padding`` (a fraction of the step), and
    leftover space is distributed according to ``align`` (0.5 centres the bands).
    """

    def __init__(
        self,
        domain: Iterable[Hashable],
        output_range: Sequence[Number],
        padding: float = 0.2,
        align: float = 0.5
    ):
        if not 0.0 <= padding <= 1.0:
            raise ValueError(f"Band padding must be in [0, 1], got {padding}")
        if not 0.0 <= align <= 1.0:
            raise ValueError(f"Band align must be in [0, 1], got {align}")

        # Duplicates keep their first position
        self.domain = list(dict.fromkeys(domain))
        self.range = (float(output_range[0]), float(output_range[1]))
        self.padding = padding
        self.align = align

        n = len(self.domain)
        p0, p1 = self.range
        reverse = p1 < p0
        start, stop = (p1, p0) if reverse else (p0, p1)

        self.step = (stop - start) / max(1, n - padding + padding * 2)
        start += (stop - start - self.step * (n - padding)) * align
        self.bandwidth = self.step * (1 - padding)

        positions = [float(p) for p in start + self.step * np.arange(n)]
        if reverse:
            positions.reverse()
        self._positions = dict(zip(self.domain, positions))

    def __call__(self, label: Hashable) -> float:
        """Start position of ``label``'s band; ``KeyError`` for unknown labels."""
        try:
            return self._positions[label]
        except KeyError:
            raise KeyError(f"Label not in band scale domain: {label!r}") from None

    def __contains__(self, label: Hashable) -> bool:
        return label in self._positions

    def center(self, label: Hashable) -> float:
        return self(label) + self.bandwidth / 2

    def bands(self) -> List[Tuple[Hashable, float, float]]:
        """``(label, start, end)`` for every band, in domain order."""
        return [(label, pos, pos + self.bandwidth) for label, pos in self._positions.items()]

    def __repr__(self) -> str:
        return (
            f"BandScale(domain={self.domain}, range={self.range}, "
            f"padding={self.padding}, align={self.align})"
        )
