"""Scales mapping data values onto pixel positions and colours.

The scales follow the usual charting conventions:

- a linear scale maps a numeric domain onto a numeric range, optionally
  clamped; a degenerate domain maps everything to the middle of the range
- a band scale splits a pixel range into equal bands, one per category,
  with inner and outer padding expressed as a fraction of the step
- a time scale is a linear scale over timestamps
- a sequential colour scale maps a numeric domain onto a colormap

NaN inputs map to NaN so malformed rows simply produce no geometry.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from matplotlib import colormaps
from matplotlib.colors import Colormap, to_hex
from matplotlib.ticker import MaxNLocator

Interval = Tuple[float, float]


def extent(values: Iterable[float]) -> Interval:
    """Return (min, max) of the values, ignoring NaN.

    An empty or all-NaN input yields (nan, nan).
    """
    arr = np.asarray(list(values), dtype=float)
    arr = arr[~np.isnan(arr)]
    if arr.size == 0:
        return (math.nan, math.nan)
    return (float(arr.min()), float(arr.max()))


@dataclass(frozen=True)
class LinearScale:
    """Continuous numeric domain -> continuous numeric range."""

    domain: Interval
    range: Interval
    clamp: bool = False

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if value is None or math.isnan(value) or math.isnan(d0) or math.isnan(d1):
            return math.nan
        if d1 == d0:
            t = 0.5
        else:
            t = (value - d0) / (d1 - d0)
        if self.clamp:
            t = min(1.0, max(0.0, t))
        return r0 + t * (r1 - r0)

    def ticks(self, count: int = 10) -> List[float]:
        """Round tick values inside the domain."""
        d0, d1 = sorted(self.domain)
        if math.isnan(d0) or math.isnan(d1):
            return []
        if d0 == d1:
            return [d0]
        values = MaxNLocator(nbins=count, steps=[1, 2, 2.5, 5, 10]).tick_values(d0, d1)
        eps = (d1 - d0) * 1e-9
        return [float(v) for v in values if d0 - eps <= v <= d1 + eps]


@dataclass(frozen=True)
class BandScale:
    """Discrete categories -> equal-width pixel bands."""

    domain: Sequence[str]
    range: Interval
    padding: float = 0.0
    align: float = 0.5
    _starts: Dict[str, float] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Duplicate categories collapse onto their first position
        categories = list(dict.fromkeys(self.domain))
        object.__setattr__(self, "domain", tuple(categories))

        r0, r1 = self.range
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)
        n = len(categories)
        step = (stop - start) / max(1.0, n - self.padding + self.padding * 2)
        start += (stop - start - step * (n - self.padding)) * self.align
        positions = [start + step * i for i in range(n)]
        if reverse:
            positions.reverse()
        object.__setattr__(self, "_step", step)
        object.__setattr__(self, "_starts", dict(zip(categories, positions)))

    def __call__(self, category: str) -> Optional[float]:
        return self._starts.get(category)

    @property
    def step(self) -> float:
        """Distance between the starts of adjacent bands."""
        return self._step

    @property
    def bandwidth(self) -> float:
        """Width of each band."""
        return self._step * (1 - self.padding)


@dataclass(frozen=True)
class TimeScale:
    """Timestamps -> continuous numeric range."""

    domain: Tuple[pd.Timestamp, pd.Timestamp]
    range: Interval

    @property
    def _linear(self) -> LinearScale:
        return LinearScale(
            domain=(_timestamp_value(self.domain[0]), _timestamp_value(self.domain[1])),
            range=self.range,
        )

    def __call__(self, value) -> float:
        return self._linear(_timestamp_value(value))


@dataclass(frozen=True)
class SequentialColorScale:
    """Continuous numeric domain -> colour from a sequential colormap."""

    domain: Interval
    cmap: str = "viridis"

    @property
    def colormap(self) -> Colormap:
        return colormaps[self.cmap]

    def __call__(self, value: float) -> str:
        d0, d1 = self.domain
        if value is None or math.isnan(value) or math.isnan(d0) or math.isnan(d1):
            return "none"
        t = 0.5 if d1 == d0 else (value - d0) / (d1 - d0)
        return to_hex(self.colormap(min(1.0, max(0.0, t))))


def _timestamp_value(value) -> float:
    """Timestamp as float nanoseconds, NaN for missing dates."""
    if value is None or pd.isna(value):
        return math.nan
    return float(pd.Timestamp(value).value)
