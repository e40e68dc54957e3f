"""
Descriptive statistics used by the hypothesis-test procedures.

The helpers return NaN instead of raising when the sample is too small;
the procedures are responsible for guaranteeing sufficient data.
"""

import math
from typing import Sequence

import numpy as np


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, NaN for an empty sequence"""
    data = [float(value) for value in values]
    if not data:
        return math.nan
    # fsum is correctly rounded, so the result does not depend on the order
    return math.fsum(data) / len(data)


def variance(values: Sequence[float]) -> float:
    """Sample variance with Bessel's correction, NaN for fewer than two values"""
    data = np.asarray(values, dtype=float)
    if data.size < 2:
        return math.nan
    return float(np.var(data, ddof=1))


def standard_deviation(values: Sequence[float]) -> float:
    return math.sqrt(variance(values))
