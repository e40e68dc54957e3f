"""
Closed-form approximations of the probability distributions used by the
hypothesis tests.

- normal_cdf: Abramowitz & Stegun 7.1.26 error-function polynomial
- normal_inv: AS 241 style rational approximation of the probit
- t_cdf: coarse closed-form Student's t approximation (normal for df > 30)
- f_cdf: simplified stand-in for the regularized incomplete beta function

The t and F functions are coarse approximations. ``EXACT`` offers the
scipy.stats distributions with the same call signatures.
"""

import math
from dataclasses import dataclass
from typing import Callable

import numpy as np
from scipy import stats

from statistical_analysis.errors import DomainError


# erf(x) ~ 1 - (a1 t + a2 t^2 + ... + a5 t^5) exp(-x^2), t = 1 / (1 + p x)
_ERF_COEFFICIENTS = (1.061405429, -1.453152027, 1.421413741, -0.284496736, 0.254829592)
_ERF_P = 0.3275911

# Probit coefficients, highest power first
_PROBIT_CENTRAL_NUMERATOR = (
    -39.69683028665376, 220.9460984245205, -275.9285104469687,
    138.357751867269, -30.66479806614716, 2.506628277459239,
)
_PROBIT_CENTRAL_DENOMINATOR = (
    -54.47609879822406, 161.5858368580409, -155.6989798598866,
    66.80131188771972, -13.28068155288572, 1.0,
)
_PROBIT_TAIL_NUMERATOR = (
    -0.007784894002430293, -0.3223964580411365, -2.400758277161838,
    -2.549732539343734, 4.374664141464968, 2.938163982698783,
)
_PROBIT_TAIL_DENOMINATOR = (
    0.007784695709041462, 0.3224671290700398, 2.445134137142996,
    3.754408661907416, 1.0,
)
_PROBIT_LOW = 0.02425
_PROBIT_HIGH = 1 - _PROBIT_LOW

# Beyond this many degrees of freedom the t distribution is treated as normal
NORMAL_APPROXIMATION_DF = 30


def _erf(x: float) -> float:
    sign = 1.0 if x >= 0 else -1.0
    ax = abs(x)
    t = 1.0 / (1.0 + _ERF_P * ax)
    y = 1.0 - float(np.polyval(_ERF_COEFFICIENTS, t)) * t * math.exp(-ax * ax)
    return sign * y


def _log(value: float) -> float:
    # log(0) evaluates to -inf
    if value <= 0:
        return -math.inf
    return math.log(value)


def normal_cdf(z: float) -> float:
    """Standard normal CDF, absolute error around 1.5e-7"""
    return 0.5 * (1.0 + _erf(z / math.sqrt(2.0)))


def normal_inv(p: float) -> float:
    """
    Inverse of the standard normal CDF (probit).

    Three rational approximations are used: one for the lower tail
    (p < 0.02425), one for the central region and the mirrored tail formula
    for p > 1 - 0.02425. No refinement step is applied.

    Raises:
        DomainError: if p is not strictly between 0 and 1
    """
    if not 0 < p < 1:
        raise DomainError(f"p must be in (0,1), got {p}")

    if p < _PROBIT_LOW:
        q = math.sqrt(-2.0 * math.log(p))
        return float(np.polyval(_PROBIT_TAIL_NUMERATOR, q) / np.polyval(_PROBIT_TAIL_DENOMINATOR, q))

    if p <= _PROBIT_HIGH:
        q = p - 0.5
        r = q * q
        return float(
            np.polyval(_PROBIT_CENTRAL_NUMERATOR, r) * q / np.polyval(_PROBIT_CENTRAL_DENOMINATOR, r)
        )

    q = math.sqrt(-2.0 * math.log(1.0 - p))
    return -float(np.polyval(_PROBIT_TAIL_NUMERATOR, q) / np.polyval(_PROBIT_TAIL_DENOMINATOR, q))


def t_cdf(t: float, df: float) -> float:
    """Approximate Student's t CDF"""
    if df > NORMAL_APPROXIMATION_DF:
        return normal_cdf(t)
    if t == 0:
        return 0.5
    if math.isinf(t):
        return 1.0 if t > 0 else 0.0

    x = df / (df + t * t)
    beta = 0.5 * _log(x) + 0.5 * _log(1.0 - x)
    gamma = 0.5 * (math.log(math.pi) + _log(df))
    return 0.5 + 0.5 * math.copysign(1.0, t) * (1.0 - math.exp(beta - gamma))


def f_cdf(f: float, df1: float, df2: float) -> float:
    """Approximate F distribution CDF"""
    if f <= 0:
        return 0.0
    if math.isinf(f):
        return 1.0

    x = (df1 * f) / (df1 * f + df2)
    return 1.0 - (1.0 - x) ** (df2 / 2)


def _exact_normal_inv(p: float) -> float:
    if not 0 < p < 1:
        raise DomainError(f"p must be in (0,1), got {p}")
    return float(stats.norm.ppf(p))


def _exact_normal_cdf(z: float) -> float:
    return float(stats.norm.cdf(z))


def _exact_t_cdf(t: float, df: float) -> float:
    return float(stats.t.cdf(t, df))


def _exact_f_cdf(f: float, df1: float, df2: float) -> float:
    return float(stats.f.cdf(f, df1, df2))


@dataclass(frozen=True)
class DistributionSet:
    name: str
    normal_cdf: Callable[[float], float]
    normal_inv: Callable[[float], float]
    t_cdf: Callable[[float, float], float]
    f_cdf: Callable[[float, float, float], float]


APPROXIMATE = DistributionSet(
    name="approximate",
    normal_cdf=normal_cdf,
    normal_inv=normal_inv,
    t_cdf=t_cdf,
    f_cdf=f_cdf,
)

EXACT = DistributionSet(
    name="exact",
    normal_cdf=_exact_normal_cdf,
    normal_inv=_exact_normal_inv,
    t_cdf=_exact_t_cdf,
    f_cdf=_exact_f_cdf,
)
