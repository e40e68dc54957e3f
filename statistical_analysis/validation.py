"""Input checks shared by the hypothesis-test procedures"""

import math
from numbers import Real
from typing import Any, Optional, Sequence, Tuple, Union

from experiment_design.study_variables import Alternative
from statistical_analysis.errors import ValidationError


DEFAULT_ALPHA = 0.05


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def resolve_alpha(alpha: Optional[float]) -> float:
    if alpha is None:
        return DEFAULT_ALPHA
    if not _is_number(alpha) or not math.isfinite(alpha):
        raise ValidationError("Alpha must be a number")
    if not 0 < alpha < 1:
        raise ValidationError("Alpha must be between 0 and 1")
    return float(alpha)


def resolve_alternative(alternative: Union[Alternative, str]) -> Alternative:
    try:
        return Alternative(alternative)
    except ValueError:
        raise ValidationError("Alternative must be 'two-sided', 'greater', or 'less'") from None


def require_counts(n1: Any, x1: Any, n2: Any, x2: Any) -> Tuple[int, int, int, int]:
    """Validate the sample sizes and success counts of two groups"""
    counts = (n1, x1, n2, x2)
    if not all(_is_number(value) and math.isfinite(value) for value in counts):
        raise ValidationError("Inputs must be numbers")
    if not all(float(value).is_integer() for value in counts):
        raise ValidationError("Counts must be integers")

    n1, x1, n2, x2 = (int(value) for value in counts)
    if n1 < 1 or n2 < 1:
        raise ValidationError("Sample sizes must be at least 1")
    if x1 < 0 or x2 < 0:
        raise ValidationError("Successes cannot be negative")
    if x1 > n1 or x2 > n2:
        raise ValidationError("Successes cannot exceed sample size")
    return n1, x1, n2, x2


def require_finite(values: Sequence[Any], label: str) -> Tuple[float, ...]:
    if not all(_is_number(value) and math.isfinite(value) for value in values):
        raise ValidationError(f"{label} must contain only finite numbers")
    return tuple(float(value) for value in values)


def has_data(values: Optional[Sequence[float]]) -> bool:
    return values is not None and len(values) > 0


def require_degrees_of_freedom(df: int) -> int:
    if df < 1:
        raise ValidationError("Not enough observations: at least one degree of freedom is required")
    return df
