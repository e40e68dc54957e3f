from typing import Any, Dict, Optional, Tuple
from dataclasses import dataclass, fields
from enum import Enum

from experiment_design.study_types import StudyType
from experiment_design.study_variables import Alternative


ASSUMPTIONS_OK = "Assumptions appear OK"


@dataclass(frozen=True)
class StudyResult:
    """Verdict of a single hypothesis test; fields a test does not produce stay None"""

    test_type: StudyType
    p_value: float
    significant: bool
    alpha: float
    alternative: Alternative
    assumptions: Tuple[str, ...]

    # Two-proportion z-test
    p1: Optional[float] = None
    p2: Optional[float] = None
    effect: Optional[float] = None
    z: Optional[float] = None
    ci_lower: Optional[float] = None
    ci_upper: Optional[float] = None

    # t-tests
    mean1: Optional[float] = None
    mean2: Optional[float] = None
    mean_difference: Optional[float] = None
    t: Optional[float] = None
    degrees_of_freedom: Optional[int] = None

    # One-way ANOVA
    f: Optional[float] = None
    group_means: Optional[Tuple[float, ...]] = None
    grand_mean: Optional[float] = None
    between_groups_ss: Optional[float] = None
    within_groups_ss: Optional[float] = None

    @property
    def confidence_interval(self) -> Optional[Tuple[float, float]]:
        if self.ci_lower is None or self.ci_upper is None:
            return None
        return (self.ci_lower, self.ci_upper)

    def to_dict(self) -> Dict[str, Any]:
        """Populated fields only, enums as their string values"""
        result = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if value is None:
                continue
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, tuple):
                value = list(value)
            result[field.name] = value
        return result
