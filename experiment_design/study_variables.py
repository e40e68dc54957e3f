from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Type, Union
from dataclasses import dataclass
from enum import Enum

from experiment_design.study_types import StudyType
from statistical_analysis.errors import ValidationError


class Alternative(str, Enum):
    TWO_SIDED = "two-sided"
    GREATER = "greater"
    LESS = "less"


def _as_tuple(values: Optional[Sequence[float]]) -> Optional[Tuple[float, ...]]:
    if values is None:
        return None
    return tuple(values)


@dataclass(frozen=True)
class PairedObservation:
    before: float
    after: float

    @classmethod
    def coerce(cls, pair: Any) -> "PairedObservation":
        """Accept an observation, a (before, after) pair or a mapping with both keys"""
        if isinstance(pair, cls):
            return pair
        try:
            if isinstance(pair, Mapping):
                return cls(before=pair["before"], after=pair["after"])
            before, after = pair
        except (KeyError, TypeError, ValueError):
            raise ValidationError("Paired data must be (before, after) pairs") from None
        return cls(before=before, after=after)


@dataclass(frozen=True)
class ProportionVariables:
    n1: int
    x1: int
    n2: int
    x2: int
    alpha: Optional[float] = None
    alternative: Union[Alternative, str] = Alternative.TWO_SIDED


@dataclass(frozen=True)
class TwoSampleVariables:
    group1_data: Sequence[float]
    group2_data: Sequence[float]
    alpha: Optional[float] = None
    alternative: Union[Alternative, str] = Alternative.TWO_SIDED

    def __post_init__(self):
        object.__setattr__(self, "group1_data", _as_tuple(self.group1_data))
        object.__setattr__(self, "group2_data", _as_tuple(self.group2_data))


@dataclass(frozen=True)
class PairedVariables:
    paired_data: Sequence[PairedObservation]
    alpha: Optional[float] = None
    alternative: Union[Alternative, str] = Alternative.TWO_SIDED

    def __post_init__(self):
        if self.paired_data is not None:
            pairs = tuple(PairedObservation.coerce(pair) for pair in self.paired_data)
            object.__setattr__(self, "paired_data", pairs)


@dataclass(frozen=True)
class AnovaVariables:
    group1_data: Optional[Sequence[float]]
    group2_data: Optional[Sequence[float]]
    group3_data: Optional[Sequence[float]] = None
    alpha: Optional[float] = None
    # Ignored: the F-test is one-tailed
    alternative: Union[Alternative, str] = Alternative.TWO_SIDED

    def __post_init__(self):
        object.__setattr__(self, "group1_data", _as_tuple(self.group1_data))
        object.__setattr__(self, "group2_data", _as_tuple(self.group2_data))
        object.__setattr__(self, "group3_data", _as_tuple(self.group3_data))

    @property
    def groups(self) -> Tuple[Optional[Tuple[float, ...]], ...]:
        return (self.group1_data, self.group2_data, self.group3_data)


StudyVariables = Union[ProportionVariables, TwoSampleVariables, PairedVariables, AnovaVariables]

VARIABLES_BY_STUDY_TYPE: Dict[StudyType, Type] = {
    StudyType.TWO_PROPORTION_Z_TEST: ProportionVariables,
    StudyType.TWO_SAMPLE_T_TEST: TwoSampleVariables,
    StudyType.PAIRED_T_TEST: PairedVariables,
    StudyType.ANOVA: AnovaVariables,
}


def variables_from_mapping(study_type: Union[StudyType, str], data: Mapping[str, Any]) -> StudyVariables:
    """
    Build the input bundle for a study type from a flat mapping of field names.

    Only the fields used by that study type are picked up, so a mapping that
    carries every field a form can produce is accepted as-is.

    Raises:
        ValueError: if the study type has no input bundle
        TypeError: if a required field is missing
    """
    variables_type = VARIABLES_BY_STUDY_TYPE.get(StudyType(study_type))
    if variables_type is None:
        raise ValueError(f"No input bundle for study type: {study_type}")

    field_names = variables_type.__dataclass_fields__.keys()
    return variables_type(**{name: data[name] for name in field_names if name in data})
