from typing import Optional, Tuple, Union
from dataclasses import dataclass
from enum import Enum


class StudyType(str, Enum):
    TWO_PROPORTION_Z_TEST = "two-proportion-z-test"  # binary data, two independent groups
    MCNEMAR_TEST = "mcnemar-test"  # binary data, paired
    TWO_SAMPLE_T_TEST = "two-sample-t-test"  # continuous data, two independent groups
    PAIRED_T_TEST = "paired-t-test"  # continuous data, paired
    ANOVA = "anova"  # continuous data, more than two groups
    FISHER_EXACT_TEST = "fisher-exact-test"  # small samples


class StudyCategory(str, Enum):
    BINARY = "binary"
    CONTINUOUS = "continuous"


class DataType(str, Enum):
    PROPORTIONS = "proportions"
    MEANS = "means"
    PAIRED = "paired"
    MULTIPLE_GROUPS = "multiple-groups"


IMPLEMENTED_STUDY_TYPES = frozenset({
    StudyType.TWO_PROPORTION_Z_TEST,
    StudyType.TWO_SAMPLE_T_TEST,
    StudyType.PAIRED_T_TEST,
    StudyType.ANOVA,
})


@dataclass(frozen=True)
class StudyTypeOption:
    value: StudyType
    label: str
    description: str
    category: StudyCategory
    data_type: DataType

    @property
    def implemented(self) -> bool:
        """Whether the engine has a procedure for this study type"""
        return self.value in IMPLEMENTED_STUDY_TYPES


STUDY_TYPES: Tuple[StudyTypeOption, ...] = (
    StudyTypeOption(
        value=StudyType.TWO_PROPORTION_Z_TEST,
        label="Two-Proportion Z-Test",
        description="Compare success rates between two independent groups",
        category=StudyCategory.BINARY,
        data_type=DataType.PROPORTIONS,
    ),
    StudyTypeOption(
        value=StudyType.TWO_SAMPLE_T_TEST,
        label="Two-Sample T-Test",
        description="Compare means between two independent groups",
        category=StudyCategory.CONTINUOUS,
        data_type=DataType.MEANS,
    ),
    StudyTypeOption(
        value=StudyType.PAIRED_T_TEST,
        label="Paired T-Test",
        description="Compare means for the same subjects (before/after)",
        category=StudyCategory.CONTINUOUS,
        data_type=DataType.PAIRED,
    ),
    StudyTypeOption(
        value=StudyType.ANOVA,
        label="ANOVA",
        description="Compare means across three or more groups",
        category=StudyCategory.CONTINUOUS,
        data_type=DataType.MULTIPLE_GROUPS,
    ),
    StudyTypeOption(
        value=StudyType.MCNEMAR_TEST,
        label="McNemar's Test",
        description="Compare proportions for paired categorical data",
        category=StudyCategory.BINARY,
        data_type=DataType.PAIRED,
    ),
    StudyTypeOption(
        value=StudyType.FISHER_EXACT_TEST,
        label="Fisher's Exact Test",
        description="Small sample size test for categorical data",
        category=StudyCategory.BINARY,
        data_type=DataType.PROPORTIONS,
    ),
)


def get_study_type_by_value(value: Union[StudyType, str]) -> Optional[StudyTypeOption]:
    """Look up a catalog entry by its tag, None when the tag is unknown"""
    for option in STUDY_TYPES:
        if option.value == value:
            return option
    return None
