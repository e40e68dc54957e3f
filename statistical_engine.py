import logging
from dataclasses import replace
from typing import Any, Callable, Dict, List, Union

from experiment_design.study_types import StudyType
from experiment_design.study_variables import (
    VARIABLES_BY_STUDY_TYPE,
    StudyVariables,
    variables_from_mapping,
)
from statistical_analysis.distributions import APPROXIMATE, EXACT, DistributionSet
from statistical_analysis.errors import UnsupportedTestError, ValidationError
from statistical_analysis.hypothesis_tests import (
    one_way_anova,
    paired_t_test,
    two_proportion_z_test,
    two_sample_t_test,
)
from statistical_analysis.results import StudyResult
from statistical_analysis.validation import DEFAULT_ALPHA, resolve_alpha


logger = logging.getLogger(__name__)

Procedure = Callable[[StudyVariables, DistributionSet], StudyResult]

# McNemar's and Fisher's exact tests are declared study types without a procedure
PROCEDURES: Dict[StudyType, Procedure] = {
    StudyType.TWO_PROPORTION_Z_TEST: two_proportion_z_test,
    StudyType.TWO_SAMPLE_T_TEST: two_sample_t_test,
    StudyType.PAIRED_T_TEST: paired_t_test,
    StudyType.ANOVA: one_way_anova,
}


class StatisticalEngine:
    """Runs the hypothesis test that matches a study type"""

    def __init__(self, default_alpha: float = DEFAULT_ALPHA, exact_distributions: bool = False):
        self.default_alpha = resolve_alpha(default_alpha)
        self.distributions = EXACT if exact_distributions else APPROXIMATE

    def supported_study_types(self) -> List[StudyType]:
        return list(PROCEDURES)

    def run_statistical_test(
        self,
        study_type: Union[StudyType, str],
        variables: StudyVariables
    ) -> StudyResult:
        """
        Dispatch a study to its procedure.

        Raises:
            UnsupportedTestError: if the study type has no implemented procedure
            ValidationError: if the variables do not belong to the study type or are invalid
        """
        study_type = self._resolve_study_type(study_type)

        expected = VARIABLES_BY_STUDY_TYPE[study_type]
        if not isinstance(variables, expected):
            raise ValidationError(
                f"{study_type.value} expects {expected.__name__}, got {type(variables).__name__}"
            )

        if variables.alpha is None:
            variables = replace(variables, alpha=self.default_alpha)

        logger.debug(
            f"Running {study_type.value} with alpha={variables.alpha} "
            f"({self.distributions.name} distributions)"
        )
        return PROCEDURES[study_type](variables, self.distributions)

    def analyze_study(self, study_type: Union[StudyType, str], **fields: Any) -> StudyResult:
        """Build the input bundle from keyword fields and run the study"""
        study_type = self._resolve_study_type(study_type)
        try:
            variables = variables_from_mapping(study_type, fields)
        except TypeError as e:
            raise ValidationError(f"Missing variables for {study_type.value}: {e}") from e
        return self.run_statistical_test(study_type, variables)

    def _resolve_study_type(self, study_type: Union[StudyType, str]) -> StudyType:
        try:
            resolved = StudyType(study_type)
        except ValueError:
            resolved = None

        if resolved not in PROCEDURES:
            logger.warning(f"No procedure for study type: {study_type}")
            tag = study_type.value if isinstance(study_type, StudyType) else study_type
            raise UnsupportedTestError(tag)
        return resolved


_default_engine = StatisticalEngine()


def run_statistical_test(study_type: Union[StudyType, str], variables: StudyVariables) -> StudyResult:
    """Run a study with the default engine (alpha 0.05, approximate distributions)"""
    return _default_engine.run_statistical_test(study_type, variables)
