import pytest
from scipy import stats

from experiment_design.study_types import IMPLEMENTED_STUDY_TYPES, StudyType, get_study_type_by_value
from experiment_design.study_variables import (
    AnovaVariables,
    PairedVariables,
    ProportionVariables,
    TwoSampleVariables,
)
from statistical_analysis.errors import UnsupportedTestError, ValidationError
from statistical_engine import PROCEDURES, StatisticalEngine, run_statistical_test


@pytest.mark.parametrize("study_type,variables", [
    ("two-proportion-z-test", ProportionVariables(100, 50, 100, 30)),
    ("two-sample-t-test", TwoSampleVariables([1, 2, 3], [2, 3, 4])),
    ("paired-t-test", PairedVariables([(1, 2), (2, 4), (3, 5)])),
    ("anova", AnovaVariables([1, 2, 3], [2, 3, 4], [5, 6, 7])),
])
def test_dispatches_to_matching_procedure(study_type, variables):
    result = run_statistical_test(study_type, variables)
    assert result.test_type == study_type
    assert result.assumptions


def test_accepts_enum_tags():
    result = run_statistical_test(StudyType.TWO_PROPORTION_Z_TEST, ProportionVariables(100, 50, 100, 30))
    assert result.significant is True


@pytest.mark.parametrize("study_type", ["mcnemar-test", "fisher-exact-test", StudyType.MCNEMAR_TEST])
def test_declared_but_unimplemented_study_types(study_type):
    with pytest.raises(UnsupportedTestError, match="Unsupported study type"):
        run_statistical_test(study_type, ProportionVariables(100, 50, 100, 30))

    # still offered by the catalog
    option = get_study_type_by_value(study_type)
    assert option is not None
    assert option.implemented is False


def test_unknown_study_type():
    with pytest.raises(UnsupportedTestError) as excinfo:
        run_statistical_test("chi-square-test", ProportionVariables(100, 50, 100, 30))

    assert excinfo.value.study_type == "chi-square-test"
    assert "chi-square-test" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_variables_of_the_wrong_kind():
    with pytest.raises(ValidationError, match="expects TwoSampleVariables"):
        run_statistical_test("two-sample-t-test", ProportionVariables(100, 50, 100, 30))


def test_procedure_errors_propagate():
    with pytest.raises(ValidationError, match="Successes cannot exceed sample size"):
        run_statistical_test("two-proportion-z-test", ProportionVariables(10, 20, 10, 5))


class TestStatisticalEngine:

    def test_default_alpha_fills_missing_alpha(self):
        engine = StatisticalEngine(default_alpha=0.01)
        result = engine.run_statistical_test("two-proportion-z-test", ProportionVariables(100, 50, 100, 30))
        assert result.alpha == 0.01

    def test_explicit_alpha_wins(self):
        engine = StatisticalEngine(default_alpha=0.01)
        result = engine.run_statistical_test(
            "two-proportion-z-test", ProportionVariables(100, 50, 100, 30, alpha=0.1)
        )
        assert result.alpha == 0.1

    def test_invalid_default_alpha(self):
        with pytest.raises(ValidationError):
            StatisticalEngine(default_alpha=2)

    def test_exact_distributions(self):
        group1 = [5.1, 4.8, 6.0, 5.5, 5.9]
        group2 = [4.2, 4.9, 4.4, 5.0, 4.1, 4.6]
        engine = StatisticalEngine(exact_distributions=True)
        result = engine.run_statistical_test("two-sample-t-test", TwoSampleVariables(group1, group2))

        assert result.p_value == pytest.approx(stats.ttest_ind(group1, group2).pvalue)

    def test_supported_study_types(self):
        supported = StatisticalEngine().supported_study_types()
        assert set(supported) == {
            StudyType.TWO_PROPORTION_Z_TEST,
            StudyType.TWO_SAMPLE_T_TEST,
            StudyType.PAIRED_T_TEST,
            StudyType.ANOVA,
        }

    def test_analyze_study_from_fields(self):
        engine = StatisticalEngine()
        result = engine.analyze_study(
            "anova",
            group1_data=[1, 2, 3],
            group2_data=[4, 5, 6],
            n1=100,  # ignored, not an ANOVA field
        )
        assert result.group_means == (2.0, 5.0)

    def test_analyze_study_with_missing_fields(self):
        with pytest.raises(ValidationError, match="Missing variables"):
            StatisticalEngine().analyze_study("two-proportion-z-test", n1=100, x1=50)

    def test_analyze_study_with_unsupported_type(self):
        with pytest.raises(UnsupportedTestError):
            StatisticalEngine().analyze_study("fisher-exact-test", n1=10, x1=2, n2=10, x2=7)

    def test_analyze_study_with_malformed_pairs(self):
        engine = StatisticalEngine()
        with pytest.raises(ValidationError, match="before, after"):
            engine.analyze_study("paired-t-test", paired_data=[(1, 2, 3), (2, 3, 4)])
        with pytest.raises(ValidationError, match="before, after"):
            engine.analyze_study("paired-t-test", paired_data=[{"before": 1}, {"before": 2}])


def test_catalog_and_procedures_agree_on_implemented_types():
    assert set(PROCEDURES) == IMPLEMENTED_STUDY_TYPES
