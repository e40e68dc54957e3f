class StatisticalEngineError(ValueError):
    """Base class for every error raised by the statistical engine"""


class DomainError(StatisticalEngineError):
    """A distribution function received an argument outside its valid domain"""


class ValidationError(StatisticalEngineError):
    """A study's input bundle violates one of its required invariants"""


class UnsupportedTestError(StatisticalEngineError):
    """The dispatcher received a study type with no implemented procedure"""

    def __init__(self, study_type: str):
        self.study_type = study_type
        super().__init__(f"Unsupported study type: {study_type}")
