"""Exceptions raised by the scoring engine.

Expected clinical states (ineligible age, incomplete input, unscoreable
values) are ordinary return values. These exceptions are reserved for
programmer errors and defects in the normative data.
"""


class NeuroScoreError(Exception):
    """Base class for engine errors."""


class UnknownTestError(NeuroScoreError, KeyError):
    """Raised when a test code or subscore name is not registered."""

    def __init__(self, test_code: str, subscore: str | None = None):
        self.test_code = test_code
        self.subscore = subscore
        if subscore is None:
            message = f"Unknown test code: {test_code}"
        else:
            message = f"Unknown subscore {subscore!r} for test {test_code}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class NormativeDataError(NeuroScoreError, ValueError):
    """Raised when a normative table fails load-time validation."""

    def __init__(self, table_name: str, problems: list[str]):
        self.table_name = table_name
        self.problems = problems
        super().__init__(f"Invalid normative table {table_name}: " + "; ".join(problems))


class ImmutableResultError(NeuroScoreError):
    """Raised on any attempt to modify or delete a persisted test result."""
