"""
Exception hierarchy for scalarstats.

All exceptions inherit from ScalarStatsError to allow catching any
library-specific error.

Design principles:
    - Error messages are actionable with actual vs expected values
    - Numeric anomalies (zero variance, zero mean) are NOT exceptions;
      they surface as NaN/inf float results
    - Never catch and re-raise with less information
"""


class ScalarStatsError(Exception):
    """Base exception for all scalarstats errors."""
    pass


class ValidationError(ScalarStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a sample is not one-dimensional, or when a weight vector
    does not pair one-to-one with its sample.

    Attributes:
        expected: Expected length or ndim, if known
        actual: Actual length or ndim, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class EmptyInputError(ValidationError):
    """
    A statistic was requested over an empty sample.

    Attributes:
        operation: Name of the operation that rejected the input
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
