"""
Core infrastructure for scalarstats.

Shared abstractions used by the descriptive statistics module.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
"""

from scalarstats.core.exceptions import (
    ScalarStatsError,
    ValidationError,
    DimensionError,
    EmptyInputError,
)

__all__ = [
    "ScalarStatsError",
    "ValidationError",
    "DimensionError",
    "EmptyInputError",
]
