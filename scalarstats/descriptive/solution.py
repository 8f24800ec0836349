"""
Summary statistics record.

SummaryStats is created once by summarystats() and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass

_REPORT_ROWS = (
    ("Mean:", "mean"),
    ("Minimum:", "min"),
    ("1st Quartile:", "q25"),
    ("Median:", "median"),
    ("3rd Quartile:", "q75"),
    ("Maximum:", "max"),
)


@dataclass(frozen=True)
class SummaryStats:
    """
    Five-number summary plus the mean of a sample.

    Quartiles use quantile type 7.
    """
    mean: float
    min: float
    q25: float
    median: float
    q75: float
    max: float

    def summary(self) -> str:
        """Six-line report, values with six decimals."""
        lines = ["Summary Stats:"]
        for label, field_name in _REPORT_ROWS:
            lines.append(f"{label:<14}{getattr(self, field_name):.6f}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.summary()
