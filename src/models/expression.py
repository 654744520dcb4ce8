"""Canonical cron expression model."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional


class CronField(str, Enum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY_OF_MONTH = "day_of_month"
    MONTH = "month"
    DAY_OF_WEEK = "day_of_week"
    YEAR = "year"
    EXPRESSION = "expression"  # Whole expression, not a single slot

    @property
    def label(self) -> str:
        """Upper-case name used in error messages, e.g. "DAY OF WEEK"."""
        return self.value.replace("_", " ").upper()

    @property
    def position(self) -> Optional[int]:
        """Slot of this field in the 7-part canonical layout."""
        if self is CronField.EXPRESSION:
            return None
        return POSITIONAL_FIELDS.index(self)


POSITIONAL_FIELDS = [
    CronField.SECOND,
    CronField.MINUTE,
    CronField.HOUR,
    CronField.DAY_OF_MONTH,
    CronField.MONTH,
    CronField.DAY_OF_WEEK,
    CronField.YEAR,
]


@dataclass(frozen=True)
class CanonicalExpression:
    """A parsed, normalized and validated cron expression.

    Second and year may be empty strings, meaning the expression did not
    specify them. Every other slot is non-empty.
    """
    second: str
    minute: str
    hour: str
    day_of_month: str
    month: str
    day_of_week: str
    year: str
    part_count: int = 5  # Token count detected in the raw expression

    @classmethod
    def from_fields(cls, fields: List[str], part_count: int) -> "CanonicalExpression":
        if len(fields) != len(POSITIONAL_FIELDS):
            raise ValueError(f"Expected {len(POSITIONAL_FIELDS)} fields, got {len(fields)}")
        return cls(*fields, part_count=part_count)

    def __getitem__(self, field: CronField) -> str:
        return getattr(self, field.value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "second": self.second,
            "minute": self.minute,
            "hour": self.hour,
            "day_of_month": self.day_of_month,
            "month": self.month,
            "day_of_week": self.day_of_week,
            "year": self.year,
            "part_count": self.part_count
        }
