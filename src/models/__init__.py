"""Data models for cron descriptions."""

from .expression import CronField, CanonicalExpression, POSITIONAL_FIELDS
from .options import Options, DescriptionScope

__all__ = [
    "CronField",
    "CanonicalExpression",
    "POSITIONAL_FIELDS",
    "Options",
    "DescriptionScope"
]
