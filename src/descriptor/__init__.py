"""Cron expression parsing and description."""

from .core import CronDescriptor, describe, get_description, is_valid, parse
from .exceptions import CronExpressionError, FieldError, WholeExpressionError

__all__ = [
    "CronDescriptor",
    "describe",
    "get_description",
    "is_valid",
    "parse",
    "CronExpressionError",
    "FieldError",
    "WholeExpressionError"
]
