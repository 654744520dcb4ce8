"""Errors raised while parsing or describing cron expressions."""

from typing import Optional

from models import CronField

BUILD_ERROR_MESSAGE = (
    "An error occurred when generating the expression description. "
    "Check the cron expression syntax."
)


class CronExpressionError(ValueError):
    """Base class for cron expression failures, tagged with the offending field."""

    def __init__(self, message: str, field: CronField = CronField.EXPRESSION):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self):
        return {"field": self.field.value, "message": self.message}


class WholeExpressionError(CronExpressionError):
    """Shape-level failure: wrong part count or conflicting day fields."""

    def __init__(self, message: str):
        super().__init__(message, CronField.EXPRESSION)


class FieldError(CronExpressionError):
    """A single field does not match its grammar."""

    def __init__(self, field: CronField, message: Optional[str] = None):
        if message is None:
            message = f"The expression describing the {field.label} field is not in a valid format"
        super().__init__(message, field)
