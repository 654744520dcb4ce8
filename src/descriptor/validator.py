"""Validation of normalized cron fields."""

import re
import logging
from typing import List

from models import CronField, POSITIONAL_FIELDS
from .exceptions import FieldError, WholeExpressionError
from .grammar import FIELD_GRAMMARS, MIN_YEAR, MAX_YEAR

logger = logging.getLogger(__name__)

# Fields that may legitimately be left empty by the field shifter
OPTIONAL_FIELDS = (CronField.SECOND, CronField.YEAR)


def validate_fields(fields: List[str], part_count: int) -> None:
    """Check every normalized field against its grammar.

    Args:
        fields: The 7 normalized slots
        part_count: Number of parts detected in the raw expression

    Raises:
        WholeExpressionError: If both day of month and day of week are restricted
        FieldError: If a field does not match its grammar
    """
    day_of_month = fields[CronField.DAY_OF_MONTH.position]
    day_of_week = fields[CronField.DAY_OF_WEEK.position]

    if part_count > 5 and day_of_month != "*" and day_of_week != "*":
        raise WholeExpressionError(
            "Specifying both a Day of Month and Day of Week is not supported. "
            'Either one or the other should be declared as "?"'
        )

    for field in POSITIONAL_FIELDS:
        expression = fields[field.position]

        if field in OPTIONAL_FIELDS and not expression:
            continue

        # Year shapes are matched first, bounds get their own messages below
        check_bounds = field is not CronField.YEAR
        if not expression or not FIELD_GRAMMARS[field].matches(expression, check_bounds):
            logger.debug(f"Field {field.label} rejected: '{expression}'")
            raise FieldError(field)

    year = fields[CronField.YEAR.position]
    if year:
        check_year_bounds(year)


def check_year_bounds(expression: str) -> None:
    """Ensure year values and frequencies lie within the supported span."""
    grammar = FIELD_GRAMMARS[CronField.YEAR]
    base, _, frequency = expression.partition("/")

    for token in re.split(r"[-,]", base):
        if token != "*" and not MIN_YEAR <= int(token) <= MAX_YEAR:
            raise FieldError(
                CronField.YEAR,
                "The expression describing the YEAR field is not in a valid format. "
                f"Accepted year values are {MIN_YEAR}-{MAX_YEAR}"
            )

    if frequency and not grammar.step_minimum <= int(frequency) <= grammar.step_maximum:
        raise FieldError(
            CronField.YEAR,
            "The expression describing the YEAR field is not in a valid format. "
            f"Accepted frequency values are {grammar.step_minimum}-{grammar.step_maximum}"
        )
