"""Rewrite dialect-specific cron shorthand into one canonical grammar.

The normalized fields are what the validator and the description builder
work on:

- ``?`` placeholders become ``*`` (day of month and day of week)
- ``0/N`` and ``1/N`` become ``*/N``
- day-of-week digits are brought into the 0 (Sunday) to 6 (Saturday) range
- SUN..SAT and JAN..DEC names become numbers
- month, day-of-week and year steps with a start value become ranges
  (``3/2`` month -> ``3-12/2``)
"""

import re
import logging
from typing import List

from models import CronField, Options, POSITIONAL_FIELDS
from .exceptions import FieldError
from .grammar import DAY_ABBREVIATIONS, MONTH_ABBREVIATIONS, FIELD_GRAMMARS

logger = logging.getLogger(__name__)

SECOND = CronField.SECOND.position
MINUTE = CronField.MINUTE.position
HOUR = CronField.HOUR.position
DAY_OF_MONTH = CronField.DAY_OF_MONTH.position
MONTH = CronField.MONTH.position
DAY_OF_WEEK = CronField.DAY_OF_WEEK.position

# A day-of-week digit not preceded by "#" or "/" (those are occurrences and steps)
DOW_DIGIT_PATTERN = re.compile(r"(^\d)|([^#/\s]\d)")
RANGE_TOKEN_PATTERN = re.compile(r"[*/]")
STEP_BASE_PATTERN = re.compile(r"[*\-,]")
SINGLE_NUMBER_PATTERN = re.compile(r"^[0-9]+$")

ZERO_STEP_FIELDS = (CronField.SECOND, CronField.MINUTE, CronField.HOUR)
ONE_STEP_FIELDS = (CronField.DAY_OF_MONTH, CronField.MONTH, CronField.DAY_OF_WEEK, CronField.YEAR)

# Fields whose "start/step" values are rewritten as "start-maximum/step"
STEP_RANGE_FIELDS = (CronField.MONTH, CronField.DAY_OF_WEEK, CronField.YEAR)


def normalize_fields(fields: List[str], options: Options, part_count: int) -> List[str]:
    """Normalize shifted fields.

    Args:
        fields: The 7 slots produced by the field shifter
        options: Parsing options
        part_count: Number of parts detected in the raw expression

    Returns:
        A new list holding the normalized slots
    """
    parts = list(fields)

    for index in (DAY_OF_MONTH, DAY_OF_WEEK):
        parts[index] = parts[index].replace("?", "*")

    for field in ZERO_STEP_FIELDS:
        parts[field.position] = _rewrite_step_start(parts[field.position], "0/")
    for field in ONE_STEP_FIELDS:
        parts[field.position] = _rewrite_step_start(parts[field.position], "1/")

    parts[DAY_OF_WEEK] = adjust_day_of_week(parts[DAY_OF_WEEK], options, part_count)
    parts[DAY_OF_WEEK] = _replace_names(parts[DAY_OF_WEEK], DAY_ABBREVIATIONS, 0, 1)
    parts[MONTH] = _replace_names(parts[MONTH], MONTH_ABBREVIATIONS, 1, 2)

    if parts[SECOND] == "0":
        parts[SECOND] = ""

    parts[HOUR] = _expand_hour(parts[HOUR], parts[MINUTE], parts[SECOND])

    for field in POSITIONAL_FIELDS:
        parts[field.position] = _clean_up(field, parts[field.position])

    logger.debug(f"Normalized {fields} into {parts}")
    return parts


def adjust_day_of_week(expression: str, options: Options, part_count: int) -> str:
    """Bring day-of-week digits into the 0-6 range.

    Standard 5-part cron uses 0-6 and also accepts 7 for Sunday. Expressions
    with seconds and/or year count Sunday as 1 through Saturday as 7, so every
    digit is shifted down by one. The alternate dialect accepts both 0 and 7
    for Sunday whatever the part count.
    """
    def replace(match):
        token = match.group(1) or match.group(2)
        digits = re.sub(r"\D", "", token)
        day = int(digits)

        if day > 7:
            raise FieldError(CronField.DAY_OF_WEEK)

        if options.use_alternate_dow_dialect or part_count == 5:
            adjusted = "0" if day == 7 else digits
        else:
            adjusted = str(day - 1)

        return token.replace(digits, adjusted)

    return DOW_DIGIT_PATTERN.sub(replace, expression)


def _rewrite_step_start(expression: str, prefix: str) -> str:
    if expression.startswith(prefix):
        return "*/" + expression[len(prefix):]
    return expression


def _replace_names(expression: str, names, first_value: int, max_length: int) -> str:
    # Names are scanned in calendar order; stop once only a number is left
    for offset, name in enumerate(names):
        expression = re.sub(name, str(first_value + offset), expression, flags=re.IGNORECASE)
        if len(expression) <= max_length:
            break
    return expression


def _expand_hour(hour: str, minute: str, second: str) -> str:
    """Turn single hours into self-ranges (9 -> 9-9) when minutes or seconds repeat.

    This lets "*/5 9" read as "every 5 minutes, between 9:00 and 9:59".
    """
    if not (RANGE_TOKEN_PATTERN.search(minute) or RANGE_TOKEN_PATTERN.search(second)):
        return hour

    if SINGLE_NUMBER_PATTERN.match(hour):
        return f"{hour}-{hour}"

    if "," in hour and "/" not in hour:
        return ",".join(
            f"{item}-{item}" if SINGLE_NUMBER_PATTERN.match(item) else item
            for item in hour.split(",")
        )

    return hour


def _clean_up(field: CronField, expression: str) -> str:
    if expression == "*/1":
        return "*"

    steps = expression.split("/")
    if len(steps) > 1 and steps[0] == "":
        expression = "*/" + "/".join(steps[1:])

    if field in STEP_RANGE_FIELDS and "/" in expression and not STEP_BASE_PATTERN.search(expression):
        steps = expression.split("/")
        if len(steps) != 2 or not all(SINGLE_NUMBER_PATTERN.match(step) for step in steps):
            raise FieldError(field)

        start, frequency = steps
        expression = f"{int(start)}-{FIELD_GRAMMARS[field].maximum}/{int(frequency)}"

    return expression
