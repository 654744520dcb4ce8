"""Split raw cron expressions and map tokens onto the 7 canonical slots."""

import re
import logging
from typing import List, Tuple

from models import Options, POSITIONAL_FIELDS
from .exceptions import WholeExpressionError

logger = logging.getLogger(__name__)

# Last token of a 6-part expression that looks like a year (e.g. "2020", "2020-2025")
YEAR_TOKEN_PATTERN = re.compile(r".*\d{4}$")

MIN_PARTS = 5
MAX_PARTS = len(POSITIONAL_FIELDS)


def tokenize(expression: str) -> List[str]:
    """Split an expression on whitespace, dropping empty tokens."""
    return [token for token in expression.split() if token]


def shift_fields(expression: str, options: Options) -> Tuple[List[str], int]:
    """Map the expression's tokens onto the seconds..year slots.

    Args:
        expression: Raw cron expression
        options: Parsing options

    Returns:
        The 7 slots (unused slots are empty strings) and the number of parts
        detected in the expression.
    """
    tokens = tokenize(expression)
    part_count = len(tokens)
    fields = [""] * MAX_PARTS

    if part_count < MIN_PARTS:
        raise WholeExpressionError(
            f'The cron expression "{expression}" only has [{part_count}] parts. '
            f"At least {MIN_PARTS} parts are required."
        )

    if part_count == 5:
        # Minute..day of week
        fields[1:6] = tokens
    elif part_count == 6:
        # Either seconds-first or year-last; a trailing year or a "?" in the
        # day-of-month/day-of-week position of a minute-first layout means year-last
        has_year = (
            YEAR_TOKEN_PATTERN.match(tokens[5]) is not None
            or tokens[2] == "?"
            or tokens[4] == "?"
        )
        if has_year:
            fields[1:7] = tokens
        else:
            fields[0:6] = tokens
    elif part_count == 7:
        fields[:] = tokens
    else:
        if options.throw_on_parse_error:
            raise WholeExpressionError(
                f'The cron expression "{expression}" has too many parts [{part_count}]. '
                f"Expressions must not have more than {MAX_PARTS} parts."
            )
        logger.warning(
            f"Cron expression '{expression}' has {part_count} parts, "
            f"ignoring everything after part {MAX_PARTS}"
        )
        fields[:] = tokens[:MAX_PARTS]
        part_count = MAX_PARTS

    logger.debug(f"Shifted '{expression}' into {fields} ({part_count} parts)")
    return fields, part_count
