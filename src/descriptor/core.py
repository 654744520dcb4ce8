"""Cron expression description entry points."""

import logging
from typing import Optional

from models import CanonicalExpression, DescriptionScope, Options
from .builder import DescriptionBuilder, capitalize
from .exceptions import CronExpressionError
from .normalizer import normalize_fields
from .tokenizer import shift_fields
from .validator import validate_fields

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = Options()


def parse(expression: str, options: Optional[Options] = None) -> CanonicalExpression:
    """Tokenize, normalize and validate a cron expression.

    Args:
        expression: Cron expression string (e.g., "0 */2 * * *")
        options: Parsing options (default options when omitted)

    Returns:
        The canonical 7-field expression

    Raises:
        CronExpressionError: If the expression is not valid
    """
    options = options or DEFAULT_OPTIONS
    fields, part_count = shift_fields(expression, options)
    fields = normalize_fields(fields, options, part_count)
    validate_fields(fields, part_count)
    return CanonicalExpression.from_fields(fields, part_count)


class CronDescriptor:
    """Describes one configured expression, caching its parsed form.

    The cache is dropped whenever the expression or the options change, so
    asking for several scopes only parses once. Instances are not meant to be
    shared between threads.
    """

    def __init__(self, expression: Optional[str] = None, options: Optional[Options] = None):
        self.expression = None
        self.options = options or DEFAULT_OPTIONS
        self._parsed: Optional[CanonicalExpression] = None

        if expression is not None:
            self.set_expression(expression, self.options)

    def set_expression(self, expression: str, options: Optional[Options] = None):
        """Set the expression to describe next; omitted options reset to the defaults."""
        if not expression:
            raise ValueError("The expression to be described cannot be None or empty")

        self.expression = expression
        self.options = options or DEFAULT_OPTIONS
        self._parsed = None

    def set_options(self, options: Options):
        if options is None:
            raise ValueError("Options cannot be None")

        self.options = options
        self._parsed = None

    def parse(self) -> CanonicalExpression:
        if not self.expression:
            raise ValueError("No expression has been set")

        if self._parsed is None:
            self._parsed = parse(self.expression, self.options)
        return self._parsed

    def describe(self, scope: DescriptionScope = DescriptionScope.FULL) -> str:
        """Describe the configured expression.

        Args:
            scope: Which part of the expression to describe

        Returns:
            The description, or the error message when the expression is
            invalid and ``throw_on_parse_error`` is off
        """
        if not self.expression:
            raise ValueError("No expression has been set")

        try:
            return DescriptionBuilder(self.parse(), self.options).describe(scope)
        except CronExpressionError as e:
            if self.options.throw_on_parse_error:
                raise
            logger.warning(f"Could not describe cron expression '{self.expression}' ({e.field.label}): {e}")
            return capitalize(e.message)


def describe(expression: str, options: Optional[Options] = None,
             scope: DescriptionScope = DescriptionScope.FULL) -> str:
    """Get a human-readable description of a cron expression."""
    return CronDescriptor(expression, options).describe(scope)


def get_description(expression: str) -> str:
    """Full description with default options."""
    return describe(expression)


def is_valid(expression: str, options: Optional[Options] = None) -> bool:
    """Validate a cron expression.

    Returns:
        True if valid, False otherwise
    """
    try:
        parse(expression, options)
        return True
    except CronExpressionError as e:
        logger.debug(f"Invalid cron expression '{expression}': {e}")
        return False
