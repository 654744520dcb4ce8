"""Per-field grammars for canonical cron fields."""

import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from models import CronField

MIN_YEAR = 1970
MAX_YEAR = 2099

DAY_ABBREVIATIONS = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")
DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

MONTH_ABBREVIATIONS = ("JAN", "FEB", "MAR", "APR", "MAY", "JUN",
                       "JUL", "AUG", "SEP", "OCT", "NOV", "DEC")
MONTH_NAMES = ("January", "February", "March", "April", "May", "June",
               "July", "August", "September", "October", "November", "December")

@dataclass(frozen=True)
class FieldGrammar:
    """Allowed shapes for one canonical field.

    A field is one of: ``*``, a value, ``*/step``, ``value/step``,
    ``low-high``, ``low-high/step``, a comma list of values and ranges, or
    one of the field's extra notations (``L``, ``15W``, ``5#2``...).

    ``range_step_maximum`` bounds steps that follow a range; it defaults to
    ``step_maximum``.
    """
    minimum: int
    maximum: int
    step_maximum: int
    value_pattern: re.Pattern = re.compile(r"[0-9]{1,2}")
    step_pattern: re.Pattern = re.compile(r"[0-9]{1,2}")
    notations: Tuple[re.Pattern, ...] = ()
    step_minimum: int = 0
    range_step_maximum: Optional[int] = None

    def matches(self, expression: str, check_bounds: bool = True) -> bool:
        if expression == "*":
            return True

        if any(notation.fullmatch(expression) for notation in self.notations):
            return True

        if "/" in expression:
            base, _, step = expression.partition("/")
            if self.is_range(base, check_bounds):
                return self.is_step(step, check_bounds, self.range_step_maximum)
            if base == "*" or self.is_value(base, check_bounds):
                return self.is_step(step, check_bounds)
            return False

        if "," in expression:
            return all(
                self.is_value(item, check_bounds) or self.is_range(item, check_bounds)
                for item in expression.split(",")
            )

        return self.is_value(expression, check_bounds) or self.is_range(expression, check_bounds)

    def is_value(self, token: str, check_bounds: bool = True) -> bool:
        if not self.value_pattern.fullmatch(token):
            return False
        return not check_bounds or self.minimum <= int(token) <= self.maximum

    def is_range(self, token: str, check_bounds: bool = True) -> bool:
        low, separator, high = token.partition("-")
        return bool(separator) and self.is_value(low, check_bounds) and self.is_value(high, check_bounds)

    def is_step(self, token: str, check_bounds: bool = True, maximum: Optional[int] = None) -> bool:
        if not self.step_pattern.fullmatch(token):
            return False
        if maximum is None:
            maximum = self.step_maximum
        return not check_bounds or self.step_minimum <= int(token) <= maximum


FIELD_GRAMMARS: Dict[CronField, FieldGrammar] = {
    CronField.SECOND: FieldGrammar(0, 59, 59),
    CronField.MINUTE: FieldGrammar(0, 59, 59),
    CronField.HOUR: FieldGrammar(0, 23, 23),
    CronField.DAY_OF_MONTH: FieldGrammar(
        1, 31, 31,
        notations=(
            re.compile(r"L"),
            re.compile(r"LW|WL"),
            re.compile(r"L-(?:[1-9]|[12][0-9]|30)"),
            re.compile(r"(?:[1-9]|[12][0-9]|3[01])W"),
        ),
    ),
    CronField.MONTH: FieldGrammar(1, 12, 12),
    # Steps of 7 only after a range, e.g. "1-5/7"
    CronField.DAY_OF_WEEK: FieldGrammar(
        0, 6, 6,
        value_pattern=re.compile(r"[0-9]"),
        notations=(
            re.compile(r"[0-6]L"),
            re.compile(r"[0-6]#[1-5]"),
        ),
        range_step_maximum=7,
    ),
    CronField.YEAR: FieldGrammar(
        MIN_YEAR, MAX_YEAR, MAX_YEAR - MIN_YEAR,
        value_pattern=re.compile(r"[0-9]{4}"),
        step_pattern=re.compile(r"[0-9]{1,3}"),
    ),
}
