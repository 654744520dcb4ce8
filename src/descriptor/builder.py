"""Turn canonical cron fields into English prose."""

import re
import logging
from typing import Callable, Dict, NamedTuple

from models import CanonicalExpression, CronField, DescriptionScope, Options
from .exceptions import BUILD_ERROR_MESSAGE, CronExpressionError, FieldError
from .grammar import DAY_NAMES, MONTH_NAMES

logger = logging.getLogger(__name__)

SPECIAL_CHARACTERS_PATTERN = re.compile(r"[/\-,*]")
RANGES_OR_MULTIPLE_PATTERN = re.compile(r"[/\-,]")
ANY_OR_MULTIPLE_PATTERN = re.compile(r"[*,]")
LAST_DAY_OFFSET_PATTERN = re.compile(r"L-(\d{1,2})")
NEAREST_WEEKDAY_PATTERN = re.compile(r"(\d{1,2})W")
YEAR_VALUE_PATTERN = re.compile(r"\d{4}")
TRAILING_SEPARATORS_PATTERN = re.compile(r"[,\s]*$")

ORDINALS = {"1": "first", "2": "second", "3": "third", "4": "fourth", "5": "fifth"}

# Phrases dropped from non-verbose descriptions
VERBOSE_PHRASES = (", every minute", ", every hour", ", every day")


class FieldFormatter(NamedTuple):
    """How one field renders its values.

    ``single_item`` translates a value (hour -> clock time, 3 -> "Wednesday").
    ``interval`` renders the step of ``*/N``. ``between``, ``description`` and
    ``list_range`` return ``str.format`` templates: two placeholders for the
    range bounds, one for the value (or joined list).
    """
    all_description: str
    single_item: Callable[[str], str]
    interval: Callable[[str], str]
    between: Callable[[str], str]
    description: Callable[[str], str]
    list_range: Callable[[str], str]


def describe_segment(expression: str, formatter: FieldFormatter) -> str:
    """Describe one field with the shared wildcard/step/list/range algorithm."""
    if not expression:
        return ""

    if expression == "*":
        return formatter.all_description

    if not RANGES_OR_MULTIPLE_PATTERN.search(expression):
        return formatter.description(expression).format(formatter.single_item(expression))

    if "/" in expression:
        base, step = expression.split("/")[:2]
        description = formatter.interval(step)

        if "-" in base:
            between = describe_between(base, formatter.between, formatter.single_item)
            if not between.startswith(", "):
                description += ", "
            description += between
        elif not ANY_OR_MULTIPLE_PATTERN.search(expression):
            starting = formatter.description(base).format(formatter.single_item(base))
            description += ", starting " + starting.replace(", ", "")

        return description

    if "," in expression:
        segments = expression.split(",")
        content = ""
        for i, segment in enumerate(segments):
            if i > 0 and len(segments) > 2:
                content += ","
                if i < len(segments) - 1:
                    content += " "
            if i > 0 and i == len(segments) - 1:
                content += " and "

            if "-" in segment:
                content += describe_between(segment, formatter.list_range, formatter.single_item).replace(", ", "")
            else:
                content += formatter.single_item(segment)

        return formatter.description(expression).format(content)

    return describe_between(expression, formatter.between, formatter.single_item)


def describe_between(expression: str, between: Callable[[str], str], single_item: Callable[[str], str]) -> str:
    low, high = expression.split("-")[:2]
    # A range ending on an hour covers that whole hour
    high_description = single_item(high).replace(":00", ":59")
    return between(expression).format(single_item(low), high_description)


def transform_verbosity(description: str, verbose: bool) -> str:
    if verbose:
        return description

    for phrase in VERBOSE_PHRASES:
        description = description.replace(phrase, "")

    return TRAILING_SEPARATORS_PATTERN.sub("", description)


def capitalize(description: str) -> str:
    return description[:1].upper() + description[1:]


class DescriptionBuilder:
    """Builds descriptions for a validated expression.

    One builder serves any number of scopes for the same expression and
    options.
    """

    def __init__(self, expression: CanonicalExpression, options: Options):
        self.expression = expression
        self.options = options
        self.formatters: Dict[CronField, FieldFormatter] = {
            CronField.SECOND: FieldFormatter(
                "every second",
                lambda value: value,
                lambda step: f"every {step} seconds",
                lambda value: "seconds {} through {} past the minute",
                lambda value: "" if value == "0" else "at {} seconds past the minute",
                lambda value: ", {} through {}",
            ),
            CronField.MINUTE: FieldFormatter(
                "every minute",
                lambda value: value,
                lambda step: f"every {step} minutes",
                lambda value: "minutes {} through {} past the hour",
                self._minute_format,
                lambda value: ", {} through {}",
            ),
            CronField.HOUR: FieldFormatter(
                "every hour",
                lambda value: self.format_time(value, "0"),
                lambda step: f"every {step} hours",
                lambda value: "between {} and {}",
                self._hour_format,
                lambda value: "between {} and {}",
            ),
            CronField.DAY_OF_MONTH: FieldFormatter(
                ", every day",
                lambda value: value,
                lambda step: ", every day" if step == "1" else f", every {step} days",
                lambda value: ", between day {} and {} of the month",
                lambda value: ", on day {} of the month",
                lambda value: ", {} through {}",
            ),
            CronField.MONTH: FieldFormatter(
                "",
                lambda value: MONTH_NAMES[int(value) - 1],
                lambda step: f", every {step} months",
                lambda value: ", {} through {}",
                lambda value: ", only in {}",
                lambda value: ", {} through {}",
            ),
            CronField.DAY_OF_WEEK: FieldFormatter(
                ", every day",
                self._day_name,
                lambda step: f", every {step} days of the week",
                lambda value: ", {} through {}",
                self._day_of_week_format,
                lambda value: ", {} through {}",
            ),
            CronField.YEAR: FieldFormatter(
                "",
                lambda value: str(int(value)) if YEAR_VALUE_PATTERN.fullmatch(value) else value,
                lambda step: f", every {step} years",
                lambda value: ", {} through {}",
                lambda value: ", only in {}",
                lambda value: ", {} through {}",
            ),
        }

    def describe(self, scope: DescriptionScope = DescriptionScope.FULL) -> str:
        builders = {
            DescriptionScope.FULL: self.full_description,
            DescriptionScope.TIME_OF_DAY: self.time_of_day_description,
            DescriptionScope.SECONDS: self.seconds_description,
            DescriptionScope.MINUTES: self.minutes_description,
            DescriptionScope.HOURS: self.hours_description,
            DescriptionScope.DAY_OF_MONTH: self.day_of_month_description,
            DescriptionScope.MONTH: self.month_description,
            DescriptionScope.DAY_OF_WEEK: self.day_of_week_description,
            DescriptionScope.YEAR: self.year_description,
        }
        return capitalize(builders[scope]())

    def full_description(self) -> str:
        description = "".join((
            self.time_of_day_description(),
            self.day_of_month_description(),
            self.day_of_week_description(),
            self.month_description(),
            self.year_description(),
        ))
        return transform_verbosity(description, self.options.verbose)

    def time_of_day_description(self) -> str:
        second = self.expression.second
        minute = self.expression.minute
        hour = self.expression.hour

        if not any(SPECIAL_CHARACTERS_PATTERN.search(part) for part in (second, minute, hour)):
            # Specific time of day, e.g. "30 14"
            return "At " + self.format_time(hour, minute, second)

        if (not second and "-" in minute and "," not in minute
                and not SPECIAL_CHARACTERS_PATTERN.search(hour)):
            # Minute range within one hour, e.g. "0-10 11"
            low, high = minute.split("-")[:2]
            return "Every minute between {} and {}".format(
                self.format_time(hour, low), self.format_time(hour, high)
            )

        if (not second and "," in hour and "-" not in hour
                and not SPECIAL_CHARACTERS_PATTERN.search(minute)):
            # Several hours at one minute, e.g. "30 6,14,16"
            times = [self.format_time(item, minute) for item in hour.split(",")]
            return "At " + ", ".join(times[:-1]) + " and " + times[-1]

        description = self.seconds_description()
        minutes = self.minutes_description()
        if description and minutes:
            description += ", "
        description += minutes
        if description and hour:
            description += ", "
        description += self.hours_description()

        return description

    def seconds_description(self) -> str:
        return self._describe_field(CronField.SECOND)

    def minutes_description(self) -> str:
        return self._describe_field(CronField.MINUTE)

    def hours_description(self) -> str:
        return self._describe_field(CronField.HOUR)

    def day_of_month_description(self) -> str:
        expression = self.expression.day_of_month

        if expression == "L":
            return ", on the last day of the month"

        if expression in ("LW", "WL"):
            return ", on the last weekday of the month"

        match = NEAREST_WEEKDAY_PATTERN.fullmatch(expression)
        if match:
            day = int(match.group(1))
            if day == 1:
                return ", on the first weekday of the month"
            return f", on the weekday nearest day {day} of the month"

        match = LAST_DAY_OFFSET_PATTERN.fullmatch(expression)
        if match:
            return f", {match.group(1)} days before the last day of the month"

        return self._describe_field(CronField.DAY_OF_MONTH)

    def month_description(self) -> str:
        return self._describe_field(CronField.MONTH)

    def day_of_week_description(self) -> str:
        # Deferring to day of month avoids "on day 1 of the month, every day"
        if self.expression.day_of_week == "*":
            return ""
        return self._describe_field(CronField.DAY_OF_WEEK)

    def year_description(self) -> str:
        return self._describe_field(CronField.YEAR)

    def format_time(self, hour_expression: str, minute_expression: str, second_expression: str = "") -> str:
        """Format a clock time.

        24-hour times are zero padded ("09:05"); 12-hour times carry an
        AM/PM suffix ("9:05AM").

        Raises:
            FieldError: Tagged with the field whose value is not a number
        """
        hour = self._time_part(CronField.HOUR, hour_expression)
        minute = self._time_part(CronField.MINUTE, minute_expression)

        if self.options.use_24_hour_format:
            hour_text = f"{hour:02d}"
            period = ""
        else:
            period = "PM" if hour >= 12 else "AM"
            hour_text = str(hour % 12 or 12)

        time = f"{hour_text}:{minute:02d}"
        if second_expression:
            time += f":{self._time_part(CronField.SECOND, second_expression):02d}"

        return time + period

    @staticmethod
    def _time_part(field: CronField, value: str) -> int:
        try:
            return int(value)
        except ValueError as e:
            logger.debug(f"Could not read {field.label} value '{value}' as a time: {e}")
            raise FieldError(field, BUILD_ERROR_MESSAGE) from e

    def _describe_field(self, field: CronField) -> str:
        try:
            return describe_segment(self.expression[field], self.formatters[field])
        except CronExpressionError:
            raise
        except (ValueError, IndexError) as e:
            logger.debug(f"Could not describe {field.label} field '{self.expression[field]}': {e}")
            raise FieldError(field, BUILD_ERROR_MESSAGE) from e

    def _minute_format(self, value: str) -> str:
        if value == "0" and not self.expression.second:
            return ""
        return "at {} minutes past the hour"

    @staticmethod
    def _hour_format(value: str) -> str:
        # Lists starting with a range already read "between ..."
        if "-" in value.split(",")[0]:
            return "{}"
        return "at {}"

    @staticmethod
    def _day_name(value: str) -> str:
        # "5L" and "5#2" both name Friday
        day = value.replace("L", "").split("#")[0]
        return DAY_NAMES[int(day)]

    @staticmethod
    def _day_of_week_format(value: str) -> str:
        if "#" in value:
            occurrence = ORDINALS.get(value.partition("#")[2], "")
            return ", on the " + occurrence + " {} of the month"
        if "L" in value:
            return ", on the last {} of the month"
        return ", only on {}"
