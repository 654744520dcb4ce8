"""Description options and scopes."""

from enum import Enum
from pydantic import BaseModel


class DescriptionScope(str, Enum):
    FULL = "full"
    TIME_OF_DAY = "time_of_day"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAY_OF_MONTH = "day_of_month"
    MONTH = "month"
    DAY_OF_WEEK = "day_of_week"
    YEAR = "year"


class Options(BaseModel):
    # Raise on invalid expressions instead of returning the error text
    throw_on_parse_error: bool = True
    # Keep redundant "every minute/hour/day" phrases
    verbose: bool = False
    use_24_hour_format: bool = True
    # 0 and 7 both mean Sunday whatever the field count
    use_alternate_dow_dialect: bool = False

    class Config:
        frozen = True
