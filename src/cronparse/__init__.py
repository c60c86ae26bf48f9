"""cronparse - typed parser for cron schedules and crontab files.

This package turns cron schedule strings and crontab documents into
immutable, typed values for schedule-matching or job-running code to
consume. It only parses: matching timestamps, computing next runs and
executing commands are left to the caller.

Features:
    - Standard 5-field cron (minute, hour, day, month, weekday)
    - Wildcards, values, ranges, steps and lists (*, 5, 1-5, */15, 1,2,3)
    - Shorthand schedules (@yearly, @monthly, @weekly, @daily, @hourly)
    - Strict and lenient schedule parsing
    - Crontab documents with comments and environment variables
    - Error positions and expected alternatives on failure

Syntax Reference:
    Field         Special Characters
    ───────────────────────────────────
    Minute        * / , -
    Hour          * / , -
    Day of Month  * / , -
    Month         * / , -
    Day of Week   * / , -

Usage:
    >>> from cronparse import parse_schedule_strict, parse_crontab
    >>>
    >>> schedule = parse_schedule_strict("*/2 * 3 * 4,5,6")
    >>> str(schedule)
    '*/2 * 3 * 4,5,6'
    >>>
    >>> tab = parse_crontab("# comment\\n0 0 * * * /bin/true\\n")
    >>> len(tab)
    1
"""

from cronparse.errors import ParseError
from cronparse.types import (
    # Fields
    CronField,
    Star,
    SpecificField,
    RangeField,
    StepField,
    ListField,
    # Columns
    MinuteSpec,
    HourSpec,
    DayOfMonthSpec,
    MonthSpec,
    DayOfWeekSpec,
    # Schedule
    CronSchedule,
    # Crontab
    CrontabEntry,
    EnvVariable,
    CommandEntry,
    Crontab,
)
from cronparse.fields import parse_field
from cronparse.schedule import (
    parse_schedule_strict,
    parse_schedule_lenient,
    validate_schedule,
    is_valid_schedule,
)
from cronparse.crontab import (
    parse_crontab_entry,
    parse_crontab,
)
from cronparse.presets import (
    YEARLY,
    MONTHLY,
    WEEKLY,
    DAILY,
    HOURLY,
    get_preset,
    list_presets,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ParseError",
    # Fields
    "CronField",
    "Star",
    "SpecificField",
    "RangeField",
    "StepField",
    "ListField",
    # Columns
    "MinuteSpec",
    "HourSpec",
    "DayOfMonthSpec",
    "MonthSpec",
    "DayOfWeekSpec",
    # Schedule
    "CronSchedule",
    # Crontab
    "CrontabEntry",
    "EnvVariable",
    "CommandEntry",
    "Crontab",
    # Parsing
    "parse_field",
    "parse_schedule_strict",
    "parse_schedule_lenient",
    "parse_crontab_entry",
    "parse_crontab",
    # Validation
    "validate_schedule",
    "is_valid_schedule",
    # Presets
    "YEARLY",
    "MONTHLY",
    "WEEKLY",
    "DAILY",
    "HOURLY",
    "get_preset",
    "list_presets",
]
