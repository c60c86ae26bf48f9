"""Five-column cron schedule parser.

A schedule is either one of the shorthand literals (``@yearly``,
``@monthly``, ``@weekly``, ``@daily``, ``@hourly``) or five cron fields in
the order minute, hour, day of month, month, day of week, separated by
exactly one space each.

Two entry points are provided:

- :func:`parse_schedule_strict` rejects any input left after the schedule.
  Use it to validate a standalone schedule string.
- :func:`parse_schedule_lenient` returns the unconsumed remainder instead,
  for schedules embedded in a longer line.

Usage:
    >>> from cronparse.schedule import parse_schedule_strict
    >>> schedule = parse_schedule_strict("*/2 * 3 * 4,5,6")
    >>> schedule.minute
    MinuteSpec(field=StepField(base=Star(), step=2))
"""

from __future__ import annotations

import logging

from cronparse.errors import ParseError
from cronparse.fields import cron_field
from cronparse.presets import SHORTHANDS
from cronparse.scanner import Rule, Scanner, run
from cronparse.types import (
    CronSchedule,
    DayOfMonthSpec,
    DayOfWeekSpec,
    HourSpec,
    MinuteSpec,
    MonthSpec,
)

logger = logging.getLogger(__name__)

COLUMN_SEPARATOR = " "


def _shorthand(literal: str, schedule: CronSchedule) -> Rule[CronSchedule]:
    def rule(scanner: Scanner) -> CronSchedule:
        scanner.string(literal)
        return schedule

    return rule


_SHORTHAND_RULES = tuple(
    _shorthand(literal, schedule) for literal, schedule in SHORTHANDS.items()
)


def classic(scanner: Scanner) -> CronSchedule:
    """Consume five space separated fields."""
    minute = MinuteSpec(cron_field(scanner))
    scanner.char(COLUMN_SEPARATOR)
    hour = HourSpec(cron_field(scanner))
    scanner.char(COLUMN_SEPARATOR)
    day_of_month = DayOfMonthSpec(cron_field(scanner))
    scanner.char(COLUMN_SEPARATOR)
    month = MonthSpec(cron_field(scanner))
    scanner.char(COLUMN_SEPARATOR)
    day_of_week = DayOfWeekSpec(cron_field(scanner))
    return CronSchedule(minute, hour, day_of_month, month, day_of_week)


def cron_schedule_loose(scanner: Scanner) -> CronSchedule:
    """Consume a schedule, leaving any trailing input untouched."""
    return scanner.choice(*_SHORTHAND_RULES, classic)


def cron_schedule(scanner: Scanner) -> CronSchedule:
    """Consume a schedule that must end the input."""
    schedule = cron_schedule_loose(scanner)
    scanner.end_of_input()
    return schedule


# =============================================================================
# Public API
# =============================================================================


def parse_schedule_strict(text: str) -> CronSchedule:
    """Parse text holding exactly one schedule.

    Args:
        text: Schedule such as ``"0 9 * * 1-5"`` or ``"@daily"``.

    Returns:
        Parsed CronSchedule.

    Raises:
        ParseError: If the text is not a schedule or has extraneous input.
    """
    try:
        schedule, _ = run(cron_schedule, text)
    except ParseError as e:
        logger.debug("Rejected cron schedule %r: %s", text, e)
        raise
    return schedule


def parse_schedule_lenient(text: str) -> tuple[CronSchedule, str]:
    """Parse a schedule at the start of ``text``.

    Returns:
        The schedule and the text that follows it.

    Raises:
        ParseError: If the text does not start with a schedule.
    """
    try:
        return run(cron_schedule_loose, text, complete=False)
    except ParseError as e:
        logger.debug("Rejected cron schedule prefix %r: %s", text, e)
        raise


def validate_schedule(text: str) -> list[str]:
    """Validate a schedule string.

    Returns:
        List of validation errors (empty if valid).
    """
    errors = []

    try:
        parse_schedule_strict(text)
    except ParseError as e:
        errors.append(str(e))

    return errors


def is_valid_schedule(text: str) -> bool:
    """Check if a schedule string is valid."""
    try:
        parse_schedule_strict(text)
        return True
    except ParseError:
        return False
