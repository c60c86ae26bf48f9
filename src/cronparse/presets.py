"""Predefined shorthand schedules.

Each shorthand literal accepted by the schedule parser maps to one of the
constants below, which are the same values the classic five-column form
produces.

Usage:
    >>> from cronparse.presets import DAILY, get_preset
    >>> str(DAILY)
    '0 0 * * *'
    >>> get_preset("@hourly") == get_preset("hourly")
    True
"""

from __future__ import annotations

from cronparse.types import CronSchedule, SpecificField, Star


# =============================================================================
# Standard Intervals
# =============================================================================

# January 1st at midnight
YEARLY = CronSchedule.from_fields(
    SpecificField(0), SpecificField(0), SpecificField(1), SpecificField(1), Star()
)

# First day of every month at midnight
MONTHLY = CronSchedule.from_fields(
    SpecificField(0), SpecificField(0), SpecificField(1), Star(), Star()
)

# Every Sunday at midnight
WEEKLY = CronSchedule.from_fields(
    SpecificField(0), SpecificField(0), Star(), Star(), SpecificField(0)
)

# Every day at midnight
DAILY = CronSchedule.from_fields(
    SpecificField(0), SpecificField(0), Star(), Star(), Star()
)

# Every hour at minute 0
HOURLY = CronSchedule.from_fields(
    SpecificField(0), Star(), Star(), Star(), Star()
)


# =============================================================================
# Lookup
# =============================================================================

# Tried in this order by the schedule parser.
SHORTHANDS: dict[str, CronSchedule] = {
    "@yearly": YEARLY,
    "@monthly": MONTHLY,
    "@weekly": WEEKLY,
    "@daily": DAILY,
    "@hourly": HOURLY,
}

PRESETS: dict[str, CronSchedule] = {
    literal[1:]: schedule for literal, schedule in SHORTHANDS.items()
}


def get_preset(name: str) -> CronSchedule | None:
    """Get a preset schedule by name.

    Args:
        name: Preset name, with or without the leading ``@``
            (case-insensitive).

    Returns:
        CronSchedule or None if not found.
    """
    return PRESETS.get(name.lower().removeprefix("@"))


def list_presets() -> list[str]:
    """List all available preset names."""
    return list(PRESETS.keys())
