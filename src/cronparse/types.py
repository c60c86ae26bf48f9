"""Value types produced by the cron and crontab parsers.

Every type is an immutable, hashable dataclass. ``str()`` renders a value
back into cron syntax. Re-parsing the rendering of a parsed value yields an
equal value.

Cron fields:
    Star            *
    SpecificField   5
    RangeField      1-5
    StepField       */15, 1-30/5, 3/4
    ListField       1,2,10-12
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union


# =============================================================================
# Cron Fields
# =============================================================================


@dataclass(frozen=True)
class Star:
    """Wildcard matching every value of a column."""

    def __str__(self) -> str:
        return "*"


@dataclass(frozen=True)
class SpecificField:
    """A single integer value."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class RangeField:
    """Inclusive range of values. ``start`` never exceeds ``end``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(
                f"start of range must be less than or equal to end: "
                f"{self.start}-{self.end}"
            )

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class StepField:
    """Every ``step``-th value of ``base``.

    ``base`` is a Star, RangeField, SpecificField, or a ListField made only
    of Stars and RangeFields.
    """

    base: CronField
    step: int

    def __post_init__(self) -> None:
        if self.step <= 0:
            raise ValueError(f"Step must be positive: {self.step}")
        if isinstance(self.base, StepField):
            raise ValueError("Steps cannot be applied to another step")
        if isinstance(self.base, ListField) and not all(
            isinstance(item, (Star, RangeField)) for item in self.base.items
        ):
            raise ValueError("Stepped lists may only contain wildcards and ranges")

    def __str__(self) -> str:
        return f"{self.base}/{self.step}"


@dataclass(frozen=True)
class ListField:
    """Comma separated alternatives. Lists never contain other lists."""

    items: tuple[CronField, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        if any(isinstance(item, ListField) for item in self.items):
            raise ValueError("Lists cannot be nested")

    def __str__(self) -> str:
        return ",".join(str(item) for item in self.items)


CronField = Union[Star, SpecificField, RangeField, StepField, ListField]


# =============================================================================
# Column Specs
# =============================================================================


@dataclass(frozen=True)
class _ColumnSpec:
    field: CronField

    def __str__(self) -> str:
        return str(self.field)


@dataclass(frozen=True)
class MinuteSpec(_ColumnSpec):
    """Minute column."""


@dataclass(frozen=True)
class HourSpec(_ColumnSpec):
    """Hour column."""


@dataclass(frozen=True)
class DayOfMonthSpec(_ColumnSpec):
    """Day of month column."""


@dataclass(frozen=True)
class MonthSpec(_ColumnSpec):
    """Month column."""


@dataclass(frozen=True)
class DayOfWeekSpec(_ColumnSpec):
    """Day of week column."""


# =============================================================================
# Schedule
# =============================================================================


@dataclass(frozen=True)
class CronSchedule:
    """A five-column cron schedule.

    Attributes:
        minute: Minute column.
        hour: Hour column.
        day_of_month: Day of month column.
        month: Month column.
        day_of_week: Day of week column.
    """

    minute: MinuteSpec
    hour: HourSpec
    day_of_month: DayOfMonthSpec
    month: MonthSpec
    day_of_week: DayOfWeekSpec

    @classmethod
    def from_fields(
        cls,
        minute: CronField,
        hour: CronField,
        day_of_month: CronField,
        month: CronField,
        day_of_week: CronField,
    ) -> "CronSchedule":
        """Build a schedule from bare fields in column order."""
        return cls(
            MinuteSpec(minute),
            HourSpec(hour),
            DayOfMonthSpec(day_of_month),
            MonthSpec(month),
            DayOfWeekSpec(day_of_week),
        )

    @property
    def fields(self) -> tuple[CronField, ...]:
        """Bare fields in column order."""
        return (
            self.minute.field,
            self.hour.field,
            self.day_of_month.field,
            self.month.field,
            self.day_of_week.field,
        )

    def __str__(self) -> str:
        return " ".join(str(f) for f in self.fields)


# =============================================================================
# Crontab
# =============================================================================


@dataclass(frozen=True)
class EnvVariable:
    """Environment variable assignment (``NAME=value``)."""

    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


@dataclass(frozen=True)
class CommandEntry:
    """Scheduled command. ``command`` is kept verbatim."""

    schedule: CronSchedule
    command: str

    def __str__(self) -> str:
        return f"{self.schedule} {self.command}"


CrontabEntry = Union[EnvVariable, CommandEntry]


@dataclass(frozen=True)
class Crontab:
    """Entries of a crontab document in document order.

    Comments and blank lines are not retained.
    """

    entries: tuple[CrontabEntry, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))

    @property
    def commands(self) -> tuple[CommandEntry, ...]:
        return tuple(e for e in self.entries if isinstance(e, CommandEntry))

    @property
    def variables(self) -> tuple[EnvVariable, ...]:
        return tuple(e for e in self.entries if isinstance(e, EnvVariable))

    def __iter__(self) -> Iterator[CrontabEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return "".join(f"{entry}\n" for entry in self.entries)
