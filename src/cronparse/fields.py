"""Grammar for a single cron field.

Syntax Reference:
    Form            Example     Result
    ──────────────────────────────────────────────────────────
    Wildcard        *           Star()
    Value           5           SpecificField(5)
    Range           1-5         RangeField(1, 5)
    Step            */15        StepField(Star(), 15)
    List            1,2,10-12   ListField((SpecificField(1), ...))

Alternatives share prefixes (``1``, ``1-5`` and ``1-5/2`` all start the same
way), so they are tried in a fixed order and the first match wins:
stepped, range, list, wildcard, value. Steps come first so that a shorter
alternative cannot match and leave ``/n`` behind as trailing input.

Usage:
    >>> from cronparse.fields import parse_field
    >>> parse_field("*/2")
    StepField(base=Star(), step=2)
    >>> parse_field("5")
    SpecificField(value=5)
"""

from __future__ import annotations

from cronparse.scanner import Scanner, run
from cronparse.types import (
    CronField,
    ListField,
    RangeField,
    SpecificField,
    Star,
    StepField,
)

WILDCARD = "*"
RANGE_SEPARATOR = "-"
LIST_SEPARATOR = ","
STEP_SEPARATOR = "/"


def cron_field(scanner: Scanner) -> CronField:
    """Consume one cron field."""
    return scanner.choice(stepped, range_field, list_field, star, specific)


def star(scanner: Scanner) -> Star:
    scanner.char(WILDCARD)
    return Star()


def specific(scanner: Scanner) -> SpecificField:
    return SpecificField(scanner.decimal())


def range_field(scanner: Scanner) -> RangeField:
    """Consume ``start-end``, rejecting ranges where start exceeds end."""
    start = scanner.decimal()
    scanner.char(RANGE_SEPARATOR)
    end = scanner.decimal()
    if start > end:
        scanner.fail(
            "range with start <= end",
            "start of range must be less than or equal to end",
        )
    return RangeField(start, end)


def list_field(scanner: Scanner) -> CronField:
    """Consume a comma separated list, collapsing a single item to itself."""
    return _collapse(scanner.sep_by1(_listable, LIST_SEPARATOR))


def stepped(scanner: Scanner) -> StepField:
    """Consume ``base/step``."""
    base = scanner.choice(star, range_field, _step_list, specific)
    scanner.char(STEP_SEPARATOR)
    step = scanner.decimal()
    if step == 0:
        scanner.fail("positive step", "step must be positive")
    return StepField(base, step)


# Lists must not include themselves or cron_field would recurse forever.
def _listable(scanner: Scanner) -> CronField:
    return scanner.choice(star, range_field, stepped, specific)


def _step_list(scanner: Scanner) -> CronField:
    return _collapse(scanner.sep_by1(_step_listable, LIST_SEPARATOR))


def _step_listable(scanner: Scanner) -> CronField:
    return scanner.choice(star, range_field)


def _collapse(items: list[CronField]) -> CronField:
    if len(items) == 1:
        return items[0]
    return ListField(tuple(items))


def parse_field(text: str) -> CronField:
    """Parse text holding exactly one cron field.

    Args:
        text: Field text such as ``"*/15"`` or ``"1,2,10-12"``.

    Returns:
        The parsed field.

    Raises:
        ParseError: If the text is not a single valid field.
    """
    field, _ = run(cron_field, text)
    return field
