"""Crontab entry and document parser.

A crontab document is a sequence of lines of three kinds:

    # comment                   discarded
    NAME=value                  EnvVariable("NAME", "value")
    <schedule> <command>        CommandEntry(schedule, "<command>")

Commands run to the end of the line and are kept verbatim: no quoting,
escaping or variable substitution is applied, and a ``#`` inside a command
is part of the command. Comments are only recognised on their own line.

Usage:
    >>> from cronparse.crontab import parse_crontab
    >>> tab = parse_crontab("MAILTO=ops\\n# nightly\\n@daily /usr/bin/backup\\n")
    >>> [type(entry).__name__ for entry in tab]
    ['EnvVariable', 'CommandEntry']
"""

from __future__ import annotations

import logging

from cronparse.errors import ParseError
from cronparse.scanner import Scanner, run
from cronparse.schedule import cron_schedule_loose
from cronparse.types import CommandEntry, Crontab, CrontabEntry, EnvVariable

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"
ASSIGNMENT = "="
LINE_END = "\n"


def _is_name_char(c: str) -> bool:
    return c != ASSIGNMENT and not c.isspace()


def _is_value_char(c: str) -> bool:
    return not c.isspace()


def _is_blank(c: str) -> bool:
    return c == " " or c == "\t"


def _is_line_end(c: str) -> bool:
    return c == LINE_END


def env_variable(scanner: Scanner) -> EnvVariable:
    """Consume ``NAME=value`` with optional spaces around ``=``."""
    name = scanner.take_while1(_is_name_char, "variable name")
    scanner.skip_space()
    scanner.char(ASSIGNMENT)
    scanner.skip_space()
    value = scanner.take_while1(_is_value_char, "variable value")
    scanner.skip_while(_is_blank)
    return EnvVariable(name, value)


def command_entry(scanner: Scanner) -> CommandEntry:
    """Consume a schedule, spaces or tabs, and the rest of the line."""
    schedule = cron_schedule_loose(scanner)
    scanner.take_while1(_is_blank, "blank")
    command = scanner.take_till(_is_line_end)
    return CommandEntry(schedule, command)


def crontab_entry(scanner: Scanner) -> CrontabEntry:
    scanner.skip_space()
    return scanner.choice(env_variable, command_entry)


def comment(scanner: Scanner) -> None:
    scanner.skip_space()
    scanner.char(COMMENT_MARKER)
    scanner.skip_while(lambda c: not _is_line_end(c))
    return None


def _comment_or_entry(scanner: Scanner) -> CrontabEntry | None:
    return scanner.choice(comment, crontab_entry)


def _whitespace(scanner: Scanner) -> str:
    return scanner.satisfy(str.isspace, "whitespace")


def crontab(scanner: Scanner) -> Crontab:
    """Consume a crontab document."""
    elements = scanner.sep_by(_comment_or_entry, _whitespace)
    scanner.skip_space()
    return Crontab(tuple(e for e in elements if e is not None))


def _entry_line(scanner: Scanner) -> CrontabEntry:
    entry = crontab_entry(scanner)
    scanner.skip_space()
    return entry


# =============================================================================
# Public API
# =============================================================================


def parse_crontab_entry(line_text: str) -> CrontabEntry:
    """Parse one crontab line.

    Args:
        line_text: An assignment (``FOO=bar``) or a scheduled command
            (``*/5 * * * * /usr/bin/poll``). Surrounding whitespace is
            ignored.

    Returns:
        EnvVariable or CommandEntry.

    Raises:
        ParseError: If the line is neither form, or holds more than one line.
    """
    try:
        entry, _ = run(_entry_line, line_text)
    except ParseError as e:
        logger.debug("Rejected crontab entry %r: %s", line_text, e)
        raise
    return entry


def parse_crontab(document_text: str) -> Crontab:
    """Parse a whole crontab document.

    Args:
        document_text: Contents of a crontab file.

    Returns:
        Crontab holding assignments and commands in document order.

    Raises:
        ParseError: If some line is not a comment, assignment or command.
    """
    try:
        tab, _ = run(crontab, document_text)
    except ParseError as e:
        logger.debug("Rejected crontab document: %s", e)
        raise
    logger.debug("Parsed crontab with %d entries", len(tab))
    return tab
