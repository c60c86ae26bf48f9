"""Exceptions raised by cronparse."""

from __future__ import annotations

from typing import Iterable


class ParseError(ValueError):
    """Raised when cron or crontab text does not match the grammar.

    Attributes:
        expression: The full input text that was being parsed.
        position: Offset of the furthest point the parser reached before
            failing, or -1 when unknown.
        expected: Labels of the alternatives attempted at ``position``.
    """

    def __init__(
        self,
        message: str,
        expression: str = "",
        position: int = -1,
        expected: Iterable[str] = (),
    ) -> None:
        self.expression = expression
        self.position = position
        self.expected = tuple(expected)
        super().__init__(message)
