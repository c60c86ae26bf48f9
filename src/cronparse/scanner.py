"""Backtracking scanner used by the cron grammar rules.

A grammar rule is any callable taking a :class:`Scanner` and returning the
value it recognised. Rules signal a mismatch by raising :class:`NoMatch`;
:meth:`Scanner.choice` rewinds the cursor before trying the next
alternative, so a failed branch never leaves partial state behind.

Design Principles:
    1. One scanner per top-level parse: no state is shared between calls
    2. Ordered choice: the first alternative that succeeds wins
    3. Furthest failure wins: errors point at the deepest position reached
"""

from __future__ import annotations

from typing import Callable, NoReturn, TypeVar, Union

from cronparse.errors import ParseError

T = TypeVar("T")

Rule = Callable[["Scanner"], T]


class NoMatch(Exception):
    """Raised inside the grammar when a rule does not match.

    Never escapes the package: public entry points turn it into
    :class:`~cronparse.errors.ParseError`.
    """

    def __init__(self, position: int, expected: str) -> None:
        self.position = position
        self.expected = expected
        super().__init__(f"expected {expected} at position {position}")


class Scanner:
    """Cursor over an immutable input string."""

    __slots__ = ("_text", "_pos", "_furthest", "_expected", "_reason")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._furthest = -1
        self._expected: list[str] = []
        self._reason = ""

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> str:
        """Input that has not been consumed yet."""
        return self._text[self._pos:]

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def peek(self) -> str:
        """Return the next character, or an empty string at end of input."""
        return self._text[self._pos:self._pos + 1]

    # -------------------------------------------------------------------------
    # Failure bookkeeping
    # -------------------------------------------------------------------------

    def fail(self, expected: str, reason: str = "") -> NoReturn:
        """Abort the current rule at the current position.

        Args:
            expected: Label describing what would have matched here.
            reason: Optional explanation, used for semantic checks such as
                inverted ranges.

        Raises:
            NoMatch: Always.
        """
        position = self._pos
        if position > self._furthest:
            self._furthest = position
            self._expected = [expected]
            self._reason = reason
        elif position == self._furthest:
            if expected not in self._expected:
                self._expected.append(expected)
            if reason and not self._reason:
                self._reason = reason
        raise NoMatch(position, expected)

    def error(self) -> ParseError:
        """Build a ParseError describing the furthest failure seen."""
        position = max(self._furthest, 0)
        expected = tuple(self._expected) or ("valid input",)
        message = f"expected {' or '.join(expected)} at position {position}"
        if self._reason:
            message = f"{message}: {self._reason}"
        return ParseError(message, self._text, position, expected)

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

    def char(self, expected: str) -> str:
        """Consume exactly the character ``expected``."""
        if self.peek() != expected:
            self.fail(repr(expected))
        self._pos += 1
        return expected

    def string(self, expected: str) -> str:
        """Consume exactly the literal ``expected``."""
        if not self._text.startswith(expected, self._pos):
            self.fail(repr(expected))
        self._pos += len(expected)
        return expected

    def satisfy(self, predicate: Callable[[str], bool], label: str) -> str:
        """Consume one character accepted by ``predicate``."""
        c = self.peek()
        if not c or not predicate(c):
            self.fail(label)
        self._pos += 1
        return c

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume the longest run of characters accepted by ``predicate``."""
        start = self._pos
        end = len(self._text)
        while self._pos < end and predicate(self._text[self._pos]):
            self._pos += 1
        return self._text[start:self._pos]

    def take_while1(self, predicate: Callable[[str], bool], label: str) -> str:
        """Like :meth:`take_while`, but at least one character must match."""
        taken = self.take_while(predicate)
        if not taken:
            self.fail(label)
        return taken

    def take_till(self, predicate: Callable[[str], bool]) -> str:
        """Consume characters up to (not including) one matching ``predicate``."""
        return self.take_while(lambda c: not predicate(c))

    def skip_while(self, predicate: Callable[[str], bool]) -> None:
        self.take_while(predicate)

    def skip_space(self) -> None:
        """Skip any whitespace, newlines included."""
        self.take_while(str.isspace)

    def decimal(self) -> int:
        """Consume an unsigned run of ASCII digits."""
        start = self._pos
        digits = self.take_while1(_is_digit, "digit")
        try:
            return int(digits)
        except ValueError:
            self._pos = start
            self.fail("integer", "integer literal too long")

    def end_of_input(self) -> None:
        if not self.at_end():
            self.fail("end of input")

    # -------------------------------------------------------------------------
    # Combinators
    # -------------------------------------------------------------------------

    def choice(self, *alternatives: Rule[T]) -> T:
        """Return the result of the first alternative that matches.

        The cursor is rewound before every alternative. Once an alternative
        succeeds the choice is committed: later failures of the caller do not
        retry the remaining alternatives.
        """
        start = self._pos
        for alternative in alternatives:
            try:
                return alternative(self)
            except NoMatch:
                self._pos = start
        raise NoMatch(start, "one of the alternatives")

    def sep_by1(self, item: Rule[T], separator: Union[str, Rule[object]]) -> list[T]:
        """Parse one or more ``item`` separated by ``separator``.

        A separator that is not followed by an item is left unconsumed.
        """
        items = [item(self)]
        while True:
            mark = self._pos
            try:
                if isinstance(separator, str):
                    self.string(separator)
                else:
                    separator(self)
                items.append(item(self))
            except NoMatch:
                self._pos = mark
                return items

    def sep_by(self, item: Rule[T], separator: Union[str, Rule[object]]) -> list[T]:
        """Parse zero or more ``item`` separated by ``separator``."""
        start = self._pos
        try:
            return self.sep_by1(item, separator)
        except NoMatch:
            self._pos = start
            return []


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def run(rule: Rule[T], text: str, *, complete: bool = True) -> tuple[T, str]:
    """Apply ``rule`` to ``text``.

    Args:
        rule: Grammar rule to apply from the start of ``text``.
        text: Input text.
        complete: Require the rule to consume the whole input.

    Returns:
        The rule's value and the unconsumed remainder of ``text``.

    Raises:
        ParseError: If the rule does not match.
    """
    scanner = Scanner(text)
    try:
        value = rule(scanner)
        if complete:
            scanner.end_of_input()
    except NoMatch:
        raise scanner.error() from None
    return value, scanner.remaining
