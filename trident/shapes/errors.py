"""Parse error types."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Kinds of failure the mesh grammar can report."""
    INVALID_NUMBER = "invalid number"
    INVALID_HEX = "invalid hex byte"
    EXPECTED_COMMA = "expected comma"
    INCOMPLETE_SHAPE = "incomplete shape"
    MISSING_COLOR = "missing color"
    TRAILING_INPUT = "trailing input"


class ParseError(ValueError):
    """
    Raised when mesh text does not match the grammar.

    Carries the error kind, the offset into the source text and the
    unparsed remainder so callers can render a useful message.
    """

    EXCERPT_LENGTH = 24

    def __init__(self, kind: ErrorKind, text: str, position: int, detail: Optional[str] = None):
        self.kind = kind
        self.position = position
        self.remainder = text[position:]
        self.line = text.count("\n", 0, position) + 1
        self.column = position - (text.rfind("\n", 0, position) + 1) + 1
        self.detail = detail
        super().__init__(self._format())

    def _format(self) -> str:
        line_end = self.remainder.find("\n")
        excerpt = self.remainder if line_end < 0 else self.remainder[:line_end].rstrip("\r")
        if len(excerpt) > self.EXCERPT_LENGTH:
            excerpt = excerpt[:self.EXCERPT_LENGTH] + "..."

        message = f"line {self.line}, column {self.column}: {self.kind.value}"
        if self.detail:
            message += f" ({self.detail})"
        if excerpt:
            message += f" at {excerpt!r}"
        elif self.remainder:
            message += " at end of line"
        else:
            message += " at end of input"
        return message
