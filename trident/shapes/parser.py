"""
Mesh text parsing.

Grammar:

    Mesh    ::= Line*
    Line    ::= WS* ( '#' Comment | Shape WS* ('#' Comment)? LineEnd | LineEnd )
    Shape   ::= (WS* Point WS* ';'){3,} WS* '.' WS* Color
    Point   ::= Float WS* ',' WS* Float
    Color   ::= HexByte HexByte HexByte HexByte?
    LineEnd ::= '\\n' | '\\r\\n' | end of input
    WS      ::= ' ' | '\\t'

Every step takes the full text and a cursor position and returns the new
position together with the parsed value. Failures raise ParseError.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .errors import ErrorKind, ParseError
from .shape import MIN_SHAPE_POINTS, OPAQUE_ALPHA, Color, Mesh, Point, Shape

logger = logging.getLogger(__name__)

INLINE_WHITESPACE = " \t"
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
COMMENT_MARKER = "#"
COORD_SEPARATOR = ","
POINT_TERMINATOR = ";"
COLOR_MARKER = "."

# Characters that end a point list when seen where a point should start
_POINT_LIST_BOUNDARY = frozenset(COLOR_MARKER + COMMENT_MARKER + "\r\n")

_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


# ---- Primitive scanners ----

def skip_inline_whitespace(text: str, pos: int) -> int:
    """Skip spaces and tabs. Newlines are never consumed."""
    end = len(text)
    while pos < end and text[pos] in INLINE_WHITESPACE:
        pos += 1
    return pos


def read_float(text: str, pos: int) -> Tuple[int, float]:
    """Read a signed decimal float literal such as ``-1.5e3``."""
    match = _FLOAT_PATTERN.match(text, pos)
    if match is None:
        raise ParseError(ErrorKind.INVALID_NUMBER, text, pos)
    return match.end(), float(match.group())


def read_hex_byte(text: str, pos: int) -> Tuple[int, int]:
    """Read exactly two hex digits as a value in 0-255."""
    pair = text[pos:pos + 2]
    if len(pair) != 2 or not all(c in HEX_DIGITS for c in pair):
        raise ParseError(ErrorKind.INVALID_HEX, text, pos, "expected two hex digits")
    return pos + 2, int(pair, 16)


def _is_hex_digit(text: str, pos: int) -> bool:
    return pos < len(text) and text[pos] in HEX_DIGITS


def _consume_line_end(text: str, pos: int) -> Optional[int]:
    """Return the position after a line terminator at pos, or None."""
    if text.startswith("\r\n", pos):
        return pos + 2
    if text.startswith("\n", pos):
        return pos + 1
    return None


def _skip_comment(text: str, pos: int) -> int:
    """Skip through the end of the line, or to end of input."""
    newline = text.find("\n", pos)
    if newline < 0:
        return len(text)
    return newline + 1


# ---- Point, color and shape ----

def parse_point(text: str, pos: int = 0) -> Tuple[int, Point]:
    """Parse ``x , y`` with optional spaces or tabs around the comma."""
    pos, x = read_float(text, pos)
    pos = skip_inline_whitespace(text, pos)
    if not text.startswith(COORD_SEPARATOR, pos):
        raise ParseError(ErrorKind.EXPECTED_COMMA, text, pos)
    pos = skip_inline_whitespace(text, pos + 1)
    pos, y = read_float(text, pos)
    return pos, Point(x, y)


def parse_color(text: str, pos: int = 0) -> Tuple[int, Color]:
    """
    Parse ``rrggbb`` or ``rrggbbaa``.

    Alpha defaults to opaque when the fourth pair is absent. A single
    hex digit after the first six is rejected rather than left behind.
    """
    pos, r = read_hex_byte(text, pos)
    pos, g = read_hex_byte(text, pos)
    pos, b = read_hex_byte(text, pos)
    if _is_hex_digit(text, pos):
        pos, a = read_hex_byte(text, pos)
    else:
        a = OPAQUE_ALPHA
    return pos, Color(r, g, b, a)


def _parse_point_entry(text: str, pos: int) -> Tuple[int, Point]:
    """Parse one ``Point ;`` entry of a shape's point list."""
    pos = skip_inline_whitespace(text, pos)
    pos, point = parse_point(text, pos)
    pos = skip_inline_whitespace(text, pos)
    if not text.startswith(POINT_TERMINATOR, pos):
        raise ParseError(ErrorKind.INCOMPLETE_SHAPE, text, pos, "expected ';' after point")
    return pos + 1, point


def parse_shape(text: str, pos: int = 0) -> Tuple[int, Shape]:
    """
    Parse a point list of at least three entries followed by ``. Color``.

    Entries beyond the first three are taken greedily; the first one that
    does not match ends the list and the color clause must follow.
    """
    points: List[Point] = []

    for _ in range(MIN_SHAPE_POINTS):
        start = skip_inline_whitespace(text, pos)
        try:
            pos, point = _parse_point_entry(text, start)
        except ParseError as err:
            at_boundary = start == len(text) or text[start] in _POINT_LIST_BOUNDARY
            if err.kind is ErrorKind.INVALID_NUMBER and err.position == start and at_boundary:
                raise ParseError(
                    ErrorKind.INCOMPLETE_SHAPE, text, start,
                    f"expected at least {MIN_SHAPE_POINTS} points, found {len(points)}",
                ) from err
            raise
        points.append(point)

    while True:
        try:
            pos, point = _parse_point_entry(text, pos)
        except ParseError:
            break
        points.append(point)

    pos = skip_inline_whitespace(text, pos)
    if not text.startswith(COLOR_MARKER, pos):
        raise ParseError(ErrorKind.MISSING_COLOR, text, pos, "expected '.' and a color after the points")
    pos = skip_inline_whitespace(text, pos + 1)
    if not _is_hex_digit(text, pos):
        raise ParseError(ErrorKind.MISSING_COLOR, text, pos, "expected a color after '.'")
    pos, color = parse_color(text, pos)

    return pos, Shape(tuple(points), color)


# ---- Lines ----

@dataclass(frozen=True)
class CommentLine:
    """A line holding only a comment."""


@dataclass(frozen=True)
class BlankLine:
    """A line holding nothing but whitespace."""


@dataclass(frozen=True)
class ShapeLine:
    """A line defining one shape, possibly followed by a comment."""
    shape: Shape


LineOutcome = Union[CommentLine, BlankLine, ShapeLine]


def classify_line(text: str, pos: int = 0) -> Tuple[int, LineOutcome]:
    """
    Consume one physical line starting at pos.

    Returns the position of the next line and what this line held.
    """
    pos = skip_inline_whitespace(text, pos)

    if text.startswith(COMMENT_MARKER, pos):
        return _skip_comment(text, pos + 1), CommentLine()

    line_end = _consume_line_end(text, pos)
    if line_end is not None:
        return line_end, BlankLine()
    if pos == len(text):
        return pos, BlankLine()

    try:
        pos, shape = parse_shape(text, pos)
    except ParseError as err:
        # Nothing matched at all, so this line is not a shape attempt
        if err.kind is ErrorKind.INVALID_NUMBER and err.position == pos:
            raise ParseError(
                ErrorKind.TRAILING_INPUT, text, pos,
                "expected a shape, a comment or a blank line",
            ) from err
        raise

    pos = skip_inline_whitespace(text, pos)
    if text.startswith(COMMENT_MARKER, pos):
        return _skip_comment(text, pos + 1), ShapeLine(shape)
    if pos == len(text):
        return pos, ShapeLine(shape)

    line_end = _consume_line_end(text, pos)
    if line_end is None:
        raise ParseError(ErrorKind.TRAILING_INPUT, text, pos, "unexpected text after shape")
    return line_end, ShapeLine(shape)


# ---- Whole input ----

class MeshParser:
    """Parser for mesh text."""

    @staticmethod
    def parse(text: str) -> Mesh:
        """
        Parse a complete mesh text into a Mesh.

        The whole input must be accounted for as comments, blank lines or
        shapes; a single malformed line fails the entire parse.

        Args:
            text: The full mesh text

        Returns:
            The parsed Mesh

        Raises:
            ParseError: If the text is malformed
        """
        shapes: List[Shape] = []
        pos = 0
        end = len(text)

        while pos < end:
            next_pos, outcome = classify_line(text, pos)
            if next_pos <= pos:
                raise ParseError(ErrorKind.TRAILING_INPUT, text, pos)
            if isinstance(outcome, ShapeLine):
                shapes.append(outcome.shape)
            pos = next_pos

        logger.debug("Parsed %d shapes from %d characters", len(shapes), end)
        return Mesh(tuple(shapes))

    @staticmethod
    def validate(text: str) -> Tuple[bool, Optional[str]]:
        """
        Check mesh text without keeping the result.

        Returns:
            A tuple of (is_valid, error_message)
        """
        try:
            MeshParser.parse(text)
            return True, None
        except ParseError as e:
            return False, str(e)

    @staticmethod
    def normalize(text: str) -> str:
        """
        Normalize mesh text (parse and re-encode).

        Comments and blank lines are dropped.
        """
        return MeshParser.parse(text).to_code()
