"""Core mesh data structures."""

from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Optional, Tuple

import numpy as np

OPAQUE_ALPHA = 0xFF
MIN_SHAPE_POINTS = 3

Bounds = Tuple[float, float, float, float]


class Point(NamedTuple):
    """
    A point in 2D space.

    Positive X goes right, positive Y goes down (screen convention).
    """
    x: float
    y: float


class Color(NamedTuple):
    """An RGBA color with 8-bit channels."""
    r: int
    g: int
    b: int
    a: int = OPAQUE_ALPHA

    @classmethod
    def from_hex(cls, code: str) -> "Color":
        """Parse a 6 or 8 digit hex color code (``rrggbb[aa]``)."""
        from .parser import parse_color

        code = code.strip()
        pos, color = parse_color(code)
        if pos != len(code):
            raise ValueError(f"Color code must be 6 or 8 hex digits: {code}")
        return color

    def to_hex(self) -> str:
        """Encode as ``rrggbb``, appending ``aa`` only when not opaque."""
        code = f"{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a != OPAQUE_ALPHA:
            code += f"{self.a:02x}"
        return code

    @property
    def is_opaque(self) -> bool:
        return self.a == OPAQUE_ALPHA


@dataclass(frozen=True)
class Shape:
    """
    A filled polygon with a single color.

    Points are kept in definition order, which is also the boundary order.
    """
    points: Tuple[Point, ...]
    color: Color

    def __post_init__(self):
        """Normalize to immutable point/color values and check the point count."""
        points = tuple(Point(float(x), float(y)) for x, y in self.points)
        if len(points) < MIN_SHAPE_POINTS:
            raise ValueError(
                f"A shape needs at least {MIN_SHAPE_POINTS} points, got {len(points)}"
            )
        object.__setattr__(self, "points", points)
        object.__setattr__(self, "color", Color(*self.color))

    @property
    def num_points(self) -> int:
        return len(self.points)

    def as_array(self) -> np.ndarray:
        """Return the points as an (N, 2) float array."""
        return np.array(self.points, dtype=float)

    def bounds(self) -> Bounds:
        """Axis-aligned bounds as (xmin, ymin, xmax, ymax)."""
        pts = self.as_array()
        xmin, ymin = pts.min(axis=0)
        xmax, ymax = pts.max(axis=0)
        return float(xmin), float(ymin), float(xmax), float(ymax)

    def area(self) -> float:
        """
        Signed area via the shoelace formula.

        Positive for clockwise point order on screen (y down).
        """
        pts = self.as_array()
        x, y = pts[:, 0], pts[:, 1]
        return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))

    def to_code(self) -> str:
        """Encode this shape as a single mesh line (without newline)."""
        from .encoder import MeshEncoder
        return MeshEncoder.encode_shape(self)


@dataclass(frozen=True)
class Mesh:
    """An ordered collection of shapes parsed from one input text."""
    shapes: Tuple[Shape, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "shapes", tuple(self.shapes))

    @classmethod
    def empty(cls) -> "Mesh":
        """Create a mesh with no shapes."""
        return cls(())

    @classmethod
    def parse(cls, text: str) -> "Mesh":
        """
        Parse mesh text into a Mesh.

        Raises:
            ParseError: If any part of the input is malformed
        """
        from .parser import MeshParser
        return MeshParser.parse(text)

    @classmethod
    def from_shapes(cls, shapes: Iterable[Shape]) -> "Mesh":
        return cls(tuple(shapes))

    @property
    def num_shapes(self) -> int:
        return len(self.shapes)

    def is_empty(self) -> bool:
        return not self.shapes

    def bounds(self) -> Optional[Bounds]:
        """Union of all shape bounds, or None for an empty mesh."""
        if not self.shapes:
            return None
        all_bounds = np.array([shape.bounds() for shape in self.shapes], dtype=float)
        return (
            float(all_bounds[:, 0].min()),
            float(all_bounds[:, 1].min()),
            float(all_bounds[:, 2].max()),
            float(all_bounds[:, 3].max()),
        )

    def to_code(self) -> str:
        """Encode this mesh back into mesh text."""
        from .encoder import MeshEncoder
        return MeshEncoder.encode(self)

    def __iter__(self):
        return iter(self.shapes)
