"""Mesh text encoding utilities."""

import math
from typing import List

from .shape import Mesh, Point, Shape


class MeshEncoder:
    """Encoder for mesh text."""

    @staticmethod
    def encode(mesh: Mesh) -> str:
        """
        Encode a Mesh into mesh text.

        Args:
            mesh: The Mesh to encode

        Returns:
            One line per shape, each terminated by a newline
        """
        return "".join(MeshEncoder.encode_shape(shape) + "\n" for shape in mesh.shapes)

    @staticmethod
    def encode_shape(shape: Shape) -> str:
        """Encode a single shape as ``x, y; ... ;. rrggbb[aa]``."""
        entries = " ".join(MeshEncoder._encode_point(point) + ";" for point in shape.points)
        return f"{entries}. {shape.color.to_hex()}"

    @staticmethod
    def _encode_point(point: Point) -> str:
        return f"{MeshEncoder._encode_number(point.x)}, {MeshEncoder._encode_number(point.y)}"

    @staticmethod
    def _encode_number(value: float) -> str:
        """
        Shortest round-tripping form, without a trailing ``.0``.

        Raises:
            ValueError: For inf and nan, which mesh text cannot express
        """
        if not math.isfinite(value):
            raise ValueError(f"Cannot encode non-finite coordinate: {value!r}")
        if value == 0.0 and math.copysign(1.0, value) < 0:
            return "-0"
        if value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)

    @staticmethod
    def format_for_display(mesh: Mesh) -> str:
        """
        Format a mesh for human-readable display.

        Returns:
            A summary line followed by one line per shape
        """
        if mesh.is_empty():
            return "[Empty Mesh]"

        lines: List[str] = [f"Mesh with {mesh.num_shapes} shape(s)"]
        for i, shape in enumerate(mesh.shapes):
            xmin, ymin, xmax, ymax = shape.bounds()
            lines.append(
                f"  [{i}] {shape.num_points} points  #{shape.color.to_hex()}  "
                f"bounds=({xmin:g}, {ymin:g})-({xmax:g}, {ymax:g})"
            )
        return "\n".join(lines)
