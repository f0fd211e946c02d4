"""Geometric sanity checks for parsed meshes."""

from typing import List, Tuple

import numpy as np

from .shape import Mesh, Shape


class MeshValidator:
    """
    Checks for shapes that parse fine but cannot render sensibly.

    Parsing already guarantees the structural rules (three or more points,
    one color per shape); these checks look at the geometry itself.
    """

    AREA_EPSILON = 1e-9

    @classmethod
    def shape_issues(cls, shape: Shape) -> List[str]:
        """List the problems found in a single shape."""
        issues = []
        pts = shape.as_array()

        if not np.all(np.isfinite(pts)):
            issues.append("has non-finite coordinates")
            return issues

        repeated = np.all(pts == np.roll(pts, -1, axis=0), axis=1)
        if np.any(repeated):
            issues.append(f"repeats consecutive points {int(np.count_nonzero(repeated))} time(s)")

        if abs(shape.area()) <= cls.AREA_EPSILON:
            issues.append("has zero area")

        if shape.color.a == 0:
            issues.append("is fully transparent")

        return issues

    @classmethod
    def validate_mesh(cls, mesh: Mesh) -> Tuple[bool, List[str]]:
        """
        Validate every shape in a mesh.

        Returns:
            A tuple of (is_valid, list_of_issues)
        """
        issues = []
        for i, shape in enumerate(mesh.shapes):
            for issue in cls.shape_issues(shape):
                issues.append(f"Shape {i}: {issue}")
        return len(issues) == 0, issues

    @classmethod
    def is_valid(cls, mesh: Mesh) -> bool:
        """Quick check if a mesh is valid."""
        valid, _ = cls.validate_mesh(mesh)
        return valid
