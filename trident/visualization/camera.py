"""View transform for the mesh viewer."""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ..shapes.shape import Bounds, Point, Shape


@dataclass
class Camera:
    """
    Pan offset and zoom factor.

    A mesh point p lands on screen at ``p * zoom - (x, y)``.
    """
    x: float = 0.0
    y: float = 0.0
    zoom: float = 1.0

    def pan(self, dx: float, dy: float) -> None:
        """Move the view by (dx, dy) screen pixels."""
        self.x += dx
        self.y += dy

    def zoom_by(self, factor: float) -> None:
        """Multiply the zoom by factor, keeping the pan offset."""
        if factor <= 0.0:
            raise ValueError(f"Zoom factor must be positive: {factor}")
        self.zoom *= factor

    def reset(self) -> None:
        self.x = 0.0
        self.y = 0.0
        self.zoom = 1.0

    def to_screen(self, point: Point) -> Tuple[float, float]:
        px, py = point
        return px * self.zoom - self.x, py * self.zoom - self.y

    def shape_to_screen(self, shape: Shape) -> np.ndarray:
        """Map all of a shape's points at once, as an (N, 2) array."""
        return shape.as_array() * self.zoom - np.array([self.x, self.y])

    def screen_rect(self, shape: Shape, width: int, height: int) -> Optional[Tuple[int, int, int, int]]:
        """
        Pixel rect (left, top, w, h) covering the shape, clipped to the screen.

        Returns None when the shape is entirely off screen.
        """
        pts = self.shape_to_screen(shape)
        left = max(int(np.floor(pts[:, 0].min())), 0)
        top = max(int(np.floor(pts[:, 1].min())), 0)
        right = min(int(np.ceil(pts[:, 0].max())) + 1, width)
        bottom = min(int(np.ceil(pts[:, 1].max())) + 1, height)
        if right <= left or bottom <= top:
            return None
        return left, top, right - left, bottom - top

    def fit(self, bounds: Optional[Bounds], width: int, height: int, margin: float = 20.0) -> None:
        """Zoom and pan so that bounds fill the screen, centered."""
        if bounds is None:
            self.reset()
            return
        xmin, ymin, xmax, ymax = bounds
        span_x = max(xmax - xmin, 1e-9)
        span_y = max(ymax - ymin, 1e-9)
        usable_w = max(width - 2 * margin, 1.0)
        usable_h = max(height - 2 * margin, 1.0)
        self.zoom = min(usable_w / span_x, usable_h / span_y)
        center_x = (xmin + xmax) / 2.0
        center_y = (ymin + ymax) / 2.0
        self.x = center_x * self.zoom - width / 2.0
        self.y = center_y * self.zoom - height / 2.0
