"""
Pygame-based viewer for mesh files.

Controls: WASD pans, Q/Z zoom in/out, F fits the mesh to the window,
R reloads the file from disk, ESC quits.
"""

import logging
from pathlib import Path
from typing import Optional, Union

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from ..config import ViewerConfig
from ..loader import try_load_mesh
from ..shapes.shape import Mesh, Shape
from .camera import Camera

logger = logging.getLogger(__name__)


class MeshViewer:
    """Pygame window showing one mesh file, with reload on demand."""

    def __init__(self, path: Union[str, Path], config: Optional[ViewerConfig] = None):
        self.path = Path(path)
        self.config = config or ViewerConfig()
        self.camera = Camera()

        # Exactly one of these is set after a load
        self.mesh: Optional[Mesh] = None
        self.error: Optional[str] = None

        self.screen = None
        self.font = None
        self.running = False

        self.reload()

    def reload(self) -> None:
        """Re-read and re-parse the file, replacing the current mesh or error."""
        self.mesh, self.error = try_load_mesh(self.path)
        if self.mesh is not None:
            logger.info("Viewing %d shapes from %s", self.mesh.num_shapes, self.path)

    def show(self):
        """Display the viewer window until it is closed."""
        if not PYGAME_AVAILABLE:
            raise RuntimeError("The viewer requires pygame: pip install 'trident[viewer]'")

        pygame.init()
        self.screen = pygame.display.set_mode(
            (self.config.screen_width, self.config.screen_height), pygame.RESIZABLE
        )
        pygame.display.set_caption(f"{self.config.title} - {self.path.name}")
        self.font = pygame.font.SysFont("monospace", self.config.font_size)
        self.running = True

        clock = pygame.time.Clock()

        while self.running:
            for event in pygame.event.get():
                self._handle_event(event)

            self._update(pygame.key.get_pressed())
            self._render()
            pygame.display.flip()
            clock.tick(self.config.frame_rate)

        pygame.quit()

    def _handle_event(self, event):
        """Handle one-shot pygame events."""
        if event.type == pygame.QUIT:
            self.running = False

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_r:
                self.reload()
            elif event.key == pygame.K_f and self.mesh is not None:
                width, height = self.screen.get_size()
                self.camera.fit(self.mesh.bounds(), width, height)

    def _update(self, keys):
        """Apply held keys: pan and zoom continue while pressed."""
        speed = self.config.pan_speed
        if keys[pygame.K_w]:
            self.camera.pan(0.0, -speed)
        elif keys[pygame.K_s]:
            self.camera.pan(0.0, speed)
        if keys[pygame.K_a]:
            self.camera.pan(-speed, 0.0)
        elif keys[pygame.K_d]:
            self.camera.pan(speed, 0.0)
        if keys[pygame.K_q]:
            self.camera.zoom_by(self.config.zoom_ratio)
        elif keys[pygame.K_z]:
            self.camera.zoom_by(1.0 / self.config.zoom_ratio)

    def _render(self):
        """Render the mesh, or the load error in its place."""
        self.screen.fill(self.config.background_color)

        if self.mesh is not None:
            for shape in self.mesh.shapes:
                self._draw_shape(shape)
        else:
            self._draw_error()

    def _draw_shape(self, shape: Shape):
        points = [tuple(p) for p in self.camera.shape_to_screen(shape)]
        color = tuple(shape.color)

        if shape.color.is_opaque:
            pygame.draw.polygon(self.screen, color, points)
            return

        # Translucent shapes go through an alpha surface so they blend
        width, height = self.screen.get_size()
        rect = self.camera.screen_rect(shape, width, height)
        if rect is None:
            return
        left, top, w, h = rect
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        pygame.draw.polygon(overlay, color, [(x - left, y - top) for x, y in points])
        self.screen.blit(overlay, (left, top))

    def _draw_error(self):
        y = 1
        for line in ["An error occurred:"] + (self.error or "").splitlines():
            text = self.font.render(line, True, self.config.text_color)
            self.screen.blit(text, (1, y))
            y += self.font.get_linesize()


def show_mesh(path: Union[str, Path], config: Optional[ViewerConfig] = None):
    """Open a viewer window for the given mesh file."""
    viewer = MeshViewer(path, config)
    viewer.show()
