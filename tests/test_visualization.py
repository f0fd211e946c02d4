"""Tests for the viewer's camera and reload behaviour."""

import numpy as np
import pytest
from trident.shapes.shape import Color, Shape
from trident.visualization import Camera, MeshViewer


class TestCamera:
    """Tests for Camera."""

    def test_identity(self):
        assert Camera().to_screen((3.0, 4.0)) == (3.0, 4.0)

    def test_pan_and_zoom(self):
        camera = Camera()
        camera.pan(5.0, 5.0)
        camera.zoom_by(2.0)
        assert camera.to_screen((10.0, 20.0)) == (15.0, 35.0)

    def test_zoom_out_undoes_zoom_in(self):
        camera = Camera()
        camera.zoom_by(1.02)
        camera.zoom_by(1.0 / 1.02)
        assert camera.zoom == pytest.approx(1.0)

    def test_invalid_zoom(self):
        with pytest.raises(ValueError):
            Camera().zoom_by(0.0)

    def test_shape_to_screen(self):
        camera = Camera(x=1.0, y=2.0, zoom=3.0)
        shape = Shape(((0, 0), (10, 0), (10, 10)), Color(0, 0, 0))
        np.testing.assert_allclose(
            camera.shape_to_screen(shape),
            [[-1.0, -2.0], [29.0, -2.0], [29.0, 28.0]],
        )

    def test_screen_rect_covers_shape(self):
        shape = Shape(((0, 0), (10, 0), (10, 10)), Color(0, 0, 0, 128))
        assert Camera().screen_rect(shape, 640, 480) == (0, 0, 11, 11)

    def test_screen_rect_clipped_to_screen(self):
        shape = Shape(((0, 0), (10, 0), (10, 10)), Color(0, 0, 0, 128))
        assert Camera(x=-635.0).screen_rect(shape, 640, 480) == (635, 0, 5, 11)

    def test_screen_rect_off_screen(self):
        shape = Shape(((0, 0), (10, 0), (10, 10)), Color(0, 0, 0, 128))
        assert Camera(x=-1000.0).screen_rect(shape, 640, 480) is None

    def test_fit(self):
        camera = Camera()
        camera.fit((0.0, 0.0, 100.0, 50.0), 640, 480, margin=20.0)
        assert camera.zoom == pytest.approx(6.0)
        assert camera.to_screen((0.0, 0.0)) == pytest.approx((20.0, 90.0))
        assert camera.to_screen((100.0, 50.0)) == pytest.approx((620.0, 390.0))

    def test_fit_empty_resets(self):
        camera = Camera(x=4.0, y=4.0, zoom=2.0)
        camera.fit(None, 640, 480)
        assert camera == Camera()


class TestMeshViewerReload:
    """Tests for MeshViewer loading, without opening a window."""

    def test_loads_on_creation(self, tmp_path):
        path = tmp_path / "a.tri"
        path.write_text("0,0; 1,0; 0,1;. ff0000\n", encoding="utf-8")
        viewer = MeshViewer(path)
        assert viewer.error is None
        assert viewer.mesh.num_shapes == 1

    def test_reload_replaces_mesh(self, tmp_path):
        path = tmp_path / "a.tri"
        path.write_text("0,0; 1,0; 0,1;. ff0000\n", encoding="utf-8")
        viewer = MeshViewer(path)
        first = viewer.mesh

        path.write_text("0,0; 1,0; 0,1;. ff0000\n0,0; 2,0; 0,2;. 00ff00\n", encoding="utf-8")
        viewer.reload()
        assert viewer.mesh is not first
        assert viewer.mesh.num_shapes == 2

    def test_reload_shows_error_then_recovers(self, tmp_path):
        path = tmp_path / "a.tri"
        path.write_text("oops\n", encoding="utf-8")
        viewer = MeshViewer(path)
        assert viewer.mesh is None
        assert "trailing input" in viewer.error

        path.write_text("# fixed\n0,0; 1,0; 0,1;. ff0000\n", encoding="utf-8")
        viewer.reload()
        assert viewer.error is None
        assert viewer.mesh.num_shapes == 1
