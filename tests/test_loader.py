"""Tests for loading mesh files and the viewer's configuration."""

import logging
from pathlib import Path

import pytest
from trident.config import ViewerConfig
from trident.loader import load_mesh, try_load_mesh
from trident.shapes.errors import ErrorKind, ParseError


@pytest.fixture
def mesh_file(tmp_path):
    path = tmp_path / "flag.tri"
    path.write_text(
        "# This produces the anarchist flag.\n"
        "0, 0; 100, 0; 0, 70;. ff0000 # A red triangle\n"
        "100, 0; 100, 70; 0, 70;. 000000 # A black triangle\n",
        encoding="utf-8",
    )
    return path


class TestLoadMesh:
    """Tests for load_mesh."""

    def test_load(self, mesh_file):
        mesh = load_mesh(mesh_file)
        assert mesh.num_shapes == 2
        assert mesh.shapes[1].color == (0, 0, 0, 255)

    def test_load_str_path(self, mesh_file):
        assert load_mesh(str(mesh_file)).num_shapes == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_mesh(tmp_path / "missing.tri")

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.tri"
        path.write_text("0, 0; 1, 0;. ff0000\n", encoding="utf-8")
        with pytest.raises(ParseError) as exc:
            load_mesh(path)
        assert exc.value.kind is ErrorKind.INCOMPLETE_SHAPE


class TestTryLoadMesh:
    """Tests for try_load_mesh."""

    def test_success(self, mesh_file):
        mesh, error = try_load_mesh(mesh_file)
        assert error is None
        assert mesh.num_shapes == 2

    def test_parse_error_as_text(self, tmp_path, caplog):
        path = tmp_path / "bad.tri"
        path.write_text("garbage", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="trident.loader"):
            mesh, error = try_load_mesh(path)
        assert mesh is None
        assert "line 1, column 1" in error
        assert "bad.tri" in error
        assert any("Failed to parse" in r.message for r in caplog.records)

    def test_missing_file_as_text(self, tmp_path):
        mesh, error = try_load_mesh(tmp_path / "missing.tri")
        assert mesh is None
        assert "missing.tri" in error


class TestViewerConfig:
    """Tests for ViewerConfig."""

    def test_defaults(self):
        config = ViewerConfig()
        assert (config.screen_width, config.screen_height) == (640, 480)
        assert config.pan_speed == 15.0
        assert config.zoom_ratio == 1.02

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TRIDENT_SCREEN_WIDTH", "1024")
        monkeypatch.setenv("TRIDENT_ZOOM_RATIO", "1.1")
        monkeypatch.setenv("TRIDENT_TITLE", "Preview")
        monkeypatch.setenv("TRIDENT_BACKGROUND_COLOR", "[0, 0, 0]")
        monkeypatch.setenv("SCREEN_HEIGHT", "100")
        config = ViewerConfig()
        assert config.screen_width == 1024
        assert config.zoom_ratio == 1.1
        assert config.title == "Preview"
        assert config.background_color == (0, 0, 0)
        assert config.screen_height == 480

    def test_environment_invalid_number(self, monkeypatch):
        monkeypatch.setenv("TRIDENT_FRAME_RATE", "fast")
        with pytest.raises(ValueError, match="frame_rate"):
            ViewerConfig()

    def test_environment_out_of_range(self, monkeypatch):
        monkeypatch.setenv("TRIDENT_ZOOM_RATIO", "0.5")
        with pytest.raises(ValueError, match="zoom_ratio"):
            ViewerConfig()

    @pytest.mark.parametrize("kwargs", [
        {"screen_width": 0},
        {"zoom_ratio": 1.0},
        {"frame_rate": -1},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            ViewerConfig(**kwargs)


SAMPLES_DIR = Path(__file__).resolve().parent.parent / "samples"


class TestSamples:
    """The bundled sample files must stay loadable."""

    @pytest.mark.parametrize("name,num_shapes", [("flag.tri", 2), ("hexagon.tri", 1)])
    def test_sample_loads(self, name, num_shapes):
        assert load_mesh(SAMPLES_DIR / name).num_shapes == num_shapes
