"""
Tests for configuration and error handling helpers.
"""

import logging
import pytest

from photomap.config import ClusteringConfig
from photomap.error_handling import (
    setup_logging,
    handle_error,
    safe_file_operation,
    PhotoMapError,
    PhotoSourceError,
    ClusteringError,
)


class TestClusteringConfig:
    """Test environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        for name in ["PHOTOMAP_MAX_ZOOM", "PHOTOMAP_MAX_RADIUS_KM", "PHOTOMAP_LOG_FILE"]:
            monkeypatch.delenv(name, raising=False)

        cfg = ClusteringConfig.from_env()

        assert cfg.min_zoom == 1
        assert cfg.max_zoom == 19
        assert cfg.max_radius_km == 250.0
        assert cfg.log_file is None

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PHOTOMAP_MAX_ZOOM", "17")
        monkeypatch.setenv("PHOTOMAP_MARKER_RADIUS_PX", "60")
        monkeypatch.setenv("PHOTOMAP_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("PHOTOMAP_LOG_FILE", "logs/photomap.log")

        cfg = ClusteringConfig.from_env()

        assert cfg.max_zoom == 17
        assert cfg.marker_radius_px == 60.0
        assert cfg.log_level == "DEBUG"
        assert cfg.log_file == "logs/photomap.log"

    def test_invalid_env_falls_back(self, monkeypatch):
        monkeypatch.setenv("PHOTOMAP_MAX_ZOOM", "lots")
        monkeypatch.setenv("PHOTOMAP_CACHE_SIZE", "")

        cfg = ClusteringConfig.from_env()

        assert cfg.max_zoom == 19
        assert cfg.cache_size == 32


class TestErrorHandling:
    """Test the error hierarchy and helpers."""

    def test_exception_hierarchy(self):
        assert issubclass(ClusteringError, PhotoMapError)
        assert issubclass(ClusteringError, ValueError)
        assert issubclass(PhotoSourceError, PhotoMapError)

    def test_safe_file_operation_maps_os_errors(self):
        def missing():
            raise FileNotFoundError("photos.json")

        def denied():
            raise PermissionError("photos.json")

        with pytest.raises(PhotoSourceError, match="File not found"):
            safe_file_operation(missing)
        with pytest.raises(PhotoSourceError, match="Permission denied"):
            safe_file_operation(denied)

    def test_safe_file_operation_passes_result(self):
        assert safe_file_operation(lambda x: x * 2, 21) == 42

    def test_handle_error_reraises(self):
        with pytest.raises(PhotoSourceError):
            handle_error(PhotoSourceError("boom"), "loading photos")

    def test_handle_error_logs_without_raising(self, caplog):
        with caplog.at_level(logging.ERROR, logger="photomap"):
            handle_error(ValueError("bad"), "clustering", raise_error=False)
        assert "Error in clustering: bad" in caplog.text

    def test_setup_logging_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "photomap.log"

        logger = setup_logging("DEBUG", str(log_file))
        try:
            assert logger.level == logging.DEBUG
            assert log_file.parent.exists()
            assert len(logger.handlers) == 2
        finally:
            setup_logging()
