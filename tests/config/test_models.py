"""Tests for configuration section models."""

import pytest

from graphedit.config.models import CanvasConfig, StorageConfig


class TestDefaults:
    def test_storage(self) -> None:
        storage = StorageConfig()
        assert storage.directory == ".graphedit"
        assert storage.filename == "graphedit.db"
        assert storage.key == "graph-storage"

    def test_canvas(self) -> None:
        canvas = CanvasConfig()
        assert canvas.node_type == "default"
        assert (canvas.default_x, canvas.default_y) == (0.0, 0.0)


class TestValidation:
    def test_from_mapping(self) -> None:
        assert CanvasConfig.model_validate({"default_y": "3"}).default_y == 3.0

    def test_rejects_bad_type(self) -> None:
        with pytest.raises(Exception):
            CanvasConfig.model_validate({"default_x": "left"})

    def test_frozen(self) -> None:
        with pytest.raises(Exception):
            StorageConfig().key = "x"  # type: ignore[misc]
