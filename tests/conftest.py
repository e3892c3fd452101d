"""
Test configuration and shared fixtures for filmstrip_layout.

Defines reusable viewport, flag, and settings fixtures plus a factory
for writing TOML config files.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
import tomlkit

from filmstrip_layout.logging_utils import logger
from filmstrip_layout.runtime.store import LayoutStore
from filmstrip_layout.sizing import DEFAULT_SETTINGS, LayoutSettings
from filmstrip_layout.type_defs import GridShape, LayoutFlags, ViewportSize


@pytest.fixture
def settings() -> LayoutSettings:
    """Default sizing settings (16:9, 20px margins)."""
    return DEFAULT_SETTINGS


@pytest.fixture
def hd_viewport() -> ViewportSize:
    """A 1280x720 viewport."""
    return ViewportSize(width=1280, height=720)


@pytest.fixture
def grid_4x2() -> GridShape:
    """Four columns by two rows."""
    return GridShape(columns=4, rows=2)


@pytest.fixture
def closed_flags() -> LayoutFlags:
    """Panel closed, responsive tiles enabled."""
    return LayoutFlags(panel_open=False, panel_reserved_width=200)


@pytest.fixture
def open_flags() -> LayoutFlags:
    """200px side panel open, responsive tiles enabled."""
    return LayoutFlags(panel_open=True, panel_reserved_width=200)


@pytest.fixture
def store() -> LayoutStore:
    """An empty in-memory layout store."""
    return LayoutStore()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write a dict as config.toml under tmp_path and return the path."""

    def _write(data: dict[str, Any]) -> Path:
        doc = tomlkit.document()
        doc.update(data)
        path = tmp_path / "config.toml"
        path.write_text(tomlkit.dumps(doc), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the package logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)


@pytest.fixture(autouse=True)
def restore_logger_level() -> Iterator[None]:
    """Undo level changes made by ``--verbose`` runs."""
    original = logger.level
    yield
    logger.setLevel(original)
