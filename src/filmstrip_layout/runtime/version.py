"""Version string reported by ``filmstrip-layout --version``."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata as importlib_metadata
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from filmstrip_layout.logging_utils import logger

DISTRIBUTION_NAME = "filmstrip-layout"
FALLBACK_VERSION = "0.0.0"

# src/filmstrip_layout/runtime/version.py -> repository root
SOURCE_PYPROJECT = Path(__file__).resolve().parents[3] / "pyproject.toml"


def read_pyproject_version(pyproject_path: Path) -> str | None:
    """Return ``[project].version`` from a pyproject file, if it has one."""
    try:
        with pyproject_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)
    except FileNotFoundError:
        return None
    except (OSError, TOMLKitError) as exc:
        logger.warning("Error reading %s: %s", pyproject_path, exc)
        return None

    version = doc.unwrap().get("project", {}).get("version")
    if isinstance(version, str) and version.strip():
        return version.strip()
    return None


@lru_cache(maxsize=4)
def resolve_project_version(pyproject_path: Path = SOURCE_PYPROJECT) -> str:
    """
    Return the installed package version.

    A source checkout run without installing has no distribution
    metadata, so the version is read from the checkout's pyproject.toml
    instead. Neither source yields "0.0.0".
    """
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        pass
    return read_pyproject_version(pyproject_path) or FALLBACK_VERSION
