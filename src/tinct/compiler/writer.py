"""
Artifact output.

Writes compiled artifacts to the configured output directory and detects
committed artifacts that no longer match a fresh compile.
"""

from __future__ import annotations

import logging
from pathlib import Path

from tinct.core.config import BuildConfig

from .compiler import CompiledArtifacts

logger = logging.getLogger(__name__)


def artifact_contents(artifacts: CompiledArtifacts, build: BuildConfig) -> dict[Path, str]:
    """Map each configured output path to its expected contents."""
    contents = {
        build.css_path: artifacts.css_sheet,
        build.preset_path: artifacts.preset_json,
        build.schema_path: artifacts.schema_json,
    }
    if build.utilities_path is not None:
        contents[build.utilities_path] = artifacts.utilities_css
    return contents


def write_artifacts(artifacts: CompiledArtifacts, build: BuildConfig) -> list[Path]:
    """
    Write all artifacts.

    Files whose contents are already identical are left untouched so that
    file watchers and mtimes stay quiet on no-op builds.

    Returns:
        Paths that were (re)written.
    """
    written: list[Path] = []
    for path, text in artifact_contents(artifacts, build).items():
        if path.exists() and path.read_text(encoding="utf-8") == text:
            logger.debug("Unchanged: %s", path)
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps "\n" on every platform
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
        written.append(path)
        logger.info("Wrote %s", path)
    return written


def stale_artifacts(artifacts: CompiledArtifacts, build: BuildConfig) -> list[Path]:
    """
    Return artifacts that are missing or differ from a fresh compile.
    """
    stale: list[Path] = []
    for path, text in artifact_contents(artifacts, build).items():
        if not path.exists() or path.read_bytes() != text.encode("utf-8"):
            stale.append(path)
    return stale
