"""Shared CLI helpers."""

from __future__ import annotations

from pathlib import Path

import typer

from tinct.compiler import BrandThemeSchema, CompiledArtifacts, compile_tokens, load_schema
from tinct.core.config import TinctConfig, load_config
from tinct.core.errors import TinctError
from tinct.core.logging import setup_logging
from tinct.tokens import load_sources


def load_project(config: Path | None) -> TinctConfig:
    """Load tinct.toml and configure logging. Exits with code 1 on bad config."""
    try:
        cfg = load_config(config)
    except TinctError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(code=1)
    setup_logging(cfg.logging.level, cfg.logging.log_dir)
    return cfg


def compile_project(cfg: TinctConfig) -> CompiledArtifacts:
    """Compile the configured token sources. Exits with code 1 on any error."""
    try:
        base, brand = load_sources(cfg.build)
        return compile_tokens(base, brand, selectors=cfg.css)
    except TinctError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def resolve_schema(schema: Path | None, cfg: TinctConfig) -> BrandThemeSchema:
    """
    Load a schema artifact, or compile one from the configured sources.
    """
    if schema is None:
        return compile_project(cfg).schema
    try:
        return load_schema(schema)
    except TinctError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
