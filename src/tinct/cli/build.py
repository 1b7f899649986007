"""
Build commands: compile tokens and keep generated artifacts current.
"""

from pathlib import Path

import typer

from tinct.compiler import stale_artifacts, write_artifacts

from .common import compile_project, load_project


def build_command(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to tinct.toml (default: ./tinct.toml)"
    ),
    out: Path | None = typer.Option(
        None, "--out", "-o", help="Output directory (overrides build.output_dir)"
    ),
) -> None:
    """Compile token sources into the CSS sheet, preset, and schema."""
    cfg = load_project(config)
    if out is not None:
        cfg.build.output_dir = out

    artifacts = compile_project(cfg)
    written = write_artifacts(artifacts, cfg.build)

    for path in written:
        typer.echo(f"  wrote {path}")
    if written:
        typer.echo(f"Built {len(written)} artifact(s) in {cfg.build.output_dir}")
    else:
        typer.echo("Artifacts are up to date")


def check_command(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to tinct.toml (default: ./tinct.toml)"
    ),
) -> None:
    """
    Fail if generated artifacts differ from a fresh compile.

    Intended for CI: run after `tinct build` has been committed.
    """
    cfg = load_project(config)
    stale = stale_artifacts(compile_project(cfg), cfg.build)
    if stale:
        for path in stale:
            typer.echo(f"  stale: {path}", err=True)
        typer.echo("Generated artifacts are out of date. Run `tinct build`.", err=True)
        raise typer.Exit(code=1)
    typer.echo("Artifacts are up to date")


def schema_command(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to tinct.toml (default: ./tinct.toml)"
    ),
) -> None:
    """Print the brand theme schema as JSON."""
    cfg = load_project(config)
    typer.echo(compile_project(cfg).schema_json, nl=False)
