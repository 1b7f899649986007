"""
Theme commands: inspect how a brand payload resolves.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tinct.compiler import BrandThemeSchema
from tinct.core.config import TinctConfig
from tinct.core.errors import ThemeFetchError
from tinct.runtime import ResolvedTheme, StyleRoot, ValidationResult, validate_payload
from tinct.runtime.fetcher import parse_payload
from tinct.tokens import ModeVariant

from .common import load_project, resolve_schema

console = Console()

CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to tinct.toml")
SCHEMA_OPTION = typer.Option(
    None, "--schema", "-s", help="Compiled schema.json (default: compile from sources)"
)


def _validate_file(
    payload: Path, schema_path: Path | None, config: Path | None
) -> tuple[TinctConfig, BrandThemeSchema, ValidationResult]:
    cfg = load_project(config)
    schema = resolve_schema(schema_path, cfg)

    if not payload.exists():
        typer.echo(f"Payload not found: {payload}", err=True)
        raise typer.Exit(code=1)
    try:
        document = parse_payload(payload.stem, payload.read_bytes(), url=str(payload))
    except ThemeFetchError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    return cfg, schema, validate_payload(schema, document, name=payload.stem)


def _print_warnings(result: ValidationResult) -> None:
    for warning in result.warnings:
        typer.echo(f"  {warning}", err=True)


def _print_warning_table(name: str, result: ValidationResult) -> None:
    if not result.warnings:
        console.print(f"[green]{escape(name)}: no warnings[/green]")
        return

    table = Table(title=f"Warnings for {escape(name)}")
    table.add_column("Kind", style="yellow")
    table.add_column("Path")
    table.add_column("Value", style="dim")
    for warning in result.warnings:
        raw = "" if warning.raw is None else repr(warning.raw)
        table.add_row(warning.kind.value, escape(warning.path), escape(raw))
    console.print(table)


def validate_command(
    payload: Path = typer.Argument(..., help="Brand payload JSON file"),
    schema: Path | None = SCHEMA_OPTION,
    config: Path | None = CONFIG_OPTION,
    as_table: bool = typer.Option(False, "--table", "-t", help="Show warnings as a table"),
) -> None:
    """
    Validate a brand payload against the schema.

    Warnings never fail validation; only an unreadable payload does.
    """
    _, _, result = _validate_file(payload, schema, config)
    if as_table:
        _print_warning_table(payload.name, result)
    else:
        _print_warnings(result)
    typer.echo(
        f"{payload.name}: {len(result.resolved)} token(s) resolved, "
        f"{len(result.warnings)} warning(s)"
    )


def render_command(
    payload: Path = typer.Argument(..., help="Brand payload JSON file"),
    mode: ModeVariant = typer.Option(ModeVariant.LIGHT, "--mode", "-m", help="Color mode"),
    schema: Path | None = SCHEMA_OPTION,
    config: Path | None = CONFIG_OPTION,
) -> None:
    """Print the scoping-root CSS a brand payload resolves to."""
    cfg, brand_schema, result = _validate_file(payload, schema, config)
    _print_warnings(result)

    root = StyleRoot(ResolvedTheme.from_schema(brand_schema), selector=cfg.css.root_selector)
    root.apply(result.resolved, mode)
    typer.echo(root.render_css(), nl=False)
