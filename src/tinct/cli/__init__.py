"""
tinct command line.

    tinct build              compile tokens into generated artifacts
    tinct check              fail if generated artifacts are stale
    tinct schema             print the brand theme schema
    tinct validate FILE      validate a brand payload
    tinct render FILE        print the CSS a brand payload resolves to
"""

import typer

from tinct._version import get_version
from tinct.cli.build import build_command, check_command, schema_command
from tinct.cli.theme import render_command, validate_command

app = typer.Typer(
    help="tinct: design token compiler and brand theme tooling",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tinct {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """tinct CLI main callback for global options."""
    pass


app.command(name="build")(build_command)
app.command(name="check")(check_command)
app.command(name="schema")(schema_command)
app.command(name="validate")(validate_command)
app.command(name="render")(render_command)


def main() -> None:
    app()


__all__ = ["app", "main"]
