"""
CLI for checking repolog level strings

Lets an operator validate a level or a `pkg=level` configuration string
before handing it to a running program.
"""

import json

import typer

from repolog.logging.errors import LoggingError
from repolog.logging.level import LogLevel, parse_level
from repolog.logging.repo_logger import parse_log_level_config

app = typer.Typer(help="repolog level configuration admin CLI")


@app.command()
def levels():
    """Show every log level with its character and digit aliases."""
    for level in LogLevel:
        digit = str(int(level)) if level >= LogLevel.ERROR else "-"
        typer.echo(f"{level.name:<8} {level.char()} {digit}")


@app.command()
def level(value: str):
    """Parse a single level string and print its canonical name."""
    try:
        parsed = parse_level(value)
    except LoggingError as exc:
        typer.echo(f"Invalid level: {exc.message}", err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(parsed.name)


@app.command()
def check(conf: str):
    """Parse a `pkg=level,...` configuration string and print the result."""
    try:
        parsed = parse_log_level_config(conf)
    except LoggingError as exc:
        typer.echo(f"Invalid configuration: {exc.message}", err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(json.dumps({pkg: lvl.name for pkg, lvl in parsed.items()}, indent=2))


if __name__ == "__main__":
    app()
