"""CLI entry point for aeqb-lang.

Invoked as::

    aeqb-lang [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m aeqb.cli.main

Commands
--------
check       Validate one or more A=B files
serve       Run the language server over stdio
version     Show version information
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.table import Table

from aeqb.validator.diagnostics import Diagnostic

console = Console()
err_console = Console(stderr=True)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _read_source(path: str) -> str:
    """Read an A=B source file, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _print_table(path: str, diagnostics: list[Diagnostic]) -> None:
    table = Table(title=f"Check: {path}", show_lines=True)
    table.add_column("Severity", style="bold", min_width=10)
    table.add_column("Location", min_width=10)
    table.add_column("Errors")

    for d in diagnostics:
        table.add_row(
            f"[red]{d.severity.name}[/red]",
            f"{d.span.line}:{d.span.col}",
            "\n".join(d.errors),
        )
    console.print(table)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="aeqb-lang")
def cli() -> None:
    """A=B toolkit: line validator and language server."""


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from aeqb import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]aeqb-lang[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"], case_sensitive=False),
    default="text",
    help="Output format (default: text).",
)
def check_command(files: tuple[str, ...], output_format: str) -> None:
    """Validate A=B files and report syntax errors.

    FILES are paths to the source files to check.  Exits with status 1
    when any file contains an invalid instruction.
    """
    from aeqb.validator import Validator

    validator = Validator(related_information=False)
    results: dict[str, list[Diagnostic]] = {}
    for file in files:
        results[file] = validator.validate(_read_source(file))

    total = sum(len(diagnostics) for diagnostics in results.values())

    if output_format == "json":
        data = {f: [d.to_dict() for d in ds] for f, ds in results.items()}
        click.echo(json.dumps(data, indent=2))
    elif output_format == "yaml":
        data = {f: [d.to_dict() for d in ds] for f, ds in results.items()}
        click.echo(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), nl=False)
    else:
        for file, diagnostics in results.items():
            if diagnostics:
                _print_table(file, diagnostics)
            else:
                console.print(f"[green]OK[/green] {file} — no syntax errors")
        console.print(f"\n[bold]Summary:[/bold] {total} invalid line(s) in {len(files)} file(s)")

    if total:
        sys.exit(1)


# ---------------------------------------------------------------------------
# serve command
# ---------------------------------------------------------------------------


@cli.command(name="serve")
@click.option("--log-file", default=None, help="Write server logs to this file.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level (default: WARNING).",
)
def serve_command(log_file: str | None, log_level: str) -> None:
    """Run the A=B language server over stdin/stdout."""
    from aeqb.lsp.server import serve

    # stdout carries the protocol, so logs go to a file or stderr.
    if log_file:
        logging.basicConfig(filename=log_file, level=log_level.upper(), format=_LOG_FORMAT)
    else:
        logging.basicConfig(stream=sys.stderr, level=log_level.upper(), format=_LOG_FORMAT)
    serve()


if __name__ == "__main__":
    cli()
