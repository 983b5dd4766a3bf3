"""formval CLI - Main entry point."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from formval import __version__
from formval.batch import BatchFileError, load_checks, run_checks
from formval.cli_utils import (
    EXIT_FAIL,
    EXIT_USAGE_ERROR,
    dayfirst_option,
    json_option,
    quiet_option,
    strict_parens_option,
    wire_config,
)
from formval.errors import InvalidArgumentError
from formval.registry import get_global_registry

app = typer.Typer(
    name="formval",
    help="formval - Check form input against validation predicates.",
    add_completion=False,
)

# Rich consoles for output
console = Console()
err_console = Console(stderr=True)


# -----------------------------------------------------------------------------
# Output Helpers
# -----------------------------------------------------------------------------


def _output_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def _exit_error(message: str, exit_code: int = EXIT_USAGE_ERROR) -> None:
    """Print error and exit."""
    _output_error(message)
    raise typer.Exit(code=exit_code)


def _print_json(data: Any) -> None:
    console.print_json(json.dumps(data, default=str))


def _verdict(passed: bool) -> str:
    return "[green]PASS[/green]" if passed else "[red]FAIL[/red]"


# -----------------------------------------------------------------------------
# Version and Main Callbacks
# -----------------------------------------------------------------------------


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"formval version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log debug output to stderr.",
    ),
) -> None:
    """formval - Check form input against validation predicates."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# -----------------------------------------------------------------------------
# List Command
# -----------------------------------------------------------------------------


@app.command("list")
def list_predicates(
    family: str | None = typer.Option(
        None,
        "--family",
        "-f",
        help="Only show one family: format, date, string or number.",
    ),
    json_output: bool = json_option(),
) -> None:
    """List the available predicates."""
    registry = get_global_registry()

    if family is not None and family not in registry.families():
        _exit_error(f"Unknown family: {family} (choose from {', '.join(registry.families())})")

    specs = [registry.get(name) for name in registry.list_names(family)]

    if json_output:
        _print_json(
            [
                {
                    "name": spec.name,
                    "family": spec.family,
                    "params": list(spec.params),
                    "summary": spec.summary,
                }
                for spec in specs
                if spec is not None
            ]
        )
        return

    table = Table(title="Predicates")
    table.add_column("Name", style="cyan")
    table.add_column("Family", style="green")
    table.add_column("Arguments")
    table.add_column("Description")

    for spec in specs:
        if spec is None:
            continue
        table.add_row(spec.name, spec.family, ", ".join(spec.params), spec.summary)

    console.print(table)


# -----------------------------------------------------------------------------
# Check Command
# -----------------------------------------------------------------------------


@app.command()
def check(
    predicate: str = typer.Argument(..., help="Predicate name, e.g. is_email_address or is-hex."),
    args: list[str] = typer.Argument(
        ...,
        help="Arguments for the predicate. Word lists are comma-separated.",
    ),
    dayfirst: bool | None = dayfirst_option(),
    strict_parens: bool | None = strict_parens_option(),
    json_output: bool = json_option(),
    quiet: bool = quiet_option(),
) -> None:
    """Run one predicate and exit 0 on pass, 1 on fail, 2 on a malformed call.

    Examples:
        formval check is_email_address user@mail.com
        formval check is-number-between 3 1 5
        formval check contains "hello world" hello,bye
    """
    config = wire_config(dayfirst=dayfirst, strict_parens=strict_parens, json_output=json_output)
    registry = get_global_registry()

    if not registry.has(predicate):
        _exit_error(f"Unknown predicate: {predicate}. Run 'formval list' to see them all.")

    try:
        passed = registry.call(predicate, args, config)
    except InvalidArgumentError as e:
        if config.output == "json" and not quiet:
            _print_json({"predicate": predicate, "args": args, "error": str(e)})
        _exit_error(str(e))

    if quiet:
        pass
    elif config.output == "json":
        _print_json({"predicate": predicate, "args": args, "result": passed})
    else:
        shown = ", ".join(repr(arg) for arg in args)
        console.print(f"{_verdict(passed)} {escape(f'{predicate}({shown})')}")

    if not passed:
        raise typer.Exit(code=EXIT_FAIL)


# -----------------------------------------------------------------------------
# Batch Command
# -----------------------------------------------------------------------------


@app.command()
def batch(
    path: Path = typer.Argument(..., help="YAML file with a 'checks' list."),
    dayfirst: bool | None = dayfirst_option(),
    strict_parens: bool | None = strict_parens_option(),
    json_output: bool = json_option(),
    quiet: bool = quiet_option(),
) -> None:
    """Run every check listed in a YAML file.

    Exits 0 when every check returned its expected verdict, 1 otherwise,
    and 2 if the file cannot be loaded.
    """
    config = wire_config(dayfirst=dayfirst, strict_parens=strict_parens, json_output=json_output)

    try:
        checks = load_checks(path)
    except BatchFileError as e:
        _exit_error(str(e))

    results = run_checks(checks, config)
    passed = sum(1 for r in results if r.passed)
    all_passed = passed == len(results)

    if quiet:
        pass
    elif config.output == "json":
        _print_json(
            {
                "file": str(path),
                "passed": passed,
                "total": len(results),
                "results": [r.to_dict() for r in results],
            }
        )
    else:
        table = Table(title=f"Checks in {path.name}")
        table.add_column("Status")
        table.add_column("Check", style="cyan")
        table.add_column("Predicate")
        table.add_column("Result")

        for r in results:
            if r.error is not None:
                outcome = f"[red]error:[/red] {escape(r.error)}"
            else:
                outcome = f"{r.result} (expected {r.expected})"
            table.add_row(_verdict(r.passed), escape(r.name), r.predicate, outcome)

        console.print(table)
        console.print(f"{passed}/{len(results)} checks passed")

    if not all_passed:
        raise typer.Exit(code=EXIT_FAIL)


if __name__ == "__main__":
    app()
