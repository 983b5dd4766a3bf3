"""CLI utility functions for formval.

Provides helper functions for:
- Config wiring: Extracting Typer CLI options and passing to load_config
- Error reporting: A styled message on stderr and a usage exit code
- Option factories: Fresh Typer options shared by several commands
"""

from __future__ import annotations

from typing import Any, NoReturn

import typer

from formval.config import FormvalConfig, load_config

# Exit code conventions
EXIT_FAIL = 1  # Predicate returned False, or a batch check mismatched
EXIT_USAGE_ERROR = 2  # Malformed call, bad configuration, unreadable file


# -----------------------------------------------------------------------------
# Error Helper
# -----------------------------------------------------------------------------


def error(msg: str, *, exit_code: int = EXIT_USAGE_ERROR) -> NoReturn:
    """Print an error message and exit with the given exit code.

    Raises:
        typer.Exit: Always raises to exit the program.
    """
    styled_prefix = typer.style("Error:", fg=typer.colors.RED, bold=True)
    typer.echo(f"{styled_prefix} {msg}", err=True)
    raise typer.Exit(code=exit_code)


# -----------------------------------------------------------------------------
# Config Wiring Helper
# -----------------------------------------------------------------------------


def wire_config(
    dayfirst: bool | None = None,
    strict_parens: bool | None = None,
    json_output: bool | None = None,
) -> FormvalConfig:
    """Wire CLI options to load_config with appropriate overrides.

    Options left as None fall through to the environment and config files.
    ``json_output`` only overrides when True.

    Raises:
        typer.Exit: If configuration is invalid.
    """
    cli_overrides: dict[str, Any] = {
        "dayfirst": dayfirst,
        "strict_parens": strict_parens,
    }
    if json_output:
        cli_overrides["output"] = "json"

    try:
        return load_config(cli_overrides=cli_overrides)
    except ValueError as e:
        error(f"Invalid configuration: {e}")


# -----------------------------------------------------------------------------
# Typer Option Factory Functions
# -----------------------------------------------------------------------------
# Typer consumes Option objects when decorating commands, so each command
# needs its own instance.


def dayfirst_option() -> Any:
    """Create a Typer Option for --dayfirst/--monthfirst."""
    return typer.Option(
        None,
        "--dayfirst/--monthfirst",
        help="Read numeric dates as day-month-year (default: month first).",
        show_default=False,
    )


def strict_parens_option() -> Any:
    """Create a Typer Option for --strict-parens/--loose-parens."""
    return typer.Option(
        None,
        "--strict-parens/--loose-parens",
        help="Require a closing ')' on rgb()/hsl() colors.",
        show_default=False,
    )


def json_option() -> Any:
    """Create a Typer Option for --json."""
    return typer.Option(False, "--json", help="Output as JSON.")


def quiet_option() -> Any:
    """Create a Typer Option for --quiet / -q."""
    return typer.Option(False, "--quiet", "-q", help="No output; rely on the exit code.")
