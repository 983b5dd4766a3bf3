"""Configuration management for the formval CLI.

Handles configuration loading from multiple sources with precedence:
CLI args > environment variables > .formvalrc > pyproject.toml > defaults
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

# tomllib is only available in Python 3.11+
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found]

OUTPUT_FORMATS = ("text", "json")

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


@dataclass
class FormvalConfig:
    """Configuration for the formval CLI.

    Attributes:
        dayfirst: Read ambiguous numeric dates as day-month-year (default: False)
        strict_parens: Require a closing ")" on rgb()/hsl() colors (default: False)
        output: Output format, "text" or "json" (default: "text")
    """

    dayfirst: bool = False
    strict_parens: bool = False
    output: str = "text"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If any configuration value is invalid.
        """
        if not isinstance(self.dayfirst, bool):
            raise ValueError("dayfirst must be a boolean")

        if not isinstance(self.strict_parens, bool):
            raise ValueError("strict_parens must be a boolean")

        if self.output not in OUTPUT_FORMATS:
            raise ValueError(f"output must be one of: {', '.join(OUTPUT_FORMATS)}")


def _get_config_field_names() -> set[str]:
    """Get the set of valid configuration field names."""
    return {f.name for f in fields(FormvalConfig)}


def parse_bool(value: str) -> bool:
    """Parse a boolean from an environment-style string.

    Raises:
        ValueError: If the string is not a recognized boolean.
    """
    lowered = value.strip().lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    raise ValueError(f"Not a boolean value: {value!r}")


def find_config_file(filename: str = ".formvalrc", start_dir: Path | None = None) -> Path | None:
    """Find a configuration file by traversing up the directory tree.

    Args:
        filename: Name of the config file to find.
        start_dir: Directory to start searching from. Defaults to current directory.

    Returns:
        Path to the config file if found, None otherwise.
    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        config_path = current / filename
        if config_path.is_file():
            return config_path

        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file and return its contents.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    with open(path, "rb") as f:
        result: dict[str, Any] = tomllib.load(f)
        return result


def _load_from_formvalrc(start_dir: Path | None = None) -> dict[str, Any]:
    """Load configuration from the nearest .formvalrc file."""
    config_path = find_config_file(".formvalrc", start_dir)
    if config_path is None:
        return {}

    try:
        data = _load_toml_file(config_path)
    except (tomllib.TOMLDecodeError, OSError):
        return {}

    valid_fields = _get_config_field_names()
    return {k: v for k, v in data.items() if k in valid_fields}


def _load_from_pyproject(start_dir: Path | None = None) -> dict[str, Any]:
    """Load configuration from the pyproject.toml [tool.formval] section."""
    config_path = find_config_file("pyproject.toml", start_dir)
    if config_path is None:
        return {}

    try:
        data = _load_toml_file(config_path)
    except (tomllib.TOMLDecodeError, OSError):
        return {}

    section = data.get("tool", {}).get("formval", {})
    valid_fields = _get_config_field_names()
    return {k: v for k, v in section.items() if k in valid_fields}


def _load_from_env() -> dict[str, Any]:
    """Load configuration from environment variables.

    Environment variables are prefixed with FORMVAL_ and use uppercase names:
    FORMVAL_DAYFIRST, FORMVAL_STRICT_PARENS, FORMVAL_OUTPUT

    Raises:
        ValueError: If a boolean variable holds an unrecognized value.
    """
    result: dict[str, Any] = {}

    for env_var, config_key in (
        ("FORMVAL_DAYFIRST", "dayfirst"),
        ("FORMVAL_STRICT_PARENS", "strict_parens"),
    ):
        value = os.environ.get(env_var)
        if value is not None:
            result[config_key] = parse_bool(value)

    output = os.environ.get("FORMVAL_OUTPUT")
    if output is not None:
        result["output"] = output.strip().lower()

    return result


def _merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
    """Merge configuration dictionaries; later ones take precedence."""
    result: dict[str, Any] = {}
    for config in configs:
        for key, value in config.items():
            if value is not None:
                result[key] = value
    return result


def load_config(
    cli_overrides: dict[str, Any] | None = None,
    start_dir: Path | None = None,
) -> FormvalConfig:
    """Load configuration with full precedence chain.

    Precedence (highest to lowest):
    1. CLI arguments (cli_overrides)
    2. Environment variables (FORMVAL_*)
    3. .formvalrc file
    4. pyproject.toml [tool.formval] section
    5. Default values

    Args:
        cli_overrides: Configuration overrides from CLI arguments.
        start_dir: Directory to start searching for config files.

    Returns:
        Fully resolved FormvalConfig instance.

    Raises:
        ValueError: If the resulting configuration is invalid.
    """
    valid_fields = _get_config_field_names()
    cli_config = {
        k: v for k, v in (cli_overrides or {}).items() if k in valid_fields and v is not None
    }

    merged = _merge_configs(
        _load_from_pyproject(start_dir),
        _load_from_formvalrc(start_dir),
        _load_from_env(),
        cli_config,
    )

    return FormvalConfig(**merged)
