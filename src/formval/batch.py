"""Batch runner for checks listed in a YAML file.

A batch file looks like::

    checks:
      - name: signup email
        predicate: is_email_address
        args: ["user@mail.com"]
      - predicate: is_number_between
        args: [3, 3, 2]
        expect: false

Each check is run on its own; results are never combined into a rule.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from formval.config import FormvalConfig, parse_bool
from formval.errors import FormvalError, InvalidArgumentError
from formval.registry import PredicateRegistry, get_global_registry

logger = logging.getLogger(__name__)


class BatchFileError(FormvalError):
    """Raised when a batch file is missing or malformed."""


@dataclass
class CheckResult:
    """Result of a single check."""

    name: str
    predicate: str
    args: list[Any]
    expected: bool
    result: bool | None
    error: str | None = None

    @property
    def passed(self) -> bool:
        """True when the check ran and returned the expected verdict."""
        return self.error is None and self.result is self.expected

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        data: dict[str, Any] = {
            "name": self.name,
            "predicate": self.predicate,
            "args": self.args,
            "expected": self.expected,
            "result": self.result,
            "passed": self.passed,
        }
        if self.error is not None:
            data["error"] = self.error
        return data


def load_checks(path: Path) -> list[dict[str, Any]]:
    """Load check definitions from a YAML file.

    Args:
        path: YAML file with a top-level ``checks`` list.

    Returns:
        List of check dictionaries, each with at least ``predicate``.

    Raises:
        BatchFileError: If the file cannot be read or is not shaped correctly.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise BatchFileError(f"Cannot read batch file: {path}", context={"path": str(path)}) from e
    except yaml.YAMLError as e:
        raise BatchFileError(f"Invalid YAML in {path}: {e}", context={"path": str(path)}) from e

    if not isinstance(data, dict) or not isinstance(data.get("checks"), list):
        raise BatchFileError(f"{path} must contain a 'checks' list", context={"path": str(path)})

    checks: list[dict[str, Any]] = []
    for index, check in enumerate(data["checks"], start=1):
        if not isinstance(check, dict) or "predicate" not in check:
            raise BatchFileError(
                f"Check #{index} in {path} has no 'predicate'",
                context={"path": str(path), "index": index},
            )
        checks.append(check)

    return checks


def _read_expect(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return parse_bool(value)
    raise ValueError(f"Not a boolean value: {value!r}")


def run_check(
    check: dict[str, Any],
    config: FormvalConfig | None = None,
    registry: PredicateRegistry | None = None,
) -> CheckResult:
    """Run one check definition.

    Unknown predicates, malformed arguments and an ``expect`` that is not a
    boolean are recorded on the result rather than raised. ``expect`` may be
    a YAML boolean or a string such as "false" or "yes"; the predicate is not
    called when it cannot be read.
    """
    registry = registry or get_global_registry()
    predicate = str(check["predicate"])
    args = check.get("args", [])
    if not isinstance(args, list):
        args = [args]
    name = str(check.get("name", predicate))
    expect = check.get("expect", True)
    expect_error: str | None = None
    try:
        expected = _read_expect(expect)
    except ValueError:
        expected = True
        expect_error = f"Invalid expect value: {expect!r}"

    result = CheckResult(name=name, predicate=predicate, args=args, expected=expected, result=None)

    if expect_error is not None:
        result.error = expect_error
    elif not registry.has(predicate):
        result.error = f"Unknown predicate: {predicate}"
    else:
        try:
            result.result = registry.call(predicate, args, config)
        except InvalidArgumentError as e:
            result.error = str(e)

    logger.debug("Check %s -> %s", name, "ok" if result.passed else "mismatch")
    return result


def run_checks(
    checks: list[dict[str, Any]],
    config: FormvalConfig | None = None,
    registry: PredicateRegistry | None = None,
) -> list[CheckResult]:
    """Run every check in order."""
    return [run_check(check, config, registry) for check in checks]
