"""Tests for formval.batch module."""

from __future__ import annotations

from pathlib import Path

import pytest

from formval.batch import BatchFileError, CheckResult, load_checks, run_check, run_checks
from formval.config import FormvalConfig

BATCH_YAML = """\
checks:
  - name: signup email
    predicate: is_email_address
    args: ["user@mail.com"]
  - predicate: is_number_between
    args: [3, 3, 2]
    expect: false
  - predicate: contains
    args: ["The quick brown fox", [fox, dog]]
  - predicate: is_before_date
    args: [2016-10-31, 2016-12-25]
"""


@pytest.fixture
def batch_file(tmp_path: Path) -> Path:
    """Write a small batch file."""
    path = tmp_path / "checks.yaml"
    path.write_text(BATCH_YAML)
    return path


class TestLoadChecks:
    """Tests for load_checks."""

    def test_loads_all_checks(self, batch_file: Path) -> None:
        """Test every entry is returned."""
        checks = load_checks(batch_file)
        assert len(checks) == 4
        assert checks[0]["name"] == "signup email"

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises BatchFileError."""
        with pytest.raises(BatchFileError, match="Cannot read"):
            load_checks(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML raises BatchFileError."""
        path = tmp_path / "bad.yaml"
        path.write_text("checks: [unclosed\n")
        with pytest.raises(BatchFileError, match="Invalid YAML"):
            load_checks(path)

    def test_missing_checks_key(self, tmp_path: Path) -> None:
        """Test a document without a checks list raises."""
        path = tmp_path / "empty.yaml"
        path.write_text("other: 1\n")
        with pytest.raises(BatchFileError, match="'checks' list"):
            load_checks(path)

    def test_check_without_predicate(self, tmp_path: Path) -> None:
        """Test an entry without a predicate raises and names its position."""
        path = tmp_path / "nopred.yaml"
        path.write_text("checks:\n  - args: [x]\n")
        with pytest.raises(BatchFileError) as exc_info:
            load_checks(path)
        assert exc_info.value.context["index"] == 1


class TestRunCheck:
    """Tests for run_check and run_checks."""

    def test_all_checks_pass(self, batch_file: Path) -> None:
        """Test every sample check matches its expectation."""
        results = run_checks(load_checks(batch_file))
        assert [r.passed for r in results] == [True, True, True, True]
        assert results[1].result is False
        assert results[1].expected is False

    def test_name_defaults_to_predicate(self) -> None:
        """Test a check without a name uses the predicate name."""
        result = run_check({"predicate": "is_hex", "args": ["#fff"]})
        assert result.name == "is_hex"

    def test_single_arg_without_list(self) -> None:
        """Test a scalar args value is treated as one argument."""
        result = run_check({"predicate": "is_hex", "args": "#fff"})
        assert result.result is True

    def test_mismatch(self) -> None:
        """Test a False verdict fails a check that expects True."""
        result = run_check({"predicate": "is_hex", "args": ["#ggg"]})
        assert result.result is False
        assert not result.passed

    def test_invalid_argument_recorded(self) -> None:
        """Test a malformed call is recorded, not raised."""
        result = run_check({"predicate": "is_email_address", "args": [42]})
        assert result.result is None
        assert result.error is not None
        assert "requires string" in result.error
        assert not result.passed

    def test_unknown_predicate_recorded(self) -> None:
        """Test an unknown predicate is recorded as an error."""
        result = run_check({"predicate": "is_unicorn", "args": ["x"]})
        assert result.error == "Unknown predicate: is_unicorn"

    def test_quoted_expect_false(self) -> None:
        """Test a quoted "false" expectation is read as False."""
        result = run_check({"predicate": "is_hex", "args": ["#ggg"], "expect": "false"})
        assert result.expected is False
        assert result.result is False
        assert result.passed

    def test_quoted_expect_yes(self) -> None:
        """Test a quoted "yes" expectation is read as True."""
        result = run_check({"predicate": "is_hex", "args": ["#fff"], "expect": " Yes "})
        assert result.expected is True
        assert result.passed

    @pytest.mark.parametrize("expect", ["maybe", 0, None])
    def test_unreadable_expect_recorded(self, expect: object) -> None:
        """Test an expect value that is not a boolean is recorded as an error."""
        result = run_check({"predicate": "is_hex", "args": ["#fff"], "expect": expect})
        assert result.result is None
        assert result.error == f"Invalid expect value: {expect!r}"
        assert not result.passed

    def test_config_options_applied(self) -> None:
        """Test configuration reaches the predicate."""
        check = {"predicate": "is_rgb", "args": ["rgb(1,2,34"]}
        assert run_check(check).result is True
        assert run_check(check, FormvalConfig(strict_parens=True)).result is False


class TestCheckResult:
    """Tests for CheckResult."""

    def test_to_dict_without_error(self) -> None:
        """Test the dictionary form of a clean result."""
        result = CheckResult(name="n", predicate="is_hex", args=["#fff"], expected=True, result=True)
        assert result.to_dict() == {
            "name": "n",
            "predicate": "is_hex",
            "args": ["#fff"],
            "expected": True,
            "result": True,
            "passed": True,
        }

    def test_to_dict_with_error(self) -> None:
        """Test the error is included when present."""
        result = CheckResult(
            name="n", predicate="is_hex", args=[1], expected=True, result=None, error="bad"
        )
        data = result.to_dict()
        assert data["error"] == "bad"
        assert data["passed"] is False
