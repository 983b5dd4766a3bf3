"""Tests for formval.errors module."""

from __future__ import annotations

import pytest

from formval import FormvalError, InvalidArgumentError, error_message


class TestErrorMessage:
    """Tests for the error_message formatter."""

    def test_message_names_param_and_type(self) -> None:
        """Test the message mentions both the parameter and the type."""
        assert error_message("input", "string") == (
            "Missing parameter, or parameter input is not the correct type (requires string)"
        )

    def test_message_is_pure(self) -> None:
        """Test repeated calls give identical output."""
        assert error_message("n", "number") == error_message("n", "number")


class TestInvalidArgumentError:
    """Tests for InvalidArgumentError."""

    def test_carries_param_and_expected_type(self) -> None:
        """Test the error exposes the parameter name and expected type."""
        err = InvalidArgumentError("words", "array")
        assert err.param == "words"
        assert err.expected_type == "array"
        assert err.context == {"param": "words", "expected_type": "array"}
        assert str(err) == error_message("words", "array")

    def test_is_a_type_error(self) -> None:
        """Test callers can catch it as TypeError or FormvalError."""
        with pytest.raises(TypeError):
            raise InvalidArgumentError("input", "string")
        with pytest.raises(FormvalError):
            raise InvalidArgumentError("input", "string")


class TestFormvalError:
    """Tests for the FormvalError base class."""

    def test_context_defaults_to_empty(self) -> None:
        """Test context is an empty dict when not given."""
        assert FormvalError("boom").context == {}

    def test_context_is_kept(self) -> None:
        """Test context is stored as given."""
        err = FormvalError("boom", context={"path": "x.yaml"})
        assert err.context["path"] == "x.yaml"
        assert str(err) == "boom"
