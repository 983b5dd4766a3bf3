"""Predicate registry for looking up validators by name.

The registry lets the command line and the batch runner call predicates
from string arguments. Each entry records the kind of every positional
parameter so raw strings can be converted before the call, and the
keyword options that configuration may supply.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

from formval.errors import InvalidArgumentError

if TYPE_CHECKING:
    from formval.config import FormvalConfig

logger = logging.getLogger(__name__)

ParamKind = Literal["text", "number", "tokens", "date"]
Family = Literal["format", "date", "string", "number"]

# Predicate keyword -> FormvalConfig attribute that supplies it
OPTION_SOURCES = {
    "dayfirst": "dayfirst",
    "require_closing_paren": "strict_parens",
}


@dataclass(frozen=True)
class PredicateSpec:
    """Description of a registered predicate.

    Attributes:
        name: Lookup name (the function name, e.g. "is_email_address").
        func: The predicate function.
        params: Kind of each positional parameter, in order.
        family: Which group the predicate belongs to.
        summary: One-line description shown by ``formval list``.
        options: Keyword options the predicate accepts from configuration.
    """

    name: str
    func: Callable[..., bool]
    params: tuple[ParamKind, ...]
    family: Family
    summary: str
    options: frozenset[str] = field(default_factory=frozenset)


def _coerce_number(raw: str, position: int) -> int | float:
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        raise InvalidArgumentError(f"argument {position}", "number") from None


def _coerce(kind: ParamKind, raw: Any, position: int) -> Any:
    """Convert one raw argument. Non-string values are passed through."""
    if not isinstance(raw, str):
        return raw
    if kind == "number":
        return _coerce_number(raw, position)
    if kind == "tokens":
        return [token.strip() for token in raw.split(",") if token.strip()]
    return raw


class PredicateRegistry:
    """Registry that maps names to predicate specs.

    Example:
        >>> registry = PredicateRegistry()
        >>> registry.register(PredicateSpec("is_hex", is_hex, ("text",), "format", "Hex color"))
        >>> registry.call("is-hex", ["#fff"])
        True
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._specs: dict[str, PredicateSpec] = {}

    @staticmethod
    def normalize(name: str) -> str:
        """Normalize a predicate name so ``is-hex`` and ``is_hex`` match."""
        return name.strip().replace("-", "_").lower()

    def register(self, spec: PredicateSpec) -> None:
        """Register a predicate.

        Raises:
            ValueError: If a predicate with the same name is already registered.
        """
        name = self.normalize(spec.name)
        if name in self._specs:
            raise ValueError(f"Predicate '{name}' already registered")
        self._specs[name] = spec
        logger.debug("Registered predicate %s (%s)", name, spec.family)

    def get(self, name: str) -> PredicateSpec | None:
        """Look up a predicate by name, or return None."""
        return self._specs.get(self.normalize(name))

    def has(self, name: str) -> bool:
        """Check if a predicate is registered under ``name``."""
        return self.normalize(name) in self._specs

    def list_names(self, family: str | None = None) -> list[str]:
        """List registered names, optionally restricted to one family.

        Returns:
            Sorted list of names.
        """
        return sorted(
            name for name, spec in self._specs.items() if family is None or spec.family == family
        )

    def families(self) -> list[str]:
        """List the families that have at least one predicate."""
        return sorted({spec.family for spec in self._specs.values()})

    def coerce_args(self, spec: PredicateSpec, raw_args: Sequence[Any]) -> list[Any]:
        """Convert raw (usually string) arguments to the kinds ``spec`` expects.

        Numbers become ``int`` when possible, else ``float``. Token lists are
        split on commas. Text and date arguments are left alone.

        Raises:
            InvalidArgumentError: On a wrong argument count or a number that
                does not parse.
        """
        if len(raw_args) != len(spec.params):
            raise InvalidArgumentError(
                f"{spec.name} arguments",
                f"{len(spec.params)} value(s): {', '.join(spec.params)}",
            )
        return [
            _coerce(kind, raw, position)
            for position, (kind, raw) in enumerate(zip(spec.params, raw_args), start=1)
        ]

    def call(
        self,
        name: str,
        raw_args: Sequence[Any],
        config: FormvalConfig | None = None,
    ) -> bool:
        """Coerce arguments, apply configured options and run a predicate.

        Args:
            name: Predicate name.
            raw_args: Positional arguments, usually strings from the command line.
            config: Supplies values for the predicate's keyword options.

        Returns:
            The predicate's verdict.

        Raises:
            KeyError: If no predicate is registered under ``name``.
            InvalidArgumentError: If the arguments are malformed.
        """
        spec = self.get(name)
        if spec is None:
            raise KeyError(name)

        args = self.coerce_args(spec, raw_args)
        kwargs: dict[str, Any] = {}
        if config is not None:
            for option in spec.options:
                kwargs[option] = getattr(config, OPTION_SOURCES[option])

        return spec.func(*args, **kwargs)


# Global registry instance, built on first use
_global_registry: PredicateRegistry | None = None


def get_global_registry() -> PredicateRegistry:
    """Get the global registry populated with every built-in predicate."""
    global _global_registry
    if _global_registry is None:
        _global_registry = _create_default_registry()
    return _global_registry


def _create_default_registry() -> PredicateRegistry:
    from formval import validators as v

    dates = frozenset({"dayfirst"})
    parens = frozenset({"require_closing_paren"})

    specs = [
        PredicateSpec("is_email_address", v.is_email_address, ("text",), "format", "Email address"),
        PredicateSpec("is_phone_number", v.is_phone_number, ("text",), "format", "10-digit or 7-character phone number"),
        PredicateSpec("is_alphanumeric", v.is_alphanumeric, ("text",), "format", "Only A-Z, a-z and 0-9"),
        PredicateSpec("is_credit_card", v.is_credit_card, ("text",), "format", "16-character card number, dashes ignored"),
        PredicateSpec("is_hex", v.is_hex, ("text",), "format", "#rgb or #rrggbb color"),
        PredicateSpec("is_rgb", v.is_rgb, ("text",), "format", "rgb(r, g, b) color", parens),
        PredicateSpec("is_hsl", v.is_hsl, ("text",), "format", "hsl(h, s, l) color", parens),
        PredicateSpec("is_color", v.is_color, ("text",), "format", "Hex, RGB or HSL color", parens),
        PredicateSpec("is_date", v.is_date, ("text",), "date", "Parses as a date", dates),
        PredicateSpec("is_before_date", v.is_before_date, ("date", "date"), "date", "Strictly before a reference date", dates),
        PredicateSpec("is_after_date", v.is_after_date, ("date", "date"), "date", "Strictly after a reference date", dates),
        PredicateSpec("is_before_today", v.is_before_today, ("date",), "date", "Strictly before now", dates),
        PredicateSpec("is_after_today", v.is_after_today, ("date",), "date", "Strictly after now", dates),
        PredicateSpec("is_empty", v.is_empty, ("text",), "string", "Empty or only whitespace"),
        PredicateSpec("is_trimmed", v.is_trimmed, ("text",), "string", "No leading, trailing or doubled whitespace"),
        PredicateSpec("contains", v.contains, ("text", "tokens"), "string", "Contains any of the words"),
        PredicateSpec("lacks", v.lacks, ("text", "tokens"), "string", "Contains none of the words"),
        PredicateSpec("is_composed_of", v.is_composed_of, ("text", "tokens"), "string", "Covered by the given tokens"),
        PredicateSpec("is_of_length_or_less_than", v.is_of_length_or_less_than, ("text", "number"), "string", "At most n characters"),
        PredicateSpec("is_of_length_or_greater_than", v.is_of_length_or_greater_than, ("text", "number"), "string", "At least n characters"),
        PredicateSpec("less_words_than", v.less_words_than, ("text", "number"), "string", "At most n space-separated words"),
        PredicateSpec("more_words_than", v.more_words_than, ("text", "number"), "string", "At least n space-separated words"),
        PredicateSpec("is_number_between", v.is_number_between, ("number", "number", "number"), "number", "floor <= value <= ceil"),
    ]

    registry = PredicateRegistry()
    for spec in specs:
        registry.register(spec)
    return registry
