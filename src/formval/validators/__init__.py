"""Validation predicates.

Every predicate returns True or False for well-formed input and raises
``InvalidArgumentError`` when called with a missing or wrongly typed
argument.
"""

from __future__ import annotations

from formval.validators.dates import (
    is_after_date,
    is_after_today,
    is_before_date,
    is_before_today,
    is_date,
)
from formval.validators.formats import (
    is_alphanumeric,
    is_color,
    is_credit_card,
    is_email_address,
    is_hex,
    is_hsl,
    is_phone_number,
    is_rgb,
)
from formval.validators.numbers import is_number_between
from formval.validators.strings import (
    contains,
    is_composed_of,
    is_empty,
    is_of_length_or_greater_than,
    is_of_length_or_less_than,
    is_trimmed,
    lacks,
    less_words_than,
    more_words_than,
)

__all__ = [
    # Formats
    "is_alphanumeric",
    "is_color",
    "is_credit_card",
    "is_email_address",
    "is_hex",
    "is_hsl",
    "is_phone_number",
    "is_rgb",
    # Dates
    "is_after_date",
    "is_after_today",
    "is_before_date",
    "is_before_today",
    "is_date",
    # Strings
    "contains",
    "is_composed_of",
    "is_empty",
    "is_of_length_or_greater_than",
    "is_of_length_or_less_than",
    "is_trimmed",
    "lacks",
    "less_words_than",
    "more_words_than",
    # Numbers
    "is_number_between",
]
