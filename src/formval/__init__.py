"""formval - predicate functions for validating form input."""

from __future__ import annotations

from formval.errors import FormvalError, InvalidArgumentError, error_message
from formval.validators import (
    contains,
    is_after_date,
    is_after_today,
    is_alphanumeric,
    is_before_date,
    is_before_today,
    is_color,
    is_composed_of,
    is_credit_card,
    is_date,
    is_email_address,
    is_empty,
    is_hex,
    is_hsl,
    is_number_between,
    is_of_length_or_greater_than,
    is_of_length_or_less_than,
    is_phone_number,
    is_rgb,
    is_trimmed,
    lacks,
    less_words_than,
    more_words_than,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Errors
    "FormvalError",
    "InvalidArgumentError",
    "error_message",
    # Predicates
    "contains",
    "is_after_date",
    "is_after_today",
    "is_alphanumeric",
    "is_before_date",
    "is_before_today",
    "is_color",
    "is_composed_of",
    "is_credit_card",
    "is_date",
    "is_email_address",
    "is_empty",
    "is_hex",
    "is_hsl",
    "is_number_between",
    "is_of_length_or_greater_than",
    "is_of_length_or_less_than",
    "is_phone_number",
    "is_rgb",
    "is_trimmed",
    "lacks",
    "less_words_than",
    "more_words_than",
]
