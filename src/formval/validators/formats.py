"""Format predicates: contact details, card numbers and color notations."""

from __future__ import annotations

import re

from formval.validators.base import parse_float_prefix, parse_int_prefix, require_text
from formval.validators.strings import is_empty

_PHONE_SEPARATORS = re.compile(r"[-() ]")
_NON_DIGIT = re.compile(r"[^0-9]")
_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")
_NON_HEX = re.compile(r"[^A-Fa-f0-9]")
_WHITESPACE = re.compile(r"\s")


def is_email_address(text: str) -> bool:
    """Check that ``text`` looks like an email address.

    Exactly one ``@`` must separate a non-empty local part from a domain.
    The domain needs a ``.`` after its first character, and the part from
    that dot to the end must be at least three characters long with no
    ``..`` in it.

    Raises:
        InvalidArgumentError: If ``text`` is not a string.
    """
    require_text(text)

    parts = text.split("@")
    if len(parts) != 2:
        return False

    username, domain = parts
    if not username:
        return False

    dot = domain.find(".")
    if dot <= 0:
        return False

    tld = domain[dot:]
    if len(tld) < 3:
        return False

    return ".." not in tld


def is_phone_number(text: str) -> bool:
    """Check that ``text`` is a 10-digit or 7-character phone number.

    Dashes, parentheses and spaces are ignored. A 10-character remainder
    must be all digits; a 7-character remainder is accepted as is.

    Raises:
        InvalidArgumentError: If ``text`` is not a string.
    """
    require_text(text)

    stripped = _PHONE_SEPARATORS.sub("", text)
    if len(stripped) == 10 and not _NON_DIGIT.search(stripped):
        return True
    return len(stripped) == 7


def is_alphanumeric(text: str) -> bool:
    """Check that every character of ``text`` is in ``[A-Za-z0-9]``.

    The empty string passes.
    """
    require_text(text)
    return _NON_ALPHANUMERIC.search(text) is None


def is_credit_card(text: str) -> bool:
    """Check that ``text`` is a 16-character card number, dashes ignored."""
    require_text(text)

    number = text.replace("-", "")
    return not is_empty(number) and is_alphanumeric(number) and len(number) == 16


def is_hex(text: str) -> bool:
    """Check that ``text`` is a ``#rgb`` or ``#rrggbb`` hex color."""
    require_text(text)

    if not text.startswith("#"):
        return False

    digits = text[1:]
    if _NON_HEX.search(digits):
        return False

    return len(digits) in (3, 6)


def _color_fields(text: str, prefix: str, require_closing_paren: bool) -> list[str] | None:
    """Split the body of ``prefix(a,b,c)`` into its comma-separated fields.

    Returns:
        The fields, or None if the prefix is missing, the closing paren is
        required and absent, or there are not exactly three fields.
    """
    if not text.startswith(prefix):
        return None
    if require_closing_paren and not text.endswith(")"):
        return None

    # The final character is dropped whether or not it is ")".
    fields = text[len(prefix) : -1].split(",")
    if len(fields) != 3:
        return None
    return fields


def is_rgb(text: str, *, require_closing_paren: bool = False) -> bool:
    """Check that ``text`` is an ``rgb(r, g, b)`` color.

    Whitespace and the first semicolon are removed first. Each component
    is read as a leading integer and must lie in [0, 255].

    Args:
        text: The string to check.
        require_closing_paren: Also require the text to end with ``)``. Off
            by default, in which case the last character is never inspected.

    Raises:
        InvalidArgumentError: If ``text`` is not a string.
    """
    require_text(text)

    compact = _WHITESPACE.sub("", text).replace(";", "", 1)
    fields = _color_fields(compact, "rgb(", require_closing_paren)
    if fields is None:
        return False

    for field in fields:
        channel = parse_int_prefix(field)
        if channel is None or not 0 <= channel <= 255:
            return False

    return True


def is_hsl(text: str, *, require_closing_paren: bool = False) -> bool:
    """Check that ``text`` is an ``hsl(h, s, l)`` color.

    Unlike ``is_rgb`` no whitespace is removed, so the text must begin with
    ``hsl(`` exactly. Hue is read as an integer in [0, 360]; saturation and
    lightness as fractions in [0, 1].

    Raises:
        InvalidArgumentError: If ``text`` is not a string.
    """
    require_text(text)

    fields = _color_fields(text, "hsl(", require_closing_paren)
    if fields is None:
        return False

    hue = parse_int_prefix(fields[0])
    if hue is None or not 0 <= hue <= 360:
        return False

    for field in fields[1:]:
        fraction = parse_float_prefix(field)
        if fraction is None or not 0 <= fraction <= 1:
            return False

    return True


def is_color(text: str, *, require_closing_paren: bool = False) -> bool:
    """Check whether ``text`` is a hex, RGB or HSL color."""
    require_text(text)

    return (
        is_hex(text)
        or is_rgb(text, require_closing_paren=require_closing_paren)
        or is_hsl(text, require_closing_paren=require_closing_paren)
    )
