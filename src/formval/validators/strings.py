"""String-shape predicates: emptiness, spacing, length, words and tokens."""

from __future__ import annotations

import re
from collections.abc import Sequence

from formval.errors import InvalidArgumentError
from formval.validators.base import Number, require_number, require_text, require_token_list

_NON_SPACE = re.compile(r"\S")
_LEADING_SPACE = re.compile(r"\A\s")
_TRAILING_SPACE = re.compile(r"\s\Z")
_REPEATED_SPACE = re.compile(r"\s{2,}")
_NON_WORD = re.compile(r"\W", re.ASCII)
_WHITESPACE = re.compile(r"\s")


def is_empty(text: str | None) -> bool:
    """Check whether ``text`` is empty or only whitespace.

    ``None`` is not considered empty and returns False.

    Raises:
        InvalidArgumentError: If ``text`` is neither None nor a string.
    """
    if text is None:
        return False
    if not isinstance(text, str):
        raise InvalidArgumentError("input", "string")

    return len(text) == 0 or _NON_SPACE.search(text) is None


def is_trimmed(text: str) -> bool:
    """Check that ``text`` has no leading, trailing or repeated whitespace."""
    require_text(text)

    return not (
        _LEADING_SPACE.search(text)
        or _TRAILING_SPACE.search(text)
        or _REPEATED_SPACE.search(text)
    )


def contains(text: str, words: Sequence[str]) -> bool:
    """Check whether ``text`` contains any of ``words`` as a whole token.

    ``text`` is split on ASCII non-word characters, so accented letters
    also separate tokens, and each token is compared to each word ignoring
    case.

    Args:
        text: The string to search.
        words: Non-empty list of words to look for.

    Returns:
        True on the first token that matches a word.

    Raises:
        InvalidArgumentError: If ``text`` is not a string or ``words`` is not
            a non-empty list of strings.
    """
    require_text(text)
    require_token_list(words, "words")

    wanted = [word.upper() for word in words]
    return any(token.upper() in wanted for token in _NON_WORD.split(text))


def lacks(text: str, words: Sequence[str]) -> bool:
    """Check that ``text`` contains none of ``words``. Negation of ``contains``."""
    return not contains(text, words)


def is_composed_of(text: str, tokens: Sequence[str]) -> bool:
    """Check that ``text`` is covered by ``tokens``, ignoring whitespace and case.

    The scan is greedy: at each position it records the furthest index any
    token starting there could reach, and fails as soon as that index falls
    behind the scan position. It is a reachability check rather than a real
    tiling, so tokens that prefix one another can mislead it, and the reach
    is computed one past the token end.

    Raises:
        InvalidArgumentError: If ``text`` is not a string or ``tokens`` is
            not a non-empty list of strings.
    """
    require_text(text)
    require_token_list(tokens, "tokens")

    compact = _WHITESPACE.sub("", text).upper()
    reach = -1

    for i in range(len(compact)):
        rest = compact[i:]
        for token in tokens:
            if rest.startswith(token.upper()) and i + len(token) + 1 > reach:
                reach = i + len(token) + 1

        if reach < i:
            return False

    return reach >= len(compact)


def is_of_length_or_less_than(text: str, n: Number) -> bool:
    """Check that ``text`` has at most ``n`` characters."""
    require_text(text)
    require_number(n, "n")
    return len(text) <= n


def is_of_length_or_greater_than(text: str, n: Number) -> bool:
    """Check that ``text`` has at least ``n`` characters."""
    require_text(text)
    require_number(n, "n")
    return len(text) >= n


def less_words_than(text: str, n: Number) -> bool:
    """Check that ``text`` has at most ``n`` words.

    Words are separated by single space characters only; tabs and newlines
    do not split, and each extra space adds an empty word.
    """
    require_text(text)
    require_number(n, "n")
    return len(text.split(" ")) <= n


def more_words_than(text: str, n: Number) -> bool:
    """Check that ``text`` has at least ``n`` words, split on single spaces."""
    require_text(text)
    require_number(n, "n")
    return len(text.split(" ")) >= n
