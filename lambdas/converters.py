from functools import cmp_to_key
from typing import Any, Iterable

from .errors import ParseError
from .interfaces import Comparator


def parse_int(text: Any) -> int:
    """
    Parse a decimal integer literal with an optional sign.

    Only strings are accepted, surrounding whitespace and digit separators are rejected.

    >>> parse_int("100")
    100
    """
    if not isinstance(text, str) or text != text.strip() or "_" in text:
        raise ParseError(text, int)

    try:
        return int(text)
    except ValueError as e:
        raise ParseError(text, int) from e


def compare(a: str, b: str) -> int:
    "lexicographic three-way comparison"
    return (a > b) - (a < b)


def sort_strings(items: Iterable[str], comparator: Comparator[str]) -> list[str]:
    """
    Return a new list of `items` ordered by a two-argument comparator.
    """
    return sorted(items, key=cmp_to_key(comparator))
