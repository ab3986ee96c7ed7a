from typing import Any, TypeVar

T = TypeVar("T")
R = TypeVar("R")
C = TypeVar("C")


def callable_name(obj: Any) -> str:
    """
    Best effort readable name for a callable, used in error messages.

    >>> callable_name(int)
    'int'
    >>> callable_name(lambda: None)
    '<lambda>'
    """
    return getattr(obj, "__qualname__", None) or getattr(obj, "__name__", repr(obj))
