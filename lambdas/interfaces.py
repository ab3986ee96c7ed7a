from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from .utils.typing_utils import C, R, T

In = TypeVar("In")
Out = TypeVar("Out")

IEmptyFactory = Callable[[], R]

Converter = Callable[[In], Out]
"""
### convert a value of type `In` to a value of type `Out`

satisfied by a lambda, a named function or a method reference alike:
```py
to_int: Converter[str, int] = lambda text: int(text)
to_int: Converter[str, int] = parse_int
first: Converter[Word, str] = Word.first_letter
```
"""

PersonFactory = Callable[[str, str], T]
"""
### construct a `T` from a first name and a last name

`Person` itself satisfies `PersonFactory[Person]`
"""

ContainerFactory = IEmptyFactory[C]
"""
### produce a fresh, empty container, e.g. `list`, `set`
"""

Comparator = Callable[[T, T], int]
"""
### three-way comparison, negative, zero or positive
"""


@runtime_checkable
class Addable(Protocol):
    "set-like insertion, `set.add`"

    def add(self, element: Any, /) -> Any: ...


@runtime_checkable
class Appendable(Protocol):
    "list-like insertion, `list.append`"

    def append(self, element: Any, /) -> Any: ...
