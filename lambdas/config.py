import logging
from dataclasses import FrozenInstanceError
from typing import Any, Final, Iterable, TypeVar

LOGGER_NAME: Final[str] = "lambdas"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL: Final[int] = logging.DEBUG

DEFAULT_NUMBER_TEXT: Final[str] = "100"
DEFAULT_WORD: Final[str] = "string"
DEFAULT_FIRST_NAME: Final[str] = "Firstname"
DEFAULT_LAST_NAME: Final[str] = "Lastname"
DEFAULT_ELEMENTS: Final[tuple[str, ...]] = ("First", "Second")
DEFAULT_UNSORTED: Final[tuple[str, ...]] = ("banana", "apple")

F = TypeVar("F", bound="FrozenConfig")


def _as_tuple(value: Iterable[str]) -> tuple[str, ...]:
    if isinstance(value, tuple):
        return value
    if isinstance(value, str):
        return (value,)
    return tuple(value)


class FrozenConfig:
    """
    Base for demo settings: slotted, compared and hashed by field values,
    and never changed in place. Use `replace` to derive a variant.
    """

    __slots__: tuple[str, ...] = ()

    def _items(self) -> tuple[tuple[str, Any], ...]:
        return tuple((name, getattr(self, name)) for name in self.__slots__)

    def replace(self: "F", **changes: Any) -> "F":
        unknown = set(changes).difference(self.__slots__)
        if unknown:
            raise TypeError(f"{type(self).__name__} has no fields {sorted(unknown)}")
        return type(self)(**{**dict(self._items()), **changes})

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._items() == other._items()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._items()))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self._items())
        return f"{type(self).__name__}({fields})"

    def __setattr__(self, name: str, value: Any) -> None:
        raise FrozenInstanceError(f"cannot assign to field {name!r}")

    def __delattr__(self, name: str) -> None:
        raise FrozenInstanceError(f"cannot delete field {name!r}")


class DemoConfig(FrozenConfig):
    """
    Literal inputs fed to the demo routines.
    """

    __slots__ = (
        "number_text",
        "word",
        "first_name",
        "last_name",
        "elements",
        "unsorted",
    )

    number_text: str
    word: str
    first_name: str
    last_name: str
    elements: tuple[str, ...]
    unsorted: tuple[str, ...]

    def __init__(
        self,
        *,
        number_text: str = DEFAULT_NUMBER_TEXT,
        word: str = DEFAULT_WORD,
        first_name: str = DEFAULT_FIRST_NAME,
        last_name: str = DEFAULT_LAST_NAME,
        elements: Iterable[str] = DEFAULT_ELEMENTS,
        unsorted: Iterable[str] = DEFAULT_UNSORTED,
    ):
        object.__setattr__(self, "number_text", number_text)
        object.__setattr__(self, "word", word)
        object.__setattr__(self, "first_name", first_name)
        object.__setattr__(self, "last_name", last_name)
        object.__setattr__(self, "elements", _as_tuple(elements))
        object.__setattr__(self, "unsorted", _as_tuple(unsorted))
