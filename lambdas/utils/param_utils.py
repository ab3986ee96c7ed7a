from enum import Enum
from typing import Literal, Union

from typing_extensions import TypeGuard

from .typing_utils import T


class Unset(Enum):
    """
    Marks an argument the caller left out, so `None` stays a usable value.
    """

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return self.value

    def __bool__(self) -> Literal[False]:
        return False


UNSET = Unset.UNSET

Unsettable = Union[T, Literal[Unset.UNSET]]
"Unsettable[DemoConfig] is a DemoConfig or UNSET"


def is_set(value: Unsettable[T]) -> TypeGuard[T]:
    return value is not UNSET
