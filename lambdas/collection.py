"""
Filling a container produced by a factory.

The factory is any zero argument callable, usually a class:

>>> init_collection(set, "First", "Second") == {"First", "Second"}
True
>>> init_collection(list, 3, 1, 3)
[3, 1, 3]
"""

from typing import Any, Callable

from .errors import ContainerOperationError, InvalidFactoryError
from .interfaces import Addable, Appendable, ContainerFactory
from .utils.typing_utils import C


def get_adder(factory: Any, container: Any) -> Callable[[Any], Any]:
    """
    Resolve the insertion operation of a container,
    `add` is preferred over `append`.
    """
    if container is None:
        raise InvalidFactoryError(factory, container)

    if isinstance(container, Addable):
        return container.add

    if isinstance(container, Appendable):
        return container.append

    raise InvalidFactoryError(factory, container)


def init_collection(factory: ContainerFactory[C], /, *elements: Any) -> C:
    """
    Call `factory` once and add each of `elements` to the container it produced, in order.

    Elements are never deduplicated here, set-like containers dedup by their own rule.
    Errors raised by `factory` propagate unchanged.
    """
    collection = factory()
    add = get_adder(factory, collection)

    for element in elements:
        try:
            add(element)
        except Exception as e:
            raise ContainerOperationError(collection, element) from e

    return collection
