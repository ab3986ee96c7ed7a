from typing import Any

from .utils.typing_utils import callable_name


class LambdasError(Exception):
    """
    Base class for all lambdas exceptions.
    """

    def __init__(self, message: str, /):
        self.message = message
        super().__init__(self.message)


# =============== Conversion Errors ===============


class ParseError(LambdasError, ValueError):
    """
    Raised when a string can't be parsed into the requested value.
    """

    def __init__(self, text: Any, target: type = int):
        self.text = text
        self.target = target
        super().__init__(f"Unable to parse {text!r} as {target.__name__}")


# =============== Collection Errors ===============


class CollectionError(LambdasError):
    """
    Base class for all collection initializing exceptions.
    """


class InvalidFactoryError(CollectionError):
    """
    Raised when a container factory does not produce a container
    that elements can be added to.
    """

    def __init__(self, factory: Any, produced: Any):
        self.factory = factory
        self.produced = produced
        super().__init__(
            f"Factory {callable_name(factory)} produced {produced!r}, expected a container with `add` or `append`"
        )


class ContainerOperationError(CollectionError):
    """
    Raised when a container rejects an element,
    the underlying exception is available as `__cause__`.
    """

    def __init__(self, container: Any, element: Any):
        self.container = container
        self.element = element
        super().__init__(
            f"{type(container).__name__} rejected element {element!r}"
        )
