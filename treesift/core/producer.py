"""ChildrenProducer abstraction for TreeSift.

The ChildrenProducer is what makes TreeSift work with any hierarchical
source. It knows HOW to find the children of one raw element of a given
domain (a DOM node, an XML element, a directory, a graph vertex), while
the builder and traversers stay independent of that domain.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Union

from ..errors import NilParameterError


class ChildrenProducer(ABC):
    """Abstract producer of the ordered children of a raw element.

    Subclasses implement ``get_children``. Callers (the TreeBuilder) invoke
    the producer through ``__call__``, which rejects a missing element
    before delegating, so "structurally empty" (no children) and "invalid
    input" (no element) stay distinguishable.
    """

    def __call__(self, element: Any) -> Iterable[Any]:
        if element is None:
            raise NilParameterError("element")
        return self.get_children(element)

    @abstractmethod
    def get_children(self, element: Any) -> Iterable[Any]:
        """Return the ordered children of an element.

        Args:
            element: The parent element (never None)

        Returns:
            Iterable of child elements, possibly empty

        Raises:
            Any exception to signal that the children cannot be produced.
            The builder reports it as a BuildFailureError.
        """
        pass


class FunctionProducer(ChildrenProducer):
    """Producer backed by a plain callable ``element -> iterable``."""

    def __init__(self, func: Callable[[Any], Iterable[Any]]):
        self.func = func

    def get_children(self, element: Any) -> Iterable[Any]:
        return self.func(element)

    def __repr__(self) -> str:
        name = getattr(self.func, '__name__', repr(self.func))
        return f"FunctionProducer({name})"


ProducerLike = Union[ChildrenProducer, Callable[[Any], Iterable[Any]]]


def as_producer(producer: ProducerLike) -> ChildrenProducer:
    """Coerce a producer or plain callable into a ChildrenProducer.

    Args:
        producer: ChildrenProducer instance or callable

    Returns:
        ChildrenProducer instance

    Raises:
        TypeError: If producer is None or not callable
    """
    if isinstance(producer, ChildrenProducer):
        return producer
    if producer is None or not callable(producer):
        raise TypeError(
            f"A children producer is required, got {producer!r}"
        )
    return FunctionProducer(producer)
