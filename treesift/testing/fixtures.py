"""Test fixtures for TreeSift consumers.

These fixtures provide small, fully controlled sources and instrumented
predicates/producers, so tests can assert not only what a search returns
but also what it evaluated along the way.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional

from ..core.producer import ChildrenProducer, ProducerLike, as_producer
from ..criteria import Criteria


class NamedNode:
    """A minimal document node: a name and an ordered list of children.

    Example:
        root = named_tree({'root': {'a': {'a1': {}, 'a2': {}}, 'b': {}}})
        root.children[0].name  # 'a'
    """

    def __init__(self, name: str, children: Optional[List['NamedNode']] = None):
        self.name = name
        self.children = list(children or [])

    def find(self, name: str) -> Optional['NamedNode']:
        """Return the first node called ``name`` in this subtree (pre-order)."""
        if self.name == name:
            return self
        for child in self.children:
            found = child.find(name)
            if found is not None:
                return found
        return None

    def __repr__(self) -> str:
        return f"NamedNode({self.name!r})"


def named_tree(layout: Dict[str, Any]) -> NamedNode:
    """Build NamedNodes from a nested dict with exactly one top-level key.

    Each key is a node name, each value the dict of its children.
    """
    if len(layout) != 1:
        raise ValueError("named_tree expects exactly one root")
    (name, children), = layout.items()
    return _named(name, children)


def _named(name: str, children: Dict[str, Any]) -> NamedNode:
    return NamedNode(name, [_named(key, value) for key, value in children.items()])


def named_children(node: NamedNode) -> List[NamedNode]:
    """Producer function for NamedNode trees."""
    return node.children


def names(elements: Iterable[Any]) -> List[str]:
    """Map NamedNodes to their names, for readable assertions."""
    return [element.name for element in elements]


class RecordingPredicate(Criteria):
    """Criteria that records every element it was evaluated on.

    Example:
        never = RecordingPredicate(lambda n: False)
        extract_nodes(root, named_children, no_match, never)
        assert never.calls == []
    """

    def __init__(self, predicate: Callable[[Any], bool], description: Optional[str] = None):
        self.calls: List[Any] = []

        def recording(element: Any) -> bool:
            self.calls.append(element)
            return predicate(element)

        super().__init__(recording, description=description or 'recording')

    @property
    def was_called(self) -> bool:
        return bool(self.calls)


class RecordingProducer(ChildrenProducer):
    """Producer that records the elements it was asked to expand."""

    def __init__(self, base_producer: ProducerLike):
        self._producer = as_producer(base_producer)
        self.calls: List[Any] = []

    def get_children(self, element: Any) -> Iterable[Any]:
        self.calls.append(element)
        return self._producer(element)


class FailingProducer(ChildrenProducer):
    """Producer that raises ``error`` when asked for the children of ``fail_on``."""

    def __init__(self, base_producer: ProducerLike, fail_on: Callable[[Any], bool],
                 error: Optional[Exception] = None):
        self._producer = as_producer(base_producer)
        self.fail_on = fail_on
        self.error = error or OSError("children unavailable")

    def get_children(self, element: Any) -> Iterable[Any]:
        if self.fail_on(element):
            raise self.error
        return self._producer(element)
