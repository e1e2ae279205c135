"""Producer for nested mapping documents (JSON-like data)."""

from collections.abc import Mapping
from typing import Any, List

from ..core.producer import ChildrenProducer


class MappingProducer(ChildrenProducer):
    """Children stored as a list under a key of each mapping.

    A node without the key is a leaf. A value under the key that is not a
    list or tuple is rejected, since it would otherwise be iterated
    character by character or key by key.
    """

    def __init__(self, children_key: str = 'children'):
        self.children_key = children_key

    def get_children(self, element: Any) -> List[Any]:
        if not isinstance(element, Mapping):
            raise TypeError(
                f"Expected a mapping, got {type(element).__name__}"
            )

        children = element.get(self.children_key)
        if children is None:
            return []
        if not isinstance(children, (list, tuple)):
            raise TypeError(
                f"{self.children_key!r} must be a list, got {type(children).__name__}"
            )
        return list(children)

    def __repr__(self) -> str:
        return f"MappingProducer({self.children_key!r})"
