"""Producer for DOM-style node models.

Many document models (HTML DOMs in particular) do not store a list of
children. Instead each node points at its first child, and each child at
its next sibling. SiblingChainProducer walks that chain.
"""

from typing import Any, Iterator

from ..core.producer import ChildrenProducer


class SiblingChainProducer(ChildrenProducer):
    """Yields children by following first-child / next-sibling links.

    Example:
        producer = SiblingChainProducer('FirstChild', 'NextSibling')
        tree = build_tree(document, producer)
    """

    def __init__(self,
                 first_child: str = 'first_child',
                 next_sibling: str = 'next_sibling'):
        """Initialize producer with the link attribute names.

        Args:
            first_child: Attribute holding a node's first child (or None)
            next_sibling: Attribute holding a node's next sibling (or None)
        """
        self.first_child = first_child
        self.next_sibling = next_sibling

    def get_children(self, element: Any) -> Iterator[Any]:
        child = getattr(element, self.first_child)
        while child is not None:
            yield child
            child = getattr(child, self.next_sibling)

    def __repr__(self) -> str:
        return f"SiblingChainProducer({self.first_child!r}, {self.next_sibling!r})"
