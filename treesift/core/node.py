"""TreeNode wrapper for TreeSift.

A TreeNode adapts one raw element of the caller's domain into the uniform
unit that traversers walk. It is intentionally kept simple - the element
is opaque, and knowledge of how to find an element's children lives in
the ChildrenProducer.
"""

from typing import Any, Iterator, List, Optional, Tuple


class TreeNode:
    """A node of a built Tree, wrapping exactly one raw element.

    The element may be None. That is a valid wrapped state: it marks a node
    that carries no element, and consumers check ``has_element`` before
    using it.

    Children are attached by the TreeBuilder only; once the build is over
    they are fixed for the lifetime of the owning Tree.
    """

    def __init__(self, element: Any, parent: Optional['TreeNode'] = None):
        """Wrap an element.

        Args:
            element: The raw element (any value, including None)
            parent: Parent node (None for the root)
        """
        self.element = element
        self.parent = parent
        self.depth = 0 if parent is None else parent.depth + 1
        self._children: List['TreeNode'] = []

    @property
    def has_element(self) -> bool:
        """True unless the wrapped element is None."""
        return self.element is not None

    @property
    def children(self) -> Tuple['TreeNode', ...]:
        """Child nodes in the order the producer returned them."""
        return tuple(self._children)

    def _attach(self, element: Any) -> 'TreeNode':
        child = TreeNode(element, parent=self)
        self._children.append(child)
        return child

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self._children

    def is_root(self) -> bool:
        """Check if this node has no parent."""
        return self.parent is None

    def ancestors(self) -> Iterator['TreeNode']:
        """Yield ancestors, nearest first."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def is_ancestor_of(self, other: 'TreeNode') -> bool:
        """Check if this node is a strict ancestor of ``other``."""
        return any(ancestor is self for ancestor in other.ancestors())

    def path(self) -> List[Any]:
        """Return the elements from the root down to this node."""
        elements = [self.element]
        elements.extend(ancestor.element for ancestor in self.ancestors())
        elements.reverse()
        return elements

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"TreeNode(element={self.element!r}, depth={self.depth})"
