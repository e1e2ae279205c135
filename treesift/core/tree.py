"""Tree construction for TreeSift.

A Tree is built eagerly, once, by repeatedly asking a ChildrenProducer for
the children of every frontier node, and is immutable afterwards. Searches
then walk the finished tree as many times as they like.
"""

import logging
from collections import deque
from typing import Any, Deque, Iterator, List, Optional, Tuple

from ..errors import BuildFailureError, NilParameterError
from .node import TreeNode
from .producer import ChildrenProducer, ProducerLike, as_producer

logger = logging.getLogger(__name__)


class Tree:
    """An immutable tree of TreeNodes with exactly one root.

    Use ``Tree.build`` or a TreeBuilder to create one; the constructor only
    takes ownership of an already built root.
    """

    def __init__(self, root: TreeNode, size: int):
        self._root = root
        self._size = size

    @classmethod
    def build(cls,
              root_element: Any,
              producer: ProducerLike,
              max_depth: Optional[int] = None) -> 'Tree':
        """Build a tree from a root element.

        Args:
            root_element: Element wrapped as the root node
            producer: ChildrenProducer or callable returning child elements
            max_depth: Nodes at this depth are not expanded (None = unlimited)

        Returns:
            The built Tree

        Raises:
            NilParameterError: If a node without element would be expanded,
                or the producer itself rejected a missing value
            BuildFailureError: If the producer fails
        """
        return TreeBuilder(producer, max_depth=max_depth).build(root_element)

    @property
    def root(self) -> TreeNode:
        """The root node."""
        return self._root

    def get_direct_children(self) -> Tuple[TreeNode, ...]:
        """Return the immediate children of the root."""
        return self._root.children

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[TreeNode]:
        """Iterate nodes in breadth-first order."""
        queue: Deque[TreeNode] = deque([self._root])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children)

    def elements(self) -> List[Any]:
        """Return every element in breadth-first order."""
        return [node.element for node in self]

    def height(self) -> int:
        """Return the depth of the deepest node (0 for a lone root)."""
        return max(node.depth for node in self)

    def __repr__(self) -> str:
        return f"Tree(root={self._root.element!r}, size={self._size})"


class TreeBuilder:
    """Eagerly materializes a Tree from a root element.

    Nodes are expanded in breadth-first order. The builder performs no
    cycle detection: a producer that yields an ancestor again never
    terminates unless ``max_depth`` bounds the walk.
    """

    def __init__(self, producer: ProducerLike, max_depth: Optional[int] = None):
        """Initialize builder with a producer.

        Args:
            producer: ChildrenProducer or callable returning child elements
            max_depth: Nodes at this depth are not expanded (None = unlimited)
        """
        self.producer: ChildrenProducer = as_producer(producer)
        self.max_depth = max_depth

    def build(self, root_element: Any) -> Tree:
        """Build a tree rooted at ``root_element``.

        Returns:
            The built Tree

        Raises:
            NilParameterError: If a node without element would be expanded
            BuildFailureError: If the producer fails with anything else,
                TreeSift errors included; no partial tree is returned
        """
        root = TreeNode(root_element)
        frontier: Deque[TreeNode] = deque([root])
        size = 1

        while frontier:
            node = frontier.popleft()
            if self.max_depth is not None and node.depth >= self.max_depth:
                continue

            for element in self._children_of(node):
                frontier.append(node._attach(element))
                size += 1

        logger.debug("Built tree rooted at %r with %d nodes", root_element, size)
        return Tree(root, size)

    def _children_of(self, node: TreeNode) -> List[Any]:
        if not node.has_element:
            raise NilParameterError("node.element")

        try:
            children = self.producer(node.element)
            # Materialize here so errors raised by lazy producers are caught
            return [] if children is None else list(children)
        except NilParameterError:
            raise
        except Exception as e:
            raise BuildFailureError(node.element, e) from e
