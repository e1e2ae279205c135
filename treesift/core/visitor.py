"""Search visitors for TreeSift.

A visitor holds the per-node decision of a search and the result it
accumulates; the traverser it runs under supplies the visiting order.
Each visitor instance serves exactly one walk.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..criteria import Criteria
from ..errors import NilParameterError
from .node import TreeNode
from .traverser import (
    BreadthFirstTraverser,
    DepthFirstTraverser,
    TreeTraverser,
    Visit,
)
from .tree import Tree


class SearchVisitor(ABC):
    """Abstract base class for search visitors.

    Nodes shallower than ``min_depth`` are descended into without being
    tested, so with the default of 1 the root itself is never a result.
    """

    traverser_class = BreadthFirstTraverser

    def __init__(self, criteria: Criteria, min_depth: int = 1):
        """Initialize visitor with the criteria to test.

        Args:
            criteria: Criteria every tested node is checked against
            min_depth: Shallowest depth at which nodes are tested
        """
        self.criteria = criteria
        self.min_depth = min_depth

    def __call__(self, node: TreeNode) -> Visit:
        if node is None:
            raise NilParameterError("node")
        if not node.has_element:
            raise NilParameterError("node.element")

        if node.depth < self.min_depth:
            return Visit.DESCEND

        if not self.criteria.matches(node.element):
            return Visit.DESCEND

        return self.on_match(node)

    @abstractmethod
    def on_match(self, node: TreeNode) -> Visit:
        """Record a matching node and decide how the walk goes on."""
        pass

    def run(self, tree: Tree, traverser: Optional[TreeTraverser] = None):
        """Walk ``tree`` with this visitor and return the result."""
        traverser = traverser or self.traverser_class()
        traverser.walk(tree, self)
        return self.result()

    @abstractmethod
    def result(self) -> Any:
        """Return what the walk collected."""
        pass


class CollectAndPruneVisitor(SearchVisitor):
    """Collects the shallowest match along every branch.

    A match is recorded and its subtree skipped; a non-match is descended
    into, since a match may live deeper. Under breadth-first order the
    result is in level order, and no two results are ancestor and
    descendant of each other.
    """

    traverser_class = BreadthFirstTraverser

    def __init__(self, criteria: Criteria, min_depth: int = 1):
        super().__init__(criteria, min_depth)
        self.matches: List[Any] = []

    def on_match(self, node: TreeNode) -> Visit:
        self.matches.append(node.element)
        return Visit.SKIP_SUBTREE

    def result(self) -> List[Any]:
        return self.matches


class FirstMatchVisitor(SearchVisitor):
    """Stops the whole walk at the first match (depth-first by default)."""

    traverser_class = DepthFirstTraverser

    def __init__(self, criteria: Criteria, min_depth: int = 1):
        super().__init__(criteria, min_depth)
        self.match: Any = None

    def on_match(self, node: TreeNode) -> Visit:
        self.match = node.element
        return Visit.HALT

    def result(self) -> Any:
        return self.match


class CountingVisitor(SearchVisitor):
    """Counts every match without pruning."""

    def __init__(self, criteria: Criteria, min_depth: int = 0):
        super().__init__(criteria, min_depth)
        self.count = 0

    def on_match(self, node: TreeNode) -> Visit:
        self.count += 1
        return Visit.DESCEND

    def result(self) -> int:
        return self.count
