"""Tree traversal strategies for TreeSift.

Traversers decide the ORDER in which nodes of a built Tree are visited.
What happens at each node is decided by a visitor, which answers every
visit with an explicit Visit outcome instead of a boolean convention.
"""

from abc import ABC, abstractmethod
from collections import deque
from enum import Enum
from typing import Callable, Deque, List, Union

from ..config import TraversalStrategy
from ..errors import TraversalFailureError, TreeSiftError
from .node import TreeNode
from .tree import Tree


class Visit(Enum):
    """Outcome of visiting one node."""
    DESCEND = "descend"              # Continue into this node's children
    SKIP_SUBTREE = "skip_subtree"    # Do not enter this node's children
    HALT = "halt"                    # Stop the whole traversal


VisitorFunc = Callable[[TreeNode], Visit]


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies.

    Subclasses implement ``walk``; ``_visit`` takes care of turning visitor
    failures into TraversalFailureError.
    """

    @abstractmethod
    def walk(self, tree: Tree, visitor: VisitorFunc) -> None:
        """Visit the nodes of ``tree`` until exhausted or halted.

        Args:
            tree: The tree to walk
            visitor: Called once per visited node

        Raises:
            TreeSiftError: Raised by the visitor, propagated unchanged
            TraversalFailureError: If the visitor raised anything else
        """
        pass

    def _visit(self, visitor: VisitorFunc, node: TreeNode) -> Visit:
        try:
            outcome = visitor(node)
        except TreeSiftError:
            raise
        except Exception as e:
            raise TraversalFailureError(e) from e

        if not isinstance(outcome, Visit):
            error = TypeError(f"Visitor returned {outcome!r}, expected a Visit")
            raise TraversalFailureError(error) from error
        return outcome


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    Visits all nodes at depth N before nodes at depth N+1. Skipping a
    subtree leaves already queued siblings and cousins untouched.
    """

    def walk(self, tree: Tree, visitor: VisitorFunc) -> None:
        queue: Deque[TreeNode] = deque([tree.root])

        while queue:
            node = queue.popleft()
            outcome = self._visit(visitor, node)

            if outcome is Visit.HALT:
                return
            if outcome is Visit.DESCEND:
                queue.extend(node.children)


class DepthFirstTraverser(TreeTraverser):
    """Depth-first pre-order traversal.

    Visits a parent before its children, children in order. Uses an
    explicit stack so deep trees do not hit the recursion limit.
    """

    def walk(self, tree: Tree, visitor: VisitorFunc) -> None:
        stack: List[TreeNode] = [tree.root]

        while stack:
            node = stack.pop()
            outcome = self._visit(visitor, node)

            if outcome is Visit.HALT:
                return
            if outcome is Visit.DESCEND:
                # Reversed so the first child is popped first
                stack.extend(reversed(node.children))


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or name (bfs, breadth_first, dfs, depth_first)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs': DepthFirstTraverser,
        'depth_first': DepthFirstTraverser,
    }

    if isinstance(strategy, TraversalStrategy):
        strategy = strategy.value

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
