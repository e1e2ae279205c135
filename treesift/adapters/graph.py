"""Weighted adjacency-matrix graph for TreeSift.

A small graph utility: it stores edge weights between vertices and lists
neighbours. It performs no traversal algorithms of its own; to search it,
build a tree over it with ``make_tree`` (adjacency used as children).
"""

from typing import Any, Callable, List, Optional, Sequence, Tuple

from ..core.producer import ChildrenProducer
from ..core.tree import Tree

WeightFunc = Callable[[Any, Any], Optional[float]]


class WeightedGraph:
    """A directed graph stored as an adjacency matrix of weights.

    ``weight_func(from, to)`` returns the weight of the edge, or None when
    there is no edge. Vertices are compared with ``==``.

    Example:
        >>> graph = WeightedGraph(['a', 'b', 'c'], lambda f, t: 1.0 if f < t else None)
        >>> graph.adjacent_of('a')
        ['b', 'c']
    """

    def __init__(self, vertices: Sequence[Any], weight_func: WeightFunc):
        self._vertices: List[Any] = list(vertices)
        self._edges: List[List[Optional[float]]] = [
            [weight_func(source, target) for target in self._vertices]
            for source in self._vertices
        ]

    @property
    def vertices(self) -> Tuple[Any, ...]:
        return tuple(self._vertices)

    @property
    def edges(self) -> Tuple[Tuple[Optional[float], ...], ...]:
        """The adjacency matrix; None marks a missing edge."""
        return tuple(tuple(row) for row in self._edges)

    def index_of(self, vertex: Any) -> int:
        """Return the index of ``vertex``, or -1 if it is not in the graph."""
        for index, candidate in enumerate(self._vertices):
            if candidate == vertex:
                return index
        return -1

    def adjacent_of(self, vertex: Any) -> List[Any]:
        """Return the vertices reachable by one edge from ``vertex``.

        Returns an empty list for a vertex that is not in the graph.
        """
        index = self.index_of(vertex)
        if index == -1:
            return []
        return [
            self._vertices[j]
            for j, weight in enumerate(self._edges[index])
            if weight is not None
        ]

    def get_edge(self, source: Any, target: Any) -> Optional[float]:
        """Return the weight of the edge ``source -> target``, or None."""
        i = self.index_of(source)
        j = self.index_of(target)
        if i == -1 or j == -1:
            return None
        return self._edges[i][j]

    def producer(self) -> 'GraphProducer':
        """Return a producer that uses adjacency as children."""
        return GraphProducer(self)

    def make_tree(self, root: Any, max_depth: Optional[int] = None) -> Tree:
        """Build the tree of paths starting at ``root``.

        The builder has no cycle detection; for graphs with cycles pass
        ``max_depth`` to bound the walk.
        """
        return Tree.build(root, self.producer(), max_depth=max_depth)

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"WeightedGraph(vertices={len(self._vertices)})"


class GraphProducer(ChildrenProducer):
    """Children of a vertex are its adjacent vertices, in vertex order."""

    def __init__(self, graph: WeightedGraph):
        self.graph = graph

    def get_children(self, element: Any) -> List[Any]:
        return self.graph.adjacent_of(element)
