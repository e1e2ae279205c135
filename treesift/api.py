"""High-level API for TreeSift.

This module provides simple, functional interfaces for the common
searches. These functions wrap the object-oriented API (TreeBuilder,
visitors, CascadingSearch) for ease of use in simple cases.
"""

from typing import Any, Iterator, List, Optional, Union

from .cascade import CascadingSearch
from .config import SearchConfig, TraversalStrategy
from .core.producer import ProducerLike
from .core.traverser import Visit, create_traverser
from .core.tree import Tree, TreeBuilder
from .core.visitor import CollectAndPruneVisitor, CountingVisitor, FirstMatchVisitor
from .criteria import WILDCARD, Criteria, CriteriaLike, as_criteria
from .errors import PredicateRequiredError


def _criteria_or_wildcard(predicate: Optional[CriteriaLike]) -> Criteria:
    criteria = as_criteria(predicate)
    return WILDCARD if criteria is None else criteria


def build_tree(root_element: Any,
               producer: ProducerLike,
               max_depth: Optional[int] = None) -> Tree:
    """Build a tree over a hierarchical source.

    Args:
        root_element: Element wrapped as the root node
        producer: ChildrenProducer or callable returning child elements
        max_depth: Nodes at this depth are not expanded (None = unlimited)

    Returns:
        The built Tree

    Example:
        >>> tree = build_tree(document, SiblingChainProducer())
        >>> tree.root.element is document
        True
    """
    return TreeBuilder(producer, max_depth=max_depth).build(root_element)


def collect_and_prune(tree: Tree, predicate: CriteriaLike, min_depth: int = 1) -> List[Any]:
    """Breadth-first search collecting the shallowest match of every branch.

    Matching nodes are collected and their subtrees are not searched, so
    no result is an ancestor of another.

    Args:
        tree: Tree to search
        predicate: Criteria or callable; required
        min_depth: Shallowest depth tested (1 = strict descendants of the root)

    Returns:
        Matching elements in breadth-first order

    Raises:
        PredicateRequiredError: If predicate is None
        NilParameterError: If a visited node carries no element
        TraversalFailureError: If the predicate raises
    """
    criteria = as_criteria(predicate)
    if criteria is None:
        raise PredicateRequiredError("collect_and_prune requires a predicate")
    return CollectAndPruneVisitor(criteria, min_depth=min_depth).run(tree)


def first_match(tree: Tree,
                predicate: Optional[CriteriaLike] = None,
                min_depth: int = 1) -> Optional[Any]:
    """Depth-first search for the first matching element.

    The whole walk stops at the first match. A missing predicate matches
    every node, so the first node at ``min_depth`` in pre-order is
    returned.

    Returns:
        The first matching element, or None if nothing matches
    """
    criteria = _criteria_or_wildcard(predicate)
    return FirstMatchVisitor(criteria, min_depth=min_depth).run(tree)


def direct_children_matching(tree: Tree, predicate: Optional[CriteriaLike] = None) -> List[Any]:
    """Filter the root's immediate children without recursing.

    Returns:
        Matching children in their original order (empty if the root has none)
    """
    criteria = _criteria_or_wildcard(predicate)
    return [
        node.element
        for node in tree.get_direct_children()
        if criteria.matches(node.element)
    ]


def extract_nodes(root_element: Any,
                  producer: ProducerLike,
                  *criteria: Optional[CriteriaLike],
                  config: Optional[SearchConfig] = None) -> List[Any]:
    """Cascading multi-stage search.

    Stage 1 collects the shallowest matches of ``criteria[0]`` below the
    root; every following stage searches below each match of the previous
    one. Stops early, with an empty result, as soon as a stage matches
    nothing.

    Example:
        >>> extract_nodes(html_root, SiblingChainProducer(), is_table, is_cell)
    """
    return CascadingSearch(producer, config).run(root_element, *criteria)


def walk_tree(tree: Tree,
              strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST
              ) -> Iterator[Any]:
    """Return an iterator over every element of a tree in the order of ``strategy``.

    The walk runs eagerly, so traversal errors surface from this call.
    """
    visited: List[Any] = []

    def visit(node):
        visited.append(node.element)
        return Visit.DESCEND

    create_traverser(strategy).walk(tree, visit)
    return iter(visited)


def count_matches(tree: Tree, predicate: Optional[CriteriaLike] = None) -> int:
    """Count every matching node, root included, without pruning."""
    return CountingVisitor(_criteria_or_wildcard(predicate)).run(tree)
