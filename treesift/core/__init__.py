"""Core abstractions for TreeSift.

This module contains the node wrapper, the children producer contract,
the tree builder, the traversers and the search visitors.
"""

from .node import TreeNode
from .producer import ChildrenProducer, FunctionProducer, as_producer
from .tree import Tree, TreeBuilder
from .traverser import (
    Visit,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstTraverser,
    create_traverser,
)
from .visitor import (
    SearchVisitor,
    CollectAndPruneVisitor,
    FirstMatchVisitor,
    CountingVisitor,
)

__all__ = [
    "TreeNode",
    "ChildrenProducer",
    "FunctionProducer",
    "as_producer",
    "Tree",
    "TreeBuilder",
    "Visit",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstTraverser",
    "create_traverser",
    "SearchVisitor",
    "CollectAndPruneVisitor",
    "FirstMatchVisitor",
    "CountingVisitor",
]
