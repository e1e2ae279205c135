"""TreeSift - Staged structural search over any hierarchy.

TreeSift builds an immutable tree over an arbitrary hierarchical source
(HTML/XML documents, JSON, directories, graphs, custom data) from a
caller-supplied children producer, and searches it:

    from treesift import build_tree, collect_and_prune, extract_nodes

    tree = build_tree(document, producer)
    sections = collect_and_prune(tree, is_section)

    # Cascading search: cells of rows of tables
    cells = extract_nodes(document, producer, is_table, is_row, is_cell)
"""

__version__ = "0.1.0"

from .errors import (
    TreeSiftError,
    NilParameterError,
    BuildFailureError,
    TraversalFailureError,
    ConfigurationError,
    PredicateRequiredError,
)
from .config import SearchConfig, DepthConfig, CacheConfig, TraversalStrategy
from .criteria import (
    Criteria,
    CriteriaBuilder,
    WILDCARD,
    as_criteria,
    drop_absent,
)
from .core import (
    TreeNode,
    ChildrenProducer,
    FunctionProducer,
    as_producer,
    Tree,
    TreeBuilder,
    Visit,
    BreadthFirstTraverser,
    DepthFirstTraverser,
    create_traverser,
    CollectAndPruneVisitor,
    FirstMatchVisitor,
    CountingVisitor,
)
from .cascade import CascadingSearch
from .api import (
    build_tree,
    collect_and_prune,
    first_match,
    direct_children_matching,
    extract_nodes,
    walk_tree,
    count_matches,
)

__all__ = [
    "__version__",
    # Errors
    "TreeSiftError",
    "NilParameterError",
    "BuildFailureError",
    "TraversalFailureError",
    "ConfigurationError",
    "PredicateRequiredError",
    # Config
    "SearchConfig",
    "DepthConfig",
    "CacheConfig",
    "TraversalStrategy",
    # Criteria
    "Criteria",
    "CriteriaBuilder",
    "WILDCARD",
    "as_criteria",
    "drop_absent",
    # Core
    "TreeNode",
    "ChildrenProducer",
    "FunctionProducer",
    "as_producer",
    "Tree",
    "TreeBuilder",
    "Visit",
    "BreadthFirstTraverser",
    "DepthFirstTraverser",
    "create_traverser",
    "CollectAndPruneVisitor",
    "FirstMatchVisitor",
    "CountingVisitor",
    "CascadingSearch",
    # API
    "build_tree",
    "collect_and_prune",
    "first_match",
    "direct_children_matching",
    "extract_nodes",
    "walk_tree",
    "count_matches",
]
