"""Cascading multi-stage search for TreeSift.

A cascading search narrows a document in stages: find the nodes matching
the first criteria, then among each match's descendants find the nodes
matching the second, and so on. Between stages a fresh tree is built
under every surviving match, so each stage is an independent search over
independent trees.
"""

import logging
from typing import Any, List, Optional

from .adapters.caching import CachingProducer
from .config import SearchConfig
from .core.producer import ChildrenProducer, ProducerLike, as_producer
from .core.tree import Tree, TreeBuilder
from .core.visitor import CollectAndPruneVisitor
from .criteria import Criteria, CriteriaLike, drop_absent
from .errors import (
    BuildFailureError,
    ConfigurationError,
    TraversalFailureError,
    TreeSiftError,
)

logger = logging.getLogger(__name__)


class CascadingSearch:
    """Validated, reusable cascading search over one kind of source.

    The instance holds only the producer and the configuration; every run
    builds its own trees (and its own cache, if enabled), so runs never
    share state.

    Example:
        >>> search = CascadingSearch(SiblingChainProducer(), SearchConfig.cached())
        >>> cells = search.run(document, is_table, is_row, is_cell)
    """

    def __init__(self, producer: ProducerLike, config: Optional[SearchConfig] = None):
        """Create and validate a cascading search.

        Args:
            producer: ChildrenProducer or callable returning child elements
            config: Search configuration (defaults to SearchConfig())

        Raises:
            ConfigurationError: If the configuration does not validate
        """
        self.producer: ChildrenProducer = as_producer(producer)
        self.config = config or SearchConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

    def run(self, root_element: Any, *criteria: Optional[CriteriaLike]) -> List[Any]:
        """Run every stage and return the surviving elements.

        Absent (None) criteria are dropped. With no criteria left the result
        is empty: a search without stages narrows nothing, and returning the
        whole document instead would hide the mistake.

        Args:
            root_element: Element the first stage searches below
            *criteria: One criteria per stage, in order

        Returns:
            Elements matched by the last stage, in stage order

        Raises:
            NilParameterError: If the root element is None
            BuildFailureError: If building a tree fails; stage rebuilds are
                annotated with the stage and the 1-based element ordinal
            TraversalFailureError: If a criteria raises, annotated with the stage
        """
        stages = drop_absent(criteria)
        if not stages:
            return []

        builder = self._create_builder()
        working_set = [builder.build(root_element)]

        for stage, stage_criteria in enumerate(stages, start=1):
            matches = self._collect(working_set, stage_criteria, stage)

            logger.debug(
                "Stage %d/%d (%s): %d trees, %d matches",
                stage, len(stages), stage_criteria.description,
                len(working_set), len(matches),
            )

            if not matches:
                return []

            working_set = self._rebuild(builder, matches, stage)

        return [tree.root.element for tree in working_set]

    def _create_builder(self) -> TreeBuilder:
        producer = self.producer
        if self.config.cache.enabled:
            producer = CachingProducer(producer, max_size=self.config.cache.max_size)
        return TreeBuilder(producer, max_depth=self.config.depth.max_depth)

    def _collect(self, working_set: List[Tree], criteria: Criteria, stage: int) -> List[Any]:
        matches: List[Any] = []
        for tree in working_set:
            visitor = CollectAndPruneVisitor(criteria, min_depth=self.config.depth.min_depth)
            try:
                matches.extend(visitor.run(tree))
            except TraversalFailureError as e:
                raise e.at(stage) from e.cause
        return matches

    def _rebuild(self, builder: TreeBuilder, matches: List[Any], stage: int) -> List[Tree]:
        working_set = []
        for ordinal, element in enumerate(matches, start=1):
            try:
                working_set.append(builder.build(element))
            except BuildFailureError as e:
                raise e.at(stage, ordinal) from e.cause
            except TreeSiftError as e:
                raise BuildFailureError(element, e, stage=stage, ordinal=ordinal) from e
        return working_set

    def __repr__(self) -> str:
        return f"CascadingSearch({self.producer!r}, {self.config!r})"
