"""Caching producer for TreeSift.

Provides a transparent caching layer that can wrap any children producer.
A cascading search rebuilds a tree under every match of the previous
stage, and those subtrees were already expanded once; caching the child
lists lets the rebuild skip the producer.
"""

from typing import Any, Iterable

from cachetools import LRUCache

from ..core.producer import ChildrenProducer, ProducerLike, as_producer


class CachingProducer(ChildrenProducer):
    """
    Memoizes the child lists of a base producer by element identity.

    Elements are keyed by ``id()`` so unhashable elements can be cached.
    The element itself is stored next to its children and compared on
    lookup, so a recycled id never returns another element's children.

    Example:
        producer = CachingProducer(SiblingChainProducer(), max_size=10000)
        results = extract_nodes(document, producer, is_table, is_cell)
    """

    def __init__(self, base_producer: ProducerLike, max_size: int = 4096):
        """
        Initialize caching producer.

        Args:
            base_producer: The producer to wrap
            max_size: Maximum number of child lists kept
        """
        self._producer = as_producer(base_producer)
        self._cache = LRUCache(maxsize=max_size)

        # Statistics
        self.hits = 0
        self.misses = 0

    def get_children(self, element: Any) -> Iterable[Any]:
        key = id(element)
        entry = self._cache.get(key)
        if entry is not None and entry[0] is element:
            self.hits += 1
            return entry[1]

        self.misses += 1
        children = self._producer(element)
        children = tuple(children) if children is not None else ()
        self._cache[key] = (element, children)
        return children

    def clear(self) -> None:
        """Drop all cached child lists and reset statistics."""
        self._cache.clear()
        self.hits = 0
        self.misses = 0

    def get_base_producer(self) -> ChildrenProducer:
        """Return the wrapped producer."""
        return self._producer

    def get_cache_stats(self) -> dict:
        """
        Get cache statistics.

        Returns:
            Dictionary with hits, misses, size and hit rate
        """
        total = self.hits + self.misses
        return {
            'hits': self.hits,
            'misses': self.misses,
            'size': len(self._cache),
            'max_size': self._cache.maxsize,
            'hit_rate': self.hits / total if total else 0.0,
        }

    def __repr__(self) -> str:
        return f"CachingProducer({self._producer!r}, max_size={self._cache.maxsize})"
