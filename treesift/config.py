"""Configuration system for TreeSift.

This module defines how users tune a search: how deep trees are built,
from which depth matches are accepted, and whether child lists are cached
between the stages of a cascading search.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class TraversalStrategy(Enum):
    """How to walk a built tree."""
    BREADTH_FIRST = "bfs"    # Level by level
    DEPTH_FIRST = "dfs"      # Parent before children, pre-order


@dataclass
class DepthConfig:
    """Depth bounds for building and searching trees."""

    min_depth: int = 1                  # Shallowest depth tested by a search
    max_depth: Optional[int] = None     # Deepest depth expanded by the builder


@dataclass
class CacheConfig:
    """Caching of produced child lists during one cascading search."""

    enabled: bool = False
    max_size: int = 4096    # Elements whose child lists are kept


@dataclass
class SearchConfig:
    """Complete configuration for a cascading search.

    Validated by CascadingSearch on construction.
    """

    depth: DepthConfig = field(default_factory=DepthConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'SearchConfig':
        """Create config that only builds trees down to max_depth.

        Args:
            max_depth: Deepest level expanded (default 1 = immediate children)

        Returns:
            SearchConfig bounded in depth
        """
        return cls(depth=DepthConfig(max_depth=max_depth))

    @classmethod
    def cached(cls, max_size: int = 4096) -> 'SearchConfig':
        """Create config that reuses child lists across stage rebuilds.

        Args:
            max_size: Number of child lists kept

        Returns:
            SearchConfig with caching enabled
        """
        return cls(cache=CacheConfig(enabled=True, max_size=max_size))

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            elif self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.cache.enabled and self.cache.max_size <= 0:
            errors.append("cache max_size must be positive")

        return errors
