"""Testing utilities for TreeSift consumers."""

from .fixtures import (
    NamedNode,
    named_tree,
    named_children,
    names,
    RecordingPredicate,
    RecordingProducer,
    FailingProducer,
)

__all__ = [
    'NamedNode',
    'named_tree',
    'named_children',
    'names',
    'RecordingPredicate',
    'RecordingProducer',
    'FailingProducer',
]
