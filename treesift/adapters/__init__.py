"""Ready-made children producers for TreeSift."""

from .caching import CachingProducer
from .sibling_chain import SiblingChainProducer
from .etree import ElementTreeProducer, tag_is, has_attribute, text_contains
from .mapping import MappingProducer
from .filesystem import FileSystemProducer, name_matches, is_directory, is_file
from .graph import WeightedGraph, GraphProducer

__all__ = [
    'CachingProducer',
    'SiblingChainProducer',
    'ElementTreeProducer',
    'tag_is',
    'has_attribute',
    'text_contains',
    'MappingProducer',
    'FileSystemProducer',
    'name_matches',
    'is_directory',
    'is_file',
    'WeightedGraph',
    'GraphProducer',
]
