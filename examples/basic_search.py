#!/usr/bin/env python
"""
Basic TreeSift Usage Example

Demonstrates single-stage searches and a cascading search over an XML
document and over a directory tree.
"""

import sys
import xml.etree.ElementTree as ET
from pathlib import Path

from treesift import SearchConfig, build_tree, collect_and_prune, extract_nodes, first_match
from treesift.adapters import (
    ElementTreeProducer,
    FileSystemProducer,
    has_attribute,
    is_directory,
    name_matches,
    tag_is,
)


CATALOG = """<catalog>
  <shelf id="fiction">
    <book><title>Dune</title></book>
    <book><title>Solaris</title></book>
  </shelf>
  <shelf id="science">
    <book><title>Cosmos</title></book>
  </shelf>
</catalog>"""


def xml_example():
    print("=== XML catalog ===")
    catalog = ET.fromstring(CATALOG)
    tree = build_tree(catalog, ElementTreeProducer())
    print(f"Nodes in tree: {len(tree)}")

    shelves = collect_and_prune(tree, tag_is('shelf'))
    print(f"Shelves: {[shelf.get('id') for shelf in shelves]}")

    science = first_match(tree, has_attribute('id', 'science'))
    print(f"First science shelf has {len(science)} book(s)")

    # Titles of books on shelves, in document order
    titles = extract_nodes(catalog, ElementTreeProducer(), tag_is('shelf'), tag_is('book'), tag_is('title'))
    print(f"Titles: {[title.text for title in titles]}")


def filesystem_example(root: Path):
    print(f"\n=== Python files in directories of {root} ===")
    producer = FileSystemProducer(include_hidden=False, exclude_dirs={'__pycache__'})
    found = extract_nodes(root, producer, is_directory(), name_matches('*.py'),
                          config=SearchConfig.cached())
    for path in found:
        print(f"  {path.relative_to(root)}")


if __name__ == "__main__":
    xml_example()
    filesystem_example(Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd())
