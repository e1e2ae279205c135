"""ElementTree support for TreeSift.

Provides a producer for ``xml.etree.ElementTree`` elements and a few
criteria for the common structural tests on them.
"""

from typing import Any, Iterable, Optional

from ..core.producer import ChildrenProducer
from ..criteria import Criteria


class ElementTreeProducer(ChildrenProducer):
    """Children of an ElementTree element, in document order.

    Comments and processing instructions are skipped unless
    ``include_special`` is set; their ``tag`` is a factory function
    rather than a string.
    """

    def __init__(self, include_special: bool = False):
        self.include_special = include_special

    def get_children(self, element: Any) -> Iterable[Any]:
        if self.include_special:
            return list(element)
        return [child for child in element if isinstance(child.tag, str)]


def local_name(tag: Any) -> Any:
    """Strip a ``{namespace}`` prefix from a tag."""
    if isinstance(tag, str) and tag.startswith('{'):
        return tag.rsplit('}', 1)[1]
    return tag


def tag_is(*tags: str) -> Criteria:
    """Match elements whose local tag name is one of ``tags``."""
    wanted = set(tags)
    return Criteria(
        lambda element: local_name(element.tag) in wanted,
        description=f"tag in {sorted(wanted)!r}",
    )


def has_attribute(name: str, value: Optional[str] = None) -> Criteria:
    """Match elements carrying attribute ``name`` (equal to ``value`` if given)."""
    if value is None:
        return Criteria(
            lambda element: name in element.attrib,
            description=f"@{name}",
        )
    return Criteria(
        lambda element: element.get(name) == value,
        description=f"@{name}={value!r}",
    )


def text_contains(fragment: str) -> Criteria:
    """Match elements whose own text contains ``fragment``."""
    return Criteria(
        lambda element: fragment in (element.text or ''),
        description=f"text~{fragment!r}",
    )
