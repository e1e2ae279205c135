"""Search criteria for TreeSift.

A Criteria is a pure predicate over a raw element. It is a tagged variant:
either the wildcard, which matches everything, or a predicate wrapping a
callable. Criteria compose with ``&``, ``|`` and ``~``.

"No criteria" is represented by None and is handled per operation: single
predicate operations read it as the wildcard, while a cascading search
drops it (see drop_absent).
"""

import re
from collections.abc import Mapping
from typing import Any, Callable, Iterable, List, Optional, Union

from .errors import PredicateRequiredError

_MISSING = object()


class Criteria:
    """A predicate over raw elements, or the wildcard.

    Example:
        >>> is_div = Criteria(lambda e: e.tag == 'div', description='div')
        >>> visible = ~Criteria(lambda e: e.get('hidden'))
        >>> (is_div & visible).matches(element)
    """

    def __init__(self,
                 predicate: Optional[Callable[[Any], bool]],
                 description: Optional[str] = None,
                 _wildcard: bool = False):
        if not _wildcard and (predicate is None or not callable(predicate)):
            raise PredicateRequiredError(
                f"Criteria requires a callable predicate, got {predicate!r}"
            )
        self._predicate = predicate
        self._wildcard = _wildcard
        if description is None and not _wildcard:
            description = getattr(predicate, '__name__', None) or repr(predicate)
        self.description = description or '*'

    @classmethod
    def wildcard(cls) -> 'Criteria':
        """Return the criteria that matches every element."""
        return WILDCARD

    @property
    def is_wildcard(self) -> bool:
        return self._wildcard

    def matches(self, element: Any) -> bool:
        """Test an element against this criteria."""
        if self._wildcard:
            return True
        return bool(self._predicate(element))

    __call__ = matches

    def __and__(self, other: Any) -> 'Criteria':
        other = _coerce(other)
        if self._wildcard:
            return other
        if other._wildcard:
            return self
        return Criteria(
            lambda element: self.matches(element) and other.matches(element),
            description=f"({self.description} & {other.description})",
        )

    def __or__(self, other: Any) -> 'Criteria':
        other = _coerce(other)
        if self._wildcard or other._wildcard:
            return WILDCARD
        return Criteria(
            lambda element: self.matches(element) or other.matches(element),
            description=f"({self.description} | {other.description})",
        )

    def __invert__(self) -> 'Criteria':
        return Criteria(
            lambda element: not self.matches(element),
            description=f"~{self.description}",
        )

    def __repr__(self) -> str:
        if self._wildcard:
            return "Criteria.wildcard()"
        return f"Criteria({self.description})"


WILDCARD = Criteria(None, description='*', _wildcard=True)

CriteriaLike = Union[Criteria, Callable[[Any], bool]]


def _coerce(value: Any) -> Criteria:
    criteria = as_criteria(value)
    if criteria is None:
        raise PredicateRequiredError("Cannot combine criteria with None")
    return criteria


def as_criteria(value: Optional[CriteriaLike]) -> Optional[Criteria]:
    """Coerce a value into Criteria.

    Args:
        value: Criteria, callable predicate, or None

    Returns:
        Criteria, or None if value is absent

    Raises:
        PredicateRequiredError: If value is neither None, Criteria nor callable
    """
    if value is None or isinstance(value, Criteria):
        return value
    if callable(value):
        return Criteria(value)
    raise PredicateRequiredError(
        f"Expected Criteria or a callable predicate, got {value!r}"
    )


def drop_absent(values: Iterable[Optional[CriteriaLike]]) -> List[Criteria]:
    """Remove absent entries and coerce the rest to Criteria."""
    return [as_criteria(value) for value in values if value is not None]


def read_field(element: Any, name: str, default: Any = _MISSING) -> Any:
    """Read a field of an element as a mapping key or, failing that, an attribute."""
    if isinstance(element, Mapping):
        return element.get(name, default)
    return getattr(element, name, default)


class CriteriaBuilder:
    """Fluent builder for criteria over element fields.

    Fields are read as mapping keys for dict-like elements and as
    attributes otherwise. All clauses must hold for an element to match;
    a builder without clauses builds the wildcard.

    Example:
        >>> text_nodes = CriteriaBuilder().field('type', TEXT_NODE).build()
        >>> links = (CriteriaBuilder()
        ...          .field('tag', 'a')
        ...          .field_matches('href', r'^https://')
        ...          .build())
    """

    def __init__(self):
        self._clauses: List[Criteria] = []

    def field(self, name: str, value: Any) -> 'CriteriaBuilder':
        """Require ``element.name == value``."""
        def check(element: Any) -> bool:
            return read_field(element, name) == value
        self._clauses.append(Criteria(check, description=f"{name}=={value!r}"))
        return self

    def field_in(self, name: str, values: Iterable[Any]) -> 'CriteriaBuilder':
        """Require the field to equal one of ``values``."""
        allowed = list(values)

        def check(element: Any) -> bool:
            return read_field(element, name) in allowed
        self._clauses.append(Criteria(check, description=f"{name} in {allowed!r}"))
        return self

    def field_matches(self, name: str, pattern: Union[str, re.Pattern]) -> 'CriteriaBuilder':
        """Require the field, as a string, to contain a regex match."""
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern

        def check(element: Any) -> bool:
            value = read_field(element, name)
            if value is _MISSING or value is None:
                return False
            return regex.search(str(value)) is not None
        self._clauses.append(Criteria(check, description=f"{name}~/{regex.pattern}/"))
        return self

    def has_field(self, name: str) -> 'CriteriaBuilder':
        """Require the field to be present."""
        def check(element: Any) -> bool:
            return read_field(element, name) is not _MISSING
        self._clauses.append(Criteria(check, description=f"has {name}"))
        return self

    def test(self, predicate: CriteriaLike) -> 'CriteriaBuilder':
        """Add an arbitrary predicate clause."""
        self._clauses.append(_coerce(predicate))
        return self

    def build(self) -> Criteria:
        """Combine all clauses into one Criteria."""
        criteria = WILDCARD
        for clause in self._clauses:
            criteria = criteria & clause
        return criteria
