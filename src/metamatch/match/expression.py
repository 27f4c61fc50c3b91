"""Parsing of metadata match expressions.

Grammar:

    expression     = kind-selector , { property-group } ;
    kind-selector  = { any-char-except '[' } ;
    property-group = '[' , name , [ '=' , value ] , ']' ;

Parsing never fails. Text between groups is ignored, a ``[`` inside an
unterminated group restarts the scan, and a group with an empty name yields
a predicate that can never be satisfied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

ANY_KIND = "*"
PROPERTY_VALUE_SEPARATOR = "="


@dataclass(frozen=True)
class PropertyPredicate:
    """A single ``name`` or ``name=value`` condition.

    Attributes:
        name: Property name that must be present.
        value: Required value, or None when any value is accepted.
    """

    name: str
    value: str | None = None

    @property
    def satisfiable(self) -> bool:
        """False for malformed predicates such as ``[]`` or ``[=x]``."""
        return bool(self.name)


@dataclass(frozen=True)
class MatchExpression:
    """A parsed query: kind selector plus property predicates in source order."""

    kind_selector: str
    predicates: tuple[PropertyPredicate, ...] = ()

    @property
    def any_kind(self) -> bool:
        return self.kind_selector == ANY_KIND

    def accepts_kind(self, kind: str) -> bool:
        """Check the kind selector; exact, case-sensitive unless wildcard."""
        return self.any_kind or self.kind_selector == kind


def split_property(text: str) -> tuple[str, str | None]:
    """Split ``name=value`` at the first separator.

    Example:
        >>> split_property("a=b=c")
        ('a', 'b=c')
        >>> split_property("flag")
        ('flag', None)
    """
    name, sep, value = text.partition(PROPERTY_VALUE_SEPARATOR)
    if not sep:
        return text, None
    return name, value


def parse_predicate(token: str) -> PropertyPredicate:
    """Parse the inside of one bracketed group."""
    name, value = split_property(token)
    return PropertyPredicate(name, value)


def iter_groups(text: str, start: int = 0) -> Iterator[str]:
    """Yield the contents of every ``[...]`` group in ``text``, left to right.

    Groups do not nest: in ``[a[b]`` only ``b`` is a group.
    """
    open_pos = text.find("[", start)
    while open_pos != -1:
        pos = open_pos + 1
        while pos < len(text) and text[pos] not in "[]":
            pos += 1
        if pos == len(text):
            return
        if text[pos] == "]":
            yield text[open_pos + 1 : pos]
            open_pos = text.find("[", pos + 1)
        else:
            open_pos = pos


def parse_expression(raw: str) -> MatchExpression:
    """Parse a query string into a :class:`MatchExpression`.

    Example:
        >>> parse_expression("Entity[table=users][audited]")
        MatchExpression(kind_selector='Entity', predicates=(PropertyPredicate(name='table', value='users'), PropertyPredicate(name='audited', value=None)))
    """
    bracket = raw.find("[")
    if bracket == -1:
        return MatchExpression(raw)

    predicates = tuple(parse_predicate(group) for group in iter_groups(raw, bracket))
    return MatchExpression(raw[:bracket], predicates)
