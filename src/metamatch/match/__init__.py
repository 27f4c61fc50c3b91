"""Metadata discovery, query parsing and matching."""

from .descriptor import MetadataDescriptor, MetadataProperty
from .discovery import MetadataDiscovery
from .expression import (
    ANY_KIND,
    MatchExpression,
    PropertyPredicate,
    iter_groups,
    parse_expression,
    parse_predicate,
    split_property,
)
from .matcher import ALWAYS_MATCH, MetadataMatcher, matches

__all__ = [
    "ALWAYS_MATCH",
    "ANY_KIND",
    "MatchExpression",
    "MetadataDescriptor",
    "MetadataDiscovery",
    "MetadataMatcher",
    "MetadataProperty",
    "PropertyPredicate",
    "iter_groups",
    "matches",
    "parse_expression",
    "parse_predicate",
    "split_property",
]
