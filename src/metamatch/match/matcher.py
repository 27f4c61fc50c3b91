"""Matching of entities against metadata queries."""

from __future__ import annotations

from typing import Any, Iterable, TypeVar

from loguru import logger

from ..api import Where
from ..core.config import MatchConfig
from ..model.protocols import AnnotationModel
from .descriptor import MetadataDescriptor
from .discovery import MetadataDiscovery
from .expression import MatchExpression, parse_expression

E = TypeVar("E")

ALWAYS_MATCH = Where.DONT_MATCH


class MetadataMatcher:
    """Decides whether an entity's metadata satisfies a query.

    A query is ``kind[name][name=value]...``: the kind must equal the
    descriptor's kind (``*`` accepts any), every named property must be
    present, and properties given with a value must have exactly that value.
    ``Where.DONT_MATCH`` matches everything without looking at metadata.

    Example:
        matcher = MetadataMatcher()
        matcher.matches(UserService, "Service[scope=singleton]")
        # True
    """

    def __init__(
        self,
        model: AnnotationModel | None = None,
        config: MatchConfig | None = None,
    ):
        """Initialize the matcher.

        Args:
            model: Annotation model to search (default: reflective model).
            config: Matching configuration (default: ``MatchConfig()``).
        """
        self.discovery = MetadataDiscovery(model, config)

    @property
    def model(self) -> AnnotationModel:
        return self.discovery.model

    @property
    def config(self) -> MatchConfig:
        return self.discovery.config

    def find_metadata(self, entity: Any) -> MetadataDescriptor | None:
        """Return the metadata descriptor discovered for ``entity``, if any."""
        return self.discovery.find(entity)

    def matches(self, entity: Any, query: str) -> bool:
        """Check ``entity`` against a raw query string.

        Args:
            entity: Entity understood by the annotation model.
            query: Query string, or ``Where.DONT_MATCH``.

        Returns:
            True if the entity's metadata satisfies the query.
        """
        if query == ALWAYS_MATCH:
            return True

        descriptor = self.discovery.find(entity)
        if descriptor is None:
            logger.debug(f"No metadata on {entity!r}; '{query}' does not match")
            return False

        return self.matches_descriptor(descriptor, parse_expression(query))

    def matches_descriptor(self, descriptor: MetadataDescriptor, expression: MatchExpression) -> bool:
        """Evaluate a parsed expression against a descriptor."""
        if not expression.accepts_kind(descriptor.kind):
            logger.debug(f"Kind '{descriptor.kind}' rejected by '{expression.kind_selector}'")
            return False

        property_map = descriptor.property_map
        for predicate in expression.predicates:
            if not predicate.satisfiable:
                logger.debug(f"Malformed predicate {predicate!r} never matches")
                return False
            if predicate.name not in property_map:
                logger.debug(f"Property '{predicate.name}' missing from {descriptor.kind}")
                return False
            if predicate.value is not None and predicate.value != property_map[predicate.name]:
                logger.debug(
                    f"Property '{predicate.name}' is {property_map[predicate.name]!r}, "
                    f"wanted {predicate.value!r}"
                )
                return False

        return True

    def select(self, entities: Iterable[E], where: Where | str) -> list[E]:
        """Return the entities matching ``where``, preserving their order.

        Args:
            entities: Candidate entities.
            where: A :class:`Where` annotation or a raw query string.
        """
        query = where.metadata if isinstance(where, Where) else where
        selected = [entity for entity in entities if self.matches(entity, query)]
        logger.debug(f"Selected {len(selected)} entities for '{query}'")
        return selected


_default_matcher: MetadataMatcher | None = None


def matches(entity: Any, query: str) -> bool:
    """Check a Python object against a query with the default matcher."""
    global _default_matcher

    if _default_matcher is None:
        _default_matcher = MetadataMatcher()
    return _default_matcher.matches(entity, query)
