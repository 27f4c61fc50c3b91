"""Recursive metadata discovery.

Finds the first metadata annotation reachable from an entity: first among
the entity's own annotations, then depth-first through the annotations on
each annotation type's declaration. Types in reserved namespaces are never
entered, each type is entered at most once per search, and the search never
goes deeper than ``MatchConfig.max_depth`` type levels.
"""

from __future__ import annotations

from typing import Any, Iterator

from loguru import logger

from ..core.config import MatchConfig
from ..model.protocols import AnnotationModel
from ..model.reflective import ReflectiveAnnotationModel
from .descriptor import MetadataDescriptor

_EXHAUSTED = object()


class MetadataDiscovery:
    """Depth-first search for the nearest metadata annotation.

    Example:
        discovery = MetadataDiscovery()
        descriptor = discovery.find(UserService)
        # MetadataDescriptor(kind='Service', properties=(...))
    """

    def __init__(
        self,
        model: AnnotationModel | None = None,
        config: MatchConfig | None = None,
    ):
        """Initialize discovery.

        Args:
            model: Annotation model to search (default: reflective model).
            config: Matching configuration (default: ``MatchConfig()``).
        """
        self.model = model if model is not None else ReflectiveAnnotationModel()
        self.config = config if config is not None else MatchConfig()

    def find(self, entity: Any) -> MetadataDescriptor | None:
        """Return the first metadata descriptor reachable from ``entity``, or None."""
        annotation = self.find_annotation(entity)
        if annotation is None:
            return None
        return MetadataDescriptor.from_attributes(self.model.resolved_attributes(annotation))

    def find_annotation(self, entity: Any) -> Any | None:
        """Return the first metadata annotation instance reachable from ``entity``.

        The traversal keeps an explicit stack of annotation iterators, one per
        level, so the visiting order is that of a recursive depth-first search
        that returns as soon as a metadata annotation is seen.
        """
        model = self.model
        config = self.config
        visited: set[Any] = set()
        budget_exceeded = False
        stack: list[Iterator[Any]] = [iter(model.list_annotations(entity))]

        while stack:
            annotation = next(stack[-1], _EXHAUSTED)
            if annotation is _EXHAUSTED:
                stack.pop()
                continue

            annotation_type = model.annotation_type(annotation)
            type_name = model.qualified_name(annotation_type)

            if type_name == config.metadata_type:
                logger.debug(f"Metadata found on {type_name} at depth {len(stack) - 1}")
                return annotation

            if config.is_reserved(type_name):
                continue

            if annotation_type in visited:
                logger.debug(f"Skipping already visited annotation type {type_name}")
                continue

            if len(stack) > config.max_depth:
                if not budget_exceeded:
                    logger.warning(
                        f"Metadata search exceeded max_depth={config.max_depth} "
                        f"at {type_name}; path abandoned"
                    )
                    budget_exceeded = True
                continue

            visited.add(annotation_type)
            stack.append(iter(model.list_annotations(annotation_type)))

        return None
