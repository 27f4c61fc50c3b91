"""Declared annotation graphs.

A static model describes entities and annotation types that are not Python
objects, e.g. declarations read from another toolchain's output. Graphs are
plain mappings, usually loaded from YAML:

    types:
      app.Service:
        defaults: {name: ""}
        annotations:
          - type: metamatch.api.MetaData
            attributes: {kind: Service, properties: ["scope=singleton"]}
    entities:
      app.UserService:
        annotations:
          - type: app.Service
            attributes: {name: users}

An annotation type that is referenced but never declared is a leaf with no
annotations and no defaults.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Sequence

import yaml
from loguru import logger

from ..core.config import DEFAULT_METADATA_TYPE
from ..core.exceptions import ModelLoadError, UnknownEntityError


@dataclass(frozen=True)
class EntityNode:
    """A declared entity."""

    name: str


@dataclass(frozen=True)
class TypeNode:
    """A declared annotation type."""

    name: str


@dataclass(frozen=True)
class AnnotationNode:
    """An annotation instance: a type name plus explicitly given attributes."""

    type_name: str
    attributes: Mapping[str, Any] = field(default_factory=dict)


class StaticAnnotationModel:
    """Annotation model over a declared graph.

    Example:
        model = StaticAnnotationModel.from_mapping(yaml.safe_load(text))
        entity = model.entity("app.UserService")
        model.list_annotations(entity)
        # (AnnotationNode(type_name='app.Service', attributes={'name': 'users'}),)
    """

    def __init__(
        self,
        *,
        entities: Mapping[str, Sequence[AnnotationNode]] | None = None,
        types: Mapping[str, Sequence[AnnotationNode]] | None = None,
        defaults: Mapping[str, Mapping[str, Any]] | None = None,
        metadata_type: str = DEFAULT_METADATA_TYPE,
    ):
        """Initialize the model.

        Args:
            entities: Entity name -> attached annotations, in order.
            types: Annotation type name -> annotations on its declaration.
            defaults: Annotation type name -> default attribute values.
            metadata_type: Qualified name of the metadata annotation type,
                which always defaults ``kind`` and ``properties``.
        """
        self._entities = {name: tuple(anns) for name, anns in (entities or {}).items()}
        self._types = {name: tuple(anns) for name, anns in (types or {}).items()}
        self._defaults: dict[str, dict[str, Any]] = {
            name: dict(values) for name, values in (defaults or {}).items()
        }
        self._defaults[metadata_type] = {
            "kind": "",
            "properties": (),
            **self._defaults.get(metadata_type, {}),
        }

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        *,
        metadata_type: str = DEFAULT_METADATA_TYPE,
    ) -> "StaticAnnotationModel":
        """Build a model from a ``{types: ..., entities: ...}`` mapping.

        Raises:
            ModelLoadError: If the mapping does not have the expected shape.
        """
        if not isinstance(data, Mapping):
            raise ModelLoadError("Annotation graph must be a mapping")

        unknown = sorted(set(data) - {"types", "entities"})
        if unknown:
            raise ModelLoadError(f"Unknown top-level keys: {', '.join(unknown)}")

        types: dict[str, tuple[AnnotationNode, ...]] = {}
        defaults: dict[str, dict[str, Any]] = {}
        for name, spec in _section(data, "types").items():
            spec = _entry(spec, f"type {name}")
            types[name] = _annotations(spec, f"type {name}")
            type_defaults = spec.get("defaults") or {}
            if not isinstance(type_defaults, Mapping):
                raise ModelLoadError(f"type {name}: defaults must be a mapping")
            defaults[name] = dict(type_defaults)

        entities = {
            name: _annotations(_entry(spec, f"entity {name}"), f"entity {name}")
            for name, spec in _section(data, "entities").items()
        }

        logger.debug(f"Loaded annotation graph: {len(entities)} entities, {len(types)} types")
        return cls(entities=entities, types=types, defaults=defaults, metadata_type=metadata_type)

    def entity(self, name: str) -> EntityNode | TypeNode:
        """Look up an entity by name, falling back to annotation types.

        Raises:
            UnknownEntityError: If neither an entity nor a type has that name.
        """
        if name in self._entities:
            return EntityNode(name)
        if name in self._types:
            return TypeNode(name)
        suggestions = difflib.get_close_matches(name, [*self._entities, *self._types], n=3)
        raise UnknownEntityError(name, suggestions)

    def entity_names(self) -> list[str]:
        return list(self._entities)

    def list_annotations(self, target: Any) -> Sequence[AnnotationNode]:
        if isinstance(target, EntityNode):
            return self._entities.get(target.name, ())
        if isinstance(target, TypeNode):
            return self._types.get(target.name, ())
        return ()

    def annotation_type(self, annotation: AnnotationNode) -> TypeNode:
        return TypeNode(annotation.type_name)

    def qualified_name(self, annotation_type: TypeNode) -> str:
        return annotation_type.name

    def resolved_attributes(self, annotation: AnnotationNode) -> Mapping[str, Any]:
        resolved = {**self._defaults.get(annotation.type_name, {}), **annotation.attributes}
        return {
            name: tuple(value) if isinstance(value, list) else value
            for name, value in resolved.items()
        }


def load_model(
    path: Path | str,
    *,
    metadata_type: str = DEFAULT_METADATA_TYPE,
) -> StaticAnnotationModel:
    """Load a static annotation graph from a YAML file.

    Raises:
        ModelLoadError: If the file cannot be read, is not valid YAML, or
            does not describe an annotation graph.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ModelLoadError(f"Cannot read annotation graph {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ModelLoadError(f"Invalid YAML in annotation graph {path}: {e}") from e

    return StaticAnnotationModel.from_mapping(data or {}, metadata_type=metadata_type)


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, Mapping):
        raise ModelLoadError(f"'{key}' must be a mapping of name -> declaration")
    return section


def _entry(spec: Any, where: str) -> Mapping[str, Any]:
    if spec is None:
        return {}
    if not isinstance(spec, Mapping):
        raise ModelLoadError(f"{where}: declaration must be a mapping")
    return spec


def _annotations(spec: Mapping[str, Any], where: str) -> tuple[AnnotationNode, ...]:
    raw = spec.get("annotations") or []
    if not isinstance(raw, list):
        raise ModelLoadError(f"{where}: annotations must be a list")

    nodes = []
    for item in raw:
        if isinstance(item, str):
            # Shorthand: a bare type name with no explicit attributes
            nodes.append(AnnotationNode(item))
            continue
        if not isinstance(item, Mapping) or not isinstance(item.get("type"), str):
            raise ModelLoadError(f"{where}: each annotation needs a 'type' name")
        attributes = item.get("attributes") or {}
        if not isinstance(attributes, Mapping):
            raise ModelLoadError(f"{where}: attributes of {item['type']} must be a mapping")
        nodes.append(AnnotationNode(item["type"], dict(attributes)))
    return tuple(nodes)
