"""Annotation models: the read-only views discovery searches."""

from .protocols import AnnotationModel
from .reflective import ReflectiveAnnotationModel
from .static import (
    AnnotationNode,
    EntityNode,
    StaticAnnotationModel,
    TypeNode,
    load_model,
)

__all__ = [
    "AnnotationModel",
    "ReflectiveAnnotationModel",
    "StaticAnnotationModel",
    "AnnotationNode",
    "EntityNode",
    "TypeNode",
    "load_model",
]
