"""metamatch: metadata discovery and matching for annotated declarations."""

from .annotations import Annotation, Documented, Inherited, Target, annotations_of
from .api import MetaData, Where
from .core import MatchConfig, MetaMatchError
from .match import (
    ALWAYS_MATCH,
    MetadataDescriptor,
    MetadataDiscovery,
    MetadataMatcher,
    matches,
    parse_expression,
)
from .model import ReflectiveAnnotationModel, StaticAnnotationModel, load_model

__version__ = "0.1.0"

__all__ = [
    "Annotation",
    "Documented",
    "Inherited",
    "Target",
    "annotations_of",
    "MetaData",
    "Where",
    "MatchConfig",
    "MetaMatchError",
    "ALWAYS_MATCH",
    "MetadataDescriptor",
    "MetadataDiscovery",
    "MetadataMatcher",
    "matches",
    "parse_expression",
    "ReflectiveAnnotationModel",
    "StaticAnnotationModel",
    "load_model",
]
