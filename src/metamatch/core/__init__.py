"""Core configuration and exceptions for metamatch."""

from .config import BUILTIN_NAMESPACE, DEFAULT_METADATA_TYPE, MatchConfig
from .exceptions import (
    AnnotationTargetError,
    ConfigError,
    MetaMatchError,
    ModelError,
    ModelLoadError,
    TargetImportError,
    UnknownEntityError,
)

__all__ = [
    "MatchConfig",
    "DEFAULT_METADATA_TYPE",
    "BUILTIN_NAMESPACE",
    "MetaMatchError",
    "ConfigError",
    "AnnotationTargetError",
    "ModelError",
    "ModelLoadError",
    "UnknownEntityError",
    "TargetImportError",
]
