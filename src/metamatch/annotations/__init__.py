"""Annotation runtime: annotation types, attachment and meta-annotations."""

from .base import (
    ANNOTATIONS_ATTR,
    Annotation,
    annotations_of,
    attach,
    declared_annotations,
    is_annotation_type,
    qualified_name,
    target_kind,
)
from .builtin import Documented, Inherited, Target

__all__ = [
    "ANNOTATIONS_ATTR",
    "Annotation",
    "annotations_of",
    "attach",
    "declared_annotations",
    "is_annotation_type",
    "qualified_name",
    "target_kind",
    "Documented",
    "Inherited",
    "Target",
]
