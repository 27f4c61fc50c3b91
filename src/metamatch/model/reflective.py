"""Annotation model over live Python objects."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..annotations.base import Annotation, annotations_of, qualified_name


class ReflectiveAnnotationModel:
    """Reads annotations attached with the :mod:`metamatch.annotations` runtime.

    Entities are classes, functions or any object carrying attachments;
    annotation types are :class:`Annotation` subclasses.
    """

    def list_annotations(self, target: Any) -> Sequence[Annotation]:
        return annotations_of(target)

    def annotation_type(self, annotation: Annotation) -> type:
        return type(annotation)

    def qualified_name(self, annotation_type: type) -> str:
        return qualified_name(annotation_type)

    def resolved_attributes(self, annotation: Annotation) -> Mapping[str, Any]:
        return {
            name: tuple(value) if isinstance(value, list) else value
            for name, value in annotation.attributes().items()
        }
