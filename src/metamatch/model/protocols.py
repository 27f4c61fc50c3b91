"""Protocol for the entity capability interface.

Discovery only ever reads an annotation graph through this protocol, so any
backend that can list annotations and resolve their attributes can be
searched: Python objects via :class:`ReflectiveAnnotationModel`, or a
declared graph via :class:`StaticAnnotationModel`.
"""

from __future__ import annotations

from typing import Any, Hashable, Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class AnnotationModel(Protocol):
    """Read-only view over entities, annotation instances and their types.

    Annotation types must be hashable and must themselves be accepted by
    :meth:`list_annotations`, which is what enables meta-annotation search.
    """

    def list_annotations(self, target: Any) -> Sequence[Any]:
        """Return annotation instances attached to an entity or annotation type, in order."""
        ...

    def annotation_type(self, annotation: Any) -> Hashable:
        """Return the annotation type of an annotation instance."""
        ...

    def qualified_name(self, annotation_type: Any) -> str:
        """Return the fully qualified name of an annotation type."""
        ...

    def resolved_attributes(self, annotation: Any) -> Mapping[str, Any]:
        """Return every declared attribute of an instance, defaults applied."""
        ...
