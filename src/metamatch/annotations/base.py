"""Annotation runtime.

Annotation types are frozen dataclasses deriving from :class:`Annotation`.
Calling an annotation instance with a target attaches it to that target, so
instances double as decorators:

    @dataclass(frozen=True)
    class Service(Annotation):
        name: str = ""

    @Service(name="users")
    class UserService:
        ...

    annotations_of(UserService)
    # (Service(name='users'),)

Annotation types can themselves be annotated (meta-annotations), which is
what makes recursive metadata discovery possible.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, fields
from typing import Any, TypeVar

from ..core.exceptions import AnnotationTargetError

ANNOTATIONS_ATTR = "__metamatch_annotations__"

T = TypeVar("T")


@dataclass(frozen=True)
class Annotation:
    """Base class for annotation types."""

    def __call__(self, target: T) -> T:
        attach(target, self)
        return target

    def attributes(self) -> dict[str, Any]:
        """Return every declared attribute with its (possibly default) value."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


def qualified_name(annotation_type: type) -> str:
    """Return ``module.QualName`` for an annotation type."""
    return f"{annotation_type.__module__}.{annotation_type.__qualname__}"


def is_annotation_type(obj: Any) -> bool:
    """Check whether an object is an annotation type (not an instance)."""
    return isinstance(obj, type) and issubclass(obj, Annotation)


def target_kind(target: Any) -> str:
    """Classify a target as ``annotation_type``, ``type``, ``function`` or ``object``."""
    if is_annotation_type(target):
        return "annotation_type"
    if isinstance(target, type):
        return "type"
    if inspect.isroutine(target):
        return "function"
    return "object"


def declared_annotations(target: Any) -> tuple[Annotation, ...]:
    """Return the annotations attached directly to ``target``.

    Only the target's own attachments are returned; attachments made on a
    base class are not visible through a subclass here.
    """
    namespace = getattr(target, "__dict__", None)
    if namespace is None:
        return ()
    return tuple(namespace.get(ANNOTATIONS_ATTR, ()))


def annotations_of(target: Any) -> tuple[Annotation, ...]:
    """Return the annotations present on ``target``.

    For classes this includes annotations inherited from base classes whose
    type is marked ``@Inherited()``, unless an annotation of the same type is
    already present. Direct annotations come first, then inherited ones from
    the nearest base outwards.
    """
    present = list(declared_annotations(target))
    if not isinstance(target, type):
        return tuple(present)

    from .builtin import Inherited

    seen_types = {type(a) for a in present}
    for base in target.__mro__[1:]:
        for annotation in declared_annotations(base):
            annotation_type = type(annotation)
            if annotation_type in seen_types:
                continue
            if not any(isinstance(m, Inherited) for m in declared_annotations(annotation_type)):
                continue
            seen_types.add(annotation_type)
            present.append(annotation)
    return tuple(present)


def attach(target: Any, annotation: Annotation) -> None:
    """Attach an annotation instance to a target.

    The new annotation is placed before those already attached: decorators
    run bottom-up, so stacked decorators end up in the order they are written.

    Raises:
        AnnotationTargetError: If the annotation type restricts its targets
            and ``target`` is not one of them, or if the target does not
            accept attributes.
    """
    from .builtin import Target

    kind = target_kind(target)
    for meta in declared_annotations(type(annotation)):
        if isinstance(meta, Target) and not meta.allows(kind):
            raise AnnotationTargetError(
                target,
                f"@{type(annotation).__name__} applies to {', '.join(meta.kinds)}, not {kind}",
            )

    try:
        setattr(target, ANNOTATIONS_ATTR, (annotation,) + declared_annotations(target))
    except (AttributeError, TypeError) as e:
        raise AnnotationTargetError(target, str(e)) from e
