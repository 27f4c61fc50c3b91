"""Built-in meta-annotations.

These describe annotation types themselves and annotate one another, so
metadata discovery treats this module's namespace as reserved and never
descends into it.
"""

from dataclasses import dataclass

from .base import Annotation

TARGET_KINDS = ("annotation_type", "type", "function", "object")


@dataclass(frozen=True)
class Documented(Annotation):
    """Marks an annotation type as part of a documented API."""


@dataclass(frozen=True)
class Target(Annotation):
    """Restricts the kinds of targets an annotation type may be applied to.

    ``type`` admits every class, annotation types included.
    """

    kinds: tuple[str, ...] = TARGET_KINDS

    def __post_init__(self) -> None:
        if isinstance(self.kinds, str):
            object.__setattr__(self, "kinds", (self.kinds,))
        else:
            object.__setattr__(self, "kinds", tuple(self.kinds))
        unknown = [k for k in self.kinds if k not in TARGET_KINDS]
        if unknown:
            raise ValueError(f"Unknown target kinds: {', '.join(unknown)}")

    def allows(self, kind: str) -> bool:
        if kind in self.kinds:
            return True
        return kind == "annotation_type" and "type" in self.kinds


@dataclass(frozen=True)
class Inherited(Annotation):
    """Makes class annotations of the marked type visible on subclasses."""


# Applied after all three types exist: attaching consults Target.
for _meta_type in (Documented, Target, Inherited):
    Documented()(_meta_type)
    Target(kinds=("annotation_type",))(_meta_type)
del _meta_type
