"""In-memory shape of discovered metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .expression import split_property


@dataclass(frozen=True)
class MetadataProperty:
    """One declared property; ``value`` is None for a bare ``name``."""

    name: str
    value: str | None = None

    def __str__(self) -> str:
        return self.name if self.value is None else f"{self.name}={self.value}"


@dataclass(frozen=True)
class MetadataDescriptor:
    """A discovered metadata instance.

    Attributes:
        kind: Category tag; never None, possibly empty.
        properties: Declared properties in declaration order.
    """

    kind: str
    properties: tuple[MetadataProperty, ...] = ()

    @classmethod
    def from_strings(cls, kind: str | None, properties: Iterable[str] | None) -> "MetadataDescriptor":
        """Build a descriptor from raw ``name`` / ``name=value`` strings."""
        parsed = tuple(MetadataProperty(*split_property(str(p))) for p in properties or ())
        return cls("" if kind is None else str(kind), parsed)

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Any]) -> "MetadataDescriptor":
        """Build a descriptor from resolved ``kind``/``properties`` attributes."""
        properties = attributes.get("properties")
        if isinstance(properties, str):
            properties = (properties,)
        return cls.from_strings(attributes.get("kind"), properties)

    @property
    def property_map(self) -> dict[str, str | None]:
        """Name -> value lookup; the last duplicate of a name wins."""
        return {p.name: p.value for p in self.properties}
