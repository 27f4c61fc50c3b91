"""Custom exceptions for metamatch.

The matching core never raises for malformed queries or annotation graphs;
these exceptions belong to the surfaces around it.
"""


class MetaMatchError(Exception):
    """Base exception for all metamatch errors."""

    pass


class ConfigError(MetaMatchError):
    """Configuration could not be loaded or is invalid."""

    pass


class AnnotationTargetError(MetaMatchError):
    """An annotation could not be attached to its target."""

    def __init__(self, target: object, reason: str):
        """Initialize exception with the rejected target.

        Args:
            target: Object the annotation was applied to.
            reason: Why the attachment failed.
        """
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot annotate {target!r}: {reason}")


class ModelError(MetaMatchError):
    """Annotation model operation failed."""

    pass


class ModelLoadError(ModelError):
    """Annotation graph document is malformed."""

    pass


class UnknownEntityError(ModelError):
    """Entity does not exist in the annotation graph."""

    def __init__(self, name: str, suggestions: list[str] | None = None):
        """Initialize exception with name and suggestions.

        Args:
            name: Name of the entity that was not found.
            suggestions: List of known entity names that look similar.
        """
        self.name = name
        self.suggestions = suggestions or []
        message = f"Entity not found: {name}"
        if self.suggestions:
            message += f" (did you mean: {', '.join(self.suggestions)}?)"
        super().__init__(message)


class TargetImportError(MetaMatchError):
    """A ``module:attribute`` target could not be imported."""

    pass
