"""Public annotation types.

``MetaData`` attaches a kind and free-form properties to a declaration,
either directly or through an annotation type that carries it:

    @MetaData(kind="Service", properties=["scope=singleton"])
    @dataclass(frozen=True)
    class Service(Annotation):
        pass

    @Service()
    class UserService:
        ...

``Where`` holds a metadata query used to select declarations.
"""

from dataclasses import dataclass

from .annotations.base import Annotation
from .annotations.builtin import Documented, Target


@Documented()
@Target(kinds=("type", "function"))
@dataclass(frozen=True)
class MetaData(Annotation):
    """Metadata descriptor attached to a declaration.

    Attributes:
        kind: Category tag matched by the kind part of a query.
        properties: ``name`` or ``name=value`` strings.
    """

    kind: str = ""
    properties: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.properties, str):
            object.__setattr__(self, "properties", (self.properties,))
        else:
            object.__setattr__(self, "properties", tuple(self.properties))


@Documented()
@dataclass(frozen=True)
class Where(Annotation):
    """Selection criteria for declarations.

    ``metadata`` is a query of the form ``kind[name][name=value]...``;
    ``*`` as the kind accepts any kind. The default, ``DONT_MATCH``, disables
    metadata filtering so every declaration is selected.
    """

    DONT_MATCH = "!dont-match!"

    metadata: str = DONT_MATCH
