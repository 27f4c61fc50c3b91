"""Test fakes: annotated declarations and annotation graphs.

Example:
    from tests.fakes import UserService, sample_graph

    MetadataMatcher().matches(UserService, "Service[scope=singleton]")
"""

from .declarations import (
    Account,
    Alpha,
    BaseWidget,
    Beta,
    Button,
    Component,
    Cyclic,
    Plain,
    Repository,
    Service,
    Transactional,
    TransactionalOnly,
    UserRepository,
    UserService,
    UserServiceSubclass,
    handle_event,
)
from .graphs import sample_graph

__all__ = [
    "Account",
    "Alpha",
    "BaseWidget",
    "Beta",
    "Button",
    "Component",
    "Cyclic",
    "Plain",
    "Repository",
    "Service",
    "Transactional",
    "TransactionalOnly",
    "UserRepository",
    "UserService",
    "UserServiceSubclass",
    "handle_event",
    "sample_graph",
]
