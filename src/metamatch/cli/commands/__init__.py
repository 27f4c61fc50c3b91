"""CLI command handlers."""

from .find import handle_find
from .match import handle_match
from .targets import import_target, resolve

__all__ = [
    "handle_find",
    "handle_match",
    "import_target",
    "resolve",
]
