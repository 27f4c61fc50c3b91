"""Resolution of CLI targets to entities."""

import importlib
from typing import Any

from ...core.config import MatchConfig
from ...core.exceptions import TargetImportError
from ...match import MetadataMatcher
from ...model import load_model


def import_target(spec: str) -> Any:
    """Import a ``package.module:attribute.path`` target.

    Raises:
        TargetImportError: If the module or attribute cannot be found.
    """
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        raise TargetImportError(f"Target must look like 'package.module:attribute', got '{spec}'")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetImportError(f"Cannot import module '{module_name}': {e}") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TargetImportError(f"'{module_name}' has no attribute '{attr_path}'") from e
    return obj


def resolve(args, config: MatchConfig) -> tuple[MetadataMatcher, Any]:
    """Build a matcher and the entity named by ``args.target``.

    With ``--model`` the target is an entity name in a YAML annotation graph;
    otherwise it is an importable Python object.
    """
    if args.model:
        model = load_model(args.model, metadata_type=config.metadata_type)
        return MetadataMatcher(model, config), model.entity(args.target)
    return MetadataMatcher(config=config), import_target(args.target)
