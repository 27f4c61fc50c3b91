"""Find command for the metamatch CLI."""

from ...core.config import MatchConfig
from .targets import resolve


def handle_find(args, config: MatchConfig) -> int:
    """Handle find command: print the discovered metadata.

    Args:
        args: Parsed command arguments.
        config: Matching configuration.

    Returns:
        Process exit code (0 if metadata was found, 1 otherwise).
    """
    matcher, entity = resolve(args, config)
    descriptor = matcher.find_metadata(entity)

    if descriptor is None:
        print("no metadata")
        return 1

    print(f"kind: {descriptor.kind}")
    for prop in descriptor.properties:
        print(f"  {prop}")
    return 0
