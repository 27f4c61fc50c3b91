"""Match command for the metamatch CLI."""

from ...core.config import MatchConfig
from .targets import resolve


def handle_match(args, config: MatchConfig) -> int:
    """Handle match command: print whether the target matches the query.

    Returns:
        Process exit code (0 on match, 1 otherwise).
    """
    matcher, entity = resolve(args, config)
    matched = matcher.matches(entity, args.query)
    print("true" if matched else "false")
    return 0 if matched else 1
