"""Directory size strategies."""

from typing import Optional

from bytetools.protocols import SizeStrategy
from bytetools.strategies.flat import FlatWalkStrategy
from bytetools.strategies.nested import NestedRecursiveStrategy

# Registry of available strategies, keyed by name
_STRATEGIES: dict[str, SizeStrategy] = {
    NestedRecursiveStrategy.name: NestedRecursiveStrategy(),
    FlatWalkStrategy.name: FlatWalkStrategy(),
}


def get_strategy(name: str) -> Optional[SizeStrategy]:
    """Find a registered strategy by name.

    Args:
        name: Strategy identifier (e.g. "flat", "nested")

    Returns:
        The strategy instance, or None if no strategy has that name
    """
    return _STRATEGIES.get(name)


def register_strategy(strategy: SizeStrategy) -> None:
    """Register a custom strategy, replacing any with the same name.

    Args:
        strategy: An object implementing the SizeStrategy protocol
    """
    _STRATEGIES[strategy.name] = strategy


def available_strategies() -> list[str]:
    return sorted(_STRATEGIES)


__all__ = [
    "get_strategy",
    "register_strategy",
    "available_strategies",
    "FlatWalkStrategy",
    "NestedRecursiveStrategy",
]
