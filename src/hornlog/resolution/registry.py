"""Registry for resolution strategies."""

from typing import Dict, Type, List, Any

from .base import Strategy
from .shallow import ShallowStrategy
from .sld import SLDStrategy


class StrategyRegistry:
    """Registry for managing resolution strategies."""

    def __init__(self):
        self._strategies: Dict[str, Type[Strategy]] = {}
        self._register_default_strategies()

    def _register_default_strategies(self):
        self.register('sld', SLDStrategy)
        self.register('shallow', ShallowStrategy)

    def register(self, name: str, strategy_class: Type[Strategy]):
        """Register a new strategy type."""
        self._strategies[name.lower()] = strategy_class

    def create_strategy(self, name: str, **kwargs: Any) -> Strategy:
        """Create a strategy instance."""
        name = name.lower()
        if name not in self._strategies:
            raise ValueError(f"Unknown strategy: {name}")

        return self._strategies[name](**kwargs)

    def list_strategies(self) -> List[str]:
        """List available strategy names."""
        return list(self._strategies.keys())


_registry = StrategyRegistry()


def get_strategy(name: str, **kwargs: Any) -> Strategy:
    """Get a strategy instance."""
    return _registry.create_strategy(name, **kwargs)


def list_strategies() -> List[str]:
    return _registry.list_strategies()
