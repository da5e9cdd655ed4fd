"""
Proof search strategies and the resolver that drives them.
"""

from .base import Strategy, SearchContext
from .shallow import ShallowStrategy
from .sld import SLDStrategy
from .registry import StrategyRegistry, get_strategy, list_strategies
from .resolver import Resolver, resolve, DEFAULT_STRATEGY

__all__ = [
    'Strategy', 'SearchContext',
    'ShallowStrategy', 'SLDStrategy',
    'StrategyRegistry', 'get_strategy', 'list_strategies',
    'Resolver', 'resolve', 'DEFAULT_STRATEGY'
]
