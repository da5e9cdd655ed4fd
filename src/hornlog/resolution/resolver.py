"""Query resolution against a knowledge base."""

import logging
from typing import List, Optional, Sequence, Union

from hornlog.core.knowledge import KnowledgeBase
from hornlog.core.logic import Predicate
from hornlog.proofs.derivation import DerivationTrace
from hornlog.proofs.result import QueryResult
from .base import Strategy, SearchContext
from .registry import get_strategy


logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = "sld"


class Resolver:
    """Runs a proof search strategy against a knowledge base.

    The resolver holds no per-query state: every call builds its own
    SearchContext, so repeating a query on an unchanged knowledge base
    returns the same solutions and the same trace.
    """

    def __init__(self,
                 strategy: Union[str, Strategy] = DEFAULT_STRATEGY,
                 max_depth: Optional[int] = None):
        """
        Args:
            strategy: Strategy instance or registered name ("sld" or "shallow")
            max_depth: Optional recursion limit; None searches without bound
        """
        if isinstance(strategy, str):
            strategy = get_strategy(strategy)
        if max_depth is not None and (isinstance(max_depth, bool) or not isinstance(max_depth, int)):
            raise ValueError(f"max_depth must be an integer, got {max_depth!r}")
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.strategy = strategy
        self.max_depth = max_depth

    def resolve_with_trace(self,
                           query: Predicate,
                           knowledge_base: KnowledgeBase,
                           path: Sequence[Predicate] = ()) -> QueryResult:
        trace = DerivationTrace()
        context = SearchContext(knowledge_base, trace, self.max_depth)
        solutions = self.strategy.solve(query, context, tuple(path))
        logger.info("Query %s: %d solution(s), %d derivation(s)",
                    query, len(solutions), len(trace))
        return QueryResult(query, solutions, trace)

    def resolve(self,
                query: Predicate,
                knowledge_base: KnowledgeBase,
                path: Sequence[Predicate] = ()) -> List[Predicate]:
        return self.resolve_with_trace(query, knowledge_base, path).solutions


def resolve(query: Predicate,
            knowledge_base: KnowledgeBase,
            path: Sequence[Predicate] = (),
            strategy: str = DEFAULT_STRATEGY,
            max_depth: Optional[int] = None) -> List[Predicate]:
    """Return every instance of query provable from the knowledge base."""
    return Resolver(strategy, max_depth).resolve(query, knowledge_base, path)
