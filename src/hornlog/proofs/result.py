"""Outcome of a single query."""

from dataclasses import dataclass, field
from typing import List

from hornlog.core.logic import Predicate
from .derivation import DerivationTrace


@dataclass
class QueryResult:
    """Solutions of a query together with the derivations that produced them.

    An empty result means the query is unprovable against the knowledge
    base. That is a valid answer, so it is falsy rather than an error.
    """
    query: Predicate
    solutions: List[Predicate] = field(default_factory=list)
    trace: DerivationTrace = field(default_factory=DerivationTrace)

    def __bool__(self) -> bool:
        return bool(self.solutions)

    def __len__(self) -> int:
        return len(self.solutions)

    def __iter__(self):
        return iter(self.solutions)

    def format_solutions(self) -> str:
        """One `name(arg1, arg2)` line per solution."""
        return '\n'.join(map(str, self.solutions))
