"""Base class for resolution strategies."""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from hornlog.core.exception import ResolutionDepthError
from hornlog.core.knowledge import KnowledgeBase
from hornlog.core.logic import Predicate, Clause
from hornlog.core.unification import rename_variables
from hornlog.proofs.derivation import DerivationTrace


class SearchContext:
    """State owned by one query: the store, the trace and the fresh-name counter."""

    def __init__(self,
                 knowledge_base: KnowledgeBase,
                 trace: Optional[DerivationTrace] = None,
                 max_depth: Optional[int] = None):
        self.knowledge_base = knowledge_base
        self.trace = trace if trace is not None else DerivationTrace()
        self.max_depth = max_depth
        self.counter = 0

    def check_depth(self, depth: int, goal: Predicate) -> None:
        if self.max_depth is not None and depth > self.max_depth:
            raise ResolutionDepthError(self.max_depth, goal)

    def rename(self, clause: Clause) -> Tuple[Predicate, ...]:
        """Rename the variables of a clause apart from everything seen so far.

        The suffix contains a colon, which the parser never accepts inside an
        argument, so renamed variables cannot collide with query variables.
        """
        self.counter += 1
        suffix = f":{self.counter}"
        return tuple(rename_variables(predicate, suffix) for predicate in clause.predicates())


class Strategy(ABC):
    """Abstract base class for proof search strategies."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the strategy."""
        pass

    @abstractmethod
    def solve(self,
              goal: Predicate,
              context: SearchContext,
              path: Tuple[Predicate, ...] = (),
              depth: int = 0) -> List[Predicate]:
        """
        Prove a goal against the knowledge base of the context.

        Args:
            goal: Predicate to prove
            context: Per-query search state
            path: Clauses applied on the way to this goal
            depth: Current recursion depth

        Returns:
            Instances of the goal, one per successful proof, in knowledge base order
        """
        pass
