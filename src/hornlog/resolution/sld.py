"""Depth-first SLD resolution with backtracking.

Clauses are tried in knowledge base order. Every clause application renames
the clause variables apart, and rule bodies are solved as a conjunction:
each solution of a body goal is matched back onto that goal and its bindings
are threaded into the remaining goals. All alternatives are enumerated.

Bindings are kept consistent: a variable that is already bound must agree
with its binding, and answers are read through the full binding chains, so
renamed clause variables never appear in place of a value.
"""

import logging
from typing import Iterator, List, Sequence, Tuple

from hornlog.core.logic import Predicate, Fact, Rule
from hornlog.core.unification import Substitution, UNIFY_FAIL, unify_with
from .base import Strategy, SearchContext


logger = logging.getLogger(__name__)


class SLDStrategy(Strategy):

    @property
    def name(self) -> str:
        return "sld"

    def solve(self,
              goal: Predicate,
              context: SearchContext,
              path: Tuple[Predicate, ...] = (),
              depth: int = 0) -> List[Predicate]:
        context.check_depth(depth, goal)
        logger.debug("%sgoal %s", "  " * depth, goal)
        results = []
        for entry in context.knowledge_base:
            if isinstance(entry, Fact):
                fact = entry.predicate
                if not fact.is_ground():
                    fact, = context.rename(entry)
                substitution = unify_with(goal, fact, Substitution())
                if substitution is UNIFY_FAIL:
                    continue
                results.append(substitution.resolve(goal))
                context.trace.record(path + (entry.predicate,))

            elif isinstance(entry, Rule) and entry.head.name == goal.name:
                head, *body = context.rename(entry)
                substitution = unify_with(goal, head, Substitution())
                if substitution is UNIFY_FAIL:
                    continue
                new_path = path + (entry.head,)
                for bindings in self._solve_conjunction(body, substitution, context, new_path, depth + 1):
                    results.append(bindings.resolve(goal))
                    context.trace.record(new_path)
        return results

    def _solve_conjunction(self,
                           goals: Sequence[Predicate],
                           substitution: Substitution,
                           context: SearchContext,
                           path: Tuple[Predicate, ...],
                           depth: int) -> Iterator[Substitution]:
        """Yield substitution extended by every solution of a list of goals."""
        if not goals:
            yield substitution
            return

        first = substitution.resolve(goals[0])
        for solution in self.solve(first, context, path, depth):
            extended = unify_with(first, solution, substitution)
            if extended is UNIFY_FAIL:
                continue
            yield from self._solve_conjunction(goals[1:], extended, context, path, depth)
