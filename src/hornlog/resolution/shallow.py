"""Single-pass resolution.

Each rule body predicate is proved once with the head substitution applied
and only has to succeed at least once; bindings found in the body are not
carried over to later body predicates or to the answer.
"""

import logging
from typing import List, Tuple

from hornlog.core.logic import Predicate, Fact, Rule
from hornlog.core.unification import UNIFY_FAIL, unify, apply_substitution
from .base import Strategy, SearchContext


logger = logging.getLogger(__name__)


class ShallowStrategy(Strategy):

    @property
    def name(self) -> str:
        return "shallow"

    def solve(self,
              goal: Predicate,
              context: SearchContext,
              path: Tuple[Predicate, ...] = (),
              depth: int = 0) -> List[Predicate]:
        context.check_depth(depth, goal)
        results = []
        for entry in context.knowledge_base:
            if isinstance(entry, Fact):
                substitution = unify(goal, entry.predicate)
                if substitution is UNIFY_FAIL:
                    continue
                results.append(apply_substitution(goal, substitution))
                context.trace.record(path + (entry.predicate,))

            elif isinstance(entry, Rule) and entry.head.name == goal.name:
                substitution = unify(goal, entry.head)
                if substitution is UNIFY_FAIL:
                    continue
                new_path = path + (entry.head,)
                resolved = True
                for body_predicate in entry.body:
                    subgoal = apply_substitution(body_predicate, substitution)
                    if not self.solve(subgoal, context, new_path, depth + 1):
                        logger.debug("Rule %s abandoned at %s", entry, subgoal)
                        resolved = False
                        break
                if resolved:
                    results.append(apply_substitution(goal, substitution))
                    context.trace.record(new_path)
        return results
