"""Knowledge base of facts and rules."""

import logging
from typing import Iterable, Iterator, List, Optional

from .logic import Clause, Fact, Rule


logger = logging.getLogger(__name__)


class KnowledgeBase:
    """An insertion-ordered, append-only collection of clauses.

    Duplicates are legal and each copy is tried independently during
    resolution. The store is never mutated while a query is running.
    """

    def __init__(self, clauses: Optional[Iterable[Clause]] = None):
        self._clauses: List[Clause] = []
        if clauses:
            self.extend(clauses)

    def add(self, clause: Clause) -> None:
        """Append a single fact or rule."""
        if not isinstance(clause, Clause):
            raise TypeError(f"Expected Clause, got {clause!r}")
        self._clauses.append(clause)
        logger.debug("Added clause %s", clause)

    def extend(self, clauses: Iterable[Clause]) -> None:
        clauses = list(clauses)
        for clause in clauses:
            if not isinstance(clause, Clause):
                raise TypeError(f"Expected Clause, got {clause!r}")
        self._clauses.extend(clauses)

    def clear(self) -> None:
        self._clauses.clear()

    @property
    def clauses(self) -> List[Clause]:
        return list(self._clauses)

    @property
    def facts(self) -> List[Fact]:
        return [clause for clause in self._clauses if isinstance(clause, Fact)]

    @property
    def rules(self) -> List[Rule]:
        return [clause for clause in self._clauses if isinstance(clause, Rule)]

    def clauses_for(self, name: str) -> List[Clause]:
        """Facts and rules whose predicate (or head) is called name."""
        return [clause for clause in self._clauses if clause.name == name]

    def predicate_names(self) -> List[str]:
        names = []
        for clause in self._clauses:
            if clause.name not in names:
                names.append(clause.name)
        return names

    def __iter__(self) -> Iterator[Clause]:
        return iter(self._clauses)

    def __len__(self) -> int:
        return len(self._clauses)

    def __contains__(self, clause) -> bool:
        return clause in self._clauses

    def __repr__(self):
        return '\n'.join(map(str, self._clauses))
