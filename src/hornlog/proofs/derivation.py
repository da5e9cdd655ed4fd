"""Derivation traces recorded during resolution."""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

import networkx as nx

from hornlog.core.logic import Predicate


@dataclass(frozen=True)
class Derivation:
    """One successful clause application.

    nodes is the chain of fact predicates and rule heads from the top-level
    query down to the clause that just succeeded, in the order they were used.
    """
    nodes: Tuple[Predicate, ...]

    @property
    def clause(self) -> Predicate:
        """The clause head (or fact) applied at this step."""
        return self.nodes[-1]

    @property
    def depth(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Predicate]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __str__(self) -> str:
        return ' -> '.join(map(str, self.nodes))


class DerivationTrace:
    """Ordered collector of derivations for one query.

    The resolver appends to it; nothing in the search reads it back, so it
    has no influence on which solutions are found.
    """

    def __init__(self, derivations: Iterable[Derivation] = ()):
        self.derivations: List[Derivation] = list(derivations)

    def record(self, path: Iterable[Predicate]) -> Derivation:
        derivation = Derivation(tuple(path))
        self.derivations.append(derivation)
        return derivation

    def __iter__(self) -> Iterator[Derivation]:
        return iter(self.derivations)

    def __len__(self) -> int:
        return len(self.derivations)

    def __getitem__(self, index):
        return self.derivations[index]

    def __eq__(self, other):
        if not isinstance(other, DerivationTrace):
            return False
        return self.derivations == other.derivations

    def __repr__(self) -> str:
        return f"DerivationTrace(derivations={len(self.derivations)})"

    def to_graph(self, root_label: str = "Query") -> nx.DiGraph:
        """Merge all derivations into a prefix tree rooted at the query.

        Node 0 is the root. Every other node stands for one distinct
        derivation prefix and carries the predicate it ends with.
        """
        graph = nx.DiGraph()
        graph.add_node(0, type='query', label=root_label, predicate=None, complete=False)
        mapping = {(): 0}
        for derivation in self.derivations:
            for i, predicate in enumerate(derivation.nodes):
                prefix = derivation.nodes[:i + 1]
                if prefix not in mapping:
                    mapping[prefix] = len(graph.nodes)
                    graph.add_node(mapping[prefix], type='clause', label=str(predicate),
                                   predicate=predicate, complete=False)
                    graph.add_edge(mapping[derivation.nodes[:i]], mapping[prefix])
            graph.nodes[mapping[derivation.nodes]]['complete'] = True
        return graph

    def format_tree(self, root_label: str = "Query", indent: str = "  ") -> str:
        """Render the derivation tree as indented text."""
        graph = self.to_graph(root_label)
        lines = []

        def visit(node, depth):
            lines.append(f"{indent * depth}{graph.nodes[node]['label']}")
            for child in graph.successors(node):
                visit(child, depth + 1)

        visit(0, 0)
        return '\n'.join(lines)
