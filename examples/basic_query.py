#!/usr/bin/env python3
"""
Basic query example.

This example loads a family tree, answers a few queries with both
resolution strategies and prints the derivation tree of one of them.
"""

from pathlib import Path

from hornlog import Engine
from hornlog.proofs import result_to_json


def run_queries(engine, queries):
    for text in queries:
        result = engine.resolve_query(text)
        print(f"?- {text}")
        if result:
            for solution in result:
                print(f"  {solution}")
        else:
            print("  No solution found.")
    print()


def main():
    engine = Engine()
    engine.consult(Path(__file__).parent / "family.pl")
    print(f"Knowledge base with {len(engine.knowledge_base)} clauses:")
    print(engine.knowledge_base)
    print()

    queries = ["parent(john, X)", "grandparent(john, Z)", "ancestor(john, Who)", "sibling(ann, X)"]

    print("SLD resolution:")
    run_queries(engine, queries)

    # Same knowledge base, single-pass body resolution
    print("Shallow resolution:")
    run_queries(Engine(engine.knowledge_base, strategy="shallow"), queries)

    result = engine.resolve_query("grandparent(john, Z)")
    print("Derivation tree for grandparent(john, Z):")
    print(result.trace.format_tree())
    print()

    graph = result.trace.to_graph()
    print(f"Derivation graph: {graph.number_of_nodes()} nodes, {graph.number_of_edges()} edges")
    print(result_to_json(result)[:200] + "...")


if __name__ == "__main__":
    main()
