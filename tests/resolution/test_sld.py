"""Tests for depth-first SLD resolution."""

import unittest

from hornlog.core.exception import ResolutionDepthError
from hornlog.core.knowledge import KnowledgeBase
from hornlog.core.logic import Predicate, Rule
from hornlog.fileformats.parser import parse_knowledge_text, parse_predicate
from hornlog.resolution.base import SearchContext
from hornlog.resolution.sld import SLDStrategy


def kb_from(text):
    return KnowledgeBase(parse_knowledge_text(text))


def solve(text, query, max_depth=None):
    context = SearchContext(kb_from(text), max_depth=max_depth)
    solutions = SLDStrategy().solve(parse_predicate(query), context)
    return [str(s) for s in solutions], context.trace


FAMILY = """
parent(john, mary).
parent(mary, ann).
grandparent(X, Z) :- parent(X, Y), parent(Y, Z).
"""

ANCESTRY = """
parent(a, b).
parent(b, c).
parent(c, d).
ancestor(X, Y) :- parent(X, Y).
ancestor(X, Y) :- parent(X, Z), ancestor(Z, Y).
"""


class TestSLDStrategy(unittest.TestCase):

    def test_name(self):
        self.assertEqual(SLDStrategy().name, "sld")

    def test_single_fact(self):
        solutions, trace = solve("parent(john, mary).", "parent(john, X)")
        self.assertEqual(solutions, ["parent(john, mary)"])
        self.assertEqual([str(d) for d in trace], ["parent(john, mary)"])

    def test_grandparent(self):
        solutions, _ = solve(FAMILY, "grandparent(john, Z)")
        self.assertEqual(solutions, ["grandparent(john, ann)"])

    def test_grandparent_trace(self):
        _, trace = solve(FAMILY, "grandparent(john, Z)")
        self.assertEqual([str(d) for d in trace], [
            "grandparent(X, Z) -> parent(john, mary)",
            "grandparent(X, Z) -> parent(mary, ann)",
            "grandparent(X, Z)",
        ])

    def test_all_matching_facts_enumerated(self):
        solutions, _ = solve("parent(john, mary).\nparent(john, bob).\nparent(ann, tim).",
                             "parent(john, X)")
        self.assertEqual(solutions, ["parent(john, mary)", "parent(john, bob)"])

    def test_duplicate_facts_each_tried(self):
        solutions, trace = solve("p(a).\np(a).", "p(X)")
        self.assertEqual(solutions, ["p(a)", "p(a)"])
        self.assertEqual(len(trace), 2)

    def test_absent_predicate(self):
        solutions, trace = solve(FAMILY, "sibling(john, X)")
        self.assertEqual(solutions, [])
        self.assertEqual(len(trace), 0)

    def test_ground_query(self):
        self.assertEqual(solve(FAMILY, "grandparent(john, ann)")[0], ["grandparent(john, ann)"])
        self.assertEqual(solve(FAMILY, "grandparent(mary, ann)")[0], [])

    def test_recursive_rules(self):
        solutions, _ = solve(ANCESTRY, "ancestor(a, W)")
        self.assertEqual(solutions, ["ancestor(a, b)", "ancestor(a, c)", "ancestor(a, d)"])

    def test_backtracking_across_body(self):
        text = "p(a).\np(b).\nq(b).\nr(X) :- p(X), q(X)."
        self.assertEqual(solve(text, "r(Y)")[0], ["r(b)"])
        self.assertEqual(solve(text, "r(a)")[0], [])

    def test_every_body_combination(self):
        text = "c(red).\nc(blue).\npair(X, Y) :- c(X), c(Y)."
        self.assertEqual(solve(text, "pair(A, B)")[0], [
            "pair(red, red)", "pair(red, blue)", "pair(blue, red)", "pair(blue, blue)",
        ])

    def test_fact_variables_renamed_apart(self):
        solutions, trace = solve("p(b, X).", "p(X, a)")
        self.assertEqual(solutions, ["p(b, a)"])
        # The trace keeps the clause as written
        self.assertEqual(str(trace[0]), "p(b, X)")

    def test_fact_with_variable(self):
        self.assertEqual(solve("likes(X, pizza).", "likes(bob, What)")[0], ["likes(bob, pizza)"])

    def test_fact_with_repeated_variable(self):
        solutions, _ = solve("likes(X, X).", "likes(john, Y)")
        self.assertEqual(solutions, ["likes(john, john)"])

    def test_rule_head_with_repeated_variable(self):
        solutions, _ = solve("thing(a).\nsame(X, X) :- thing(X).", "same(a, Y)")
        self.assertEqual(solutions, ["same(a, a)"])

    def test_renamed_variables_not_in_answers(self):
        solutions, _ = solve("q(a).\np(X, Y) :- q(X).", "p(A, W)")
        self.assertEqual(solutions, ["p(a, W)"])

    def test_repeated_query_variable_must_agree(self):
        text = "q(a, b).\nq(c, c).\np(A, B) :- q(A, B)."
        self.assertEqual(solve(text, "p(X, X)")[0], ["p(c, c)"])
        self.assertEqual(solve("q(a, b).", "q(X, X)")[0], [])

    def test_rule_with_empty_body(self):
        kb = KnowledgeBase([Rule(Predicate('truth', ['X']))])
        context = SearchContext(kb)
        solutions = SLDStrategy().solve(Predicate('truth', ['a']), context)
        self.assertEqual(solutions, [Predicate('truth', ['a'])])
        self.assertEqual([str(d) for d in context.trace], ["truth(X)"])

    def test_rule_failing_body(self):
        solutions, trace = solve("q(a).\np(X) :- q(X), missing(X).", "p(a)")
        self.assertEqual(solutions, [])
        # The successful sub-goal is still recorded
        self.assertEqual([str(d) for d in trace], ["p(X) -> q(a)"])

    def test_path_prefixes_trace(self):
        kb = kb_from("p(a).")
        context = SearchContext(kb)
        root = Predicate('root', ['a'])
        SLDStrategy().solve(Predicate('p', ['X']), context, path=(root,))
        self.assertEqual(context.trace[0].nodes, (root, Predicate('p', ['a'])))

    def test_deterministic(self):
        text = "likes(X, pizza).\n" + FAMILY
        first = solve(text, "likes(Who, What)")
        second = solve(text, "likes(Who, What)")
        self.assertEqual(first[0], second[0])
        self.assertEqual(first[1], second[1])

    def test_max_depth(self):
        text = "loop(X) :- loop(X)."
        with self.assertRaises(ResolutionDepthError) as ctx:
            solve(text, "loop(a)", max_depth=10)
        self.assertEqual(ctx.exception.depth, 10)

    def test_max_depth_allows_shallow_proofs(self):
        self.assertEqual(solve(FAMILY, "grandparent(john, Z)", max_depth=1)[0],
                         ["grandparent(john, ann)"])
        with self.assertRaises(ResolutionDepthError):
            solve(FAMILY, "grandparent(john, Z)", max_depth=0)

    def test_unbounded_recursion(self):
        with self.assertRaises(RecursionError):
            solve("loop(X) :- loop(X).", "loop(a)")


if __name__ == '__main__':
    unittest.main()
