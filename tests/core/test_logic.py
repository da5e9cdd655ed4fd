"""Tests for core.logic module."""

import unittest

from hornlog.core.logic import (
    Constant, Variable, Predicate,
    Clause, Fact, Rule,
    is_variable, make_term
)


class TestTerms(unittest.TestCase):
    """Test constants, variables and their classification."""

    def test_is_variable_on_text(self):
        self.assertTrue(is_variable("X"))
        self.assertTrue(is_variable("Person"))
        self.assertFalse(is_variable("john"))
        self.assertFalse(is_variable("_x"))
        self.assertFalse(is_variable("42"))
        self.assertFalse(is_variable(""))

    def test_is_variable_on_terms(self):
        self.assertTrue(is_variable(Variable("X")))
        self.assertFalse(is_variable(Constant("a")))

    def test_make_term_classifies_once(self):
        x = make_term("X")
        a = make_term("alice")
        self.assertIsInstance(x, Variable)
        self.assertIsInstance(a, Constant)
        self.assertIs(make_term(x), x)

    def test_term_equality(self):
        self.assertEqual(Constant("a"), Constant("a"))
        self.assertNotEqual(Constant("a"), Constant("b"))
        self.assertEqual(Variable("X"), Variable("X"))
        # Same text, different kind
        self.assertNotEqual(Constant("X"), Variable("X"))

    def test_term_hashing(self):
        terms = {Constant("a"), Constant("a"), Variable("X"), Variable("X")}
        self.assertEqual(len(terms), 2)

    def test_empty_name_rejected(self):
        with self.assertRaises(TypeError):
            Constant("")


class TestPredicates(unittest.TestCase):

    def test_predicate_from_strings(self):
        p = Predicate("parent", ["john", "X"])
        self.assertEqual(p.name, "parent")
        self.assertEqual(p.arity, 2)
        self.assertEqual(p.args, (Constant("john"), Variable("X")))

    def test_predicate_repr(self):
        p = Predicate("parent", ["john", "mary"])
        self.assertEqual(str(p), "parent(john, mary)")
        self.assertEqual(str(Predicate("halt")), "halt()")

    def test_predicate_equality(self):
        self.assertEqual(Predicate("p", ["a", "X"]), Predicate("p", ["a", "X"]))
        self.assertNotEqual(Predicate("p", ["a"]), Predicate("q", ["a"]))
        self.assertNotEqual(Predicate("p", ["a"]), Predicate("p", ["a", "a"]))
        self.assertEqual(len({Predicate("p", ["a"]), Predicate("p", ["a"])}), 1)

    def test_variables_and_groundness(self):
        p = Predicate("p", ["X", "a", "Y", "X"])
        self.assertEqual(p.variables(), {Variable("X"), Variable("Y")})
        self.assertFalse(p.is_ground())
        self.assertTrue(Predicate("p", ["a", "b"]).is_ground())

    def test_invalid_arguments(self):
        with self.assertRaises(TypeError):
            Predicate("", ["a"])
        with self.assertRaises(TypeError):
            Predicate("p", [42])


class TestClauses(unittest.TestCase):

    def setUp(self):
        self.parent = Predicate("parent", ["X", "Y"])
        self.ancestor = Predicate("ancestor", ["X", "Y"])

    def test_fact(self):
        fact = Fact(Predicate("parent", ["john", "mary"]))
        self.assertIsInstance(fact, Clause)
        self.assertEqual(fact.name, "parent")
        self.assertEqual(fact.head, fact.predicate)
        self.assertEqual(str(fact), "parent(john, mary).")

    def test_rule(self):
        rule = Rule(self.ancestor, [self.parent])
        self.assertEqual(rule.name, "ancestor")
        self.assertEqual(rule.body, (self.parent,))
        self.assertEqual(str(rule), "ancestor(X, Y) :- parent(X, Y).")
        self.assertEqual(rule.variables(), {Variable("X"), Variable("Y")})

    def test_rule_with_empty_body(self):
        rule = Rule(self.ancestor)
        self.assertEqual(rule.body, ())
        self.assertEqual(str(rule), "ancestor(X, Y) :- .")

    def test_clause_equality(self):
        self.assertEqual(Fact(self.parent), Fact(self.parent))
        self.assertNotEqual(Fact(self.ancestor), Rule(self.ancestor))
        self.assertEqual(Rule(self.ancestor, [self.parent]), Rule(self.ancestor, [self.parent]))

    def test_invalid_clauses(self):
        with self.assertRaises(TypeError):
            Fact("parent(john, mary)")
        with self.assertRaises(TypeError):
            Rule(self.ancestor, ["parent(X, Y)"])


if __name__ == '__main__':
    unittest.main()
