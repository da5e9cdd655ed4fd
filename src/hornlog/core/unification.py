"""Unification of flat predicates."""

from typing import Dict, Optional, Mapping

from .logic import Term, Variable, Predicate


# Unification failure is a normal outcome, not an exception.
UNIFY_FAIL = None


class Substitution:
    """Represents a substitution mapping variables to terms."""

    def __init__(self, mapping: Optional[Mapping[Variable, Term]] = None):
        self.mapping: Dict[Variable, Term] = dict(mapping or {})

    def bind(self, var: Variable, term: Term) -> None:
        self.mapping[var] = term

    def lookup(self, term: Term) -> Term:
        """Replace a bound variable once; no chasing of chains."""
        if isinstance(term, Variable):
            return self.mapping.get(term, term)
        return term

    def apply(self, predicate: Predicate) -> Predicate:
        return Predicate(predicate.name, [self.lookup(arg) for arg in predicate.args])

    def walk(self, term: Term) -> Term:
        """Follow variable bindings until an unbound variable or a constant."""
        while isinstance(term, Variable) and term in self.mapping:
            term = self.mapping[term]
        return term

    def resolve(self, predicate: Predicate) -> Predicate:
        """Like apply, but every argument is walked to the end of its chain."""
        return Predicate(predicate.name, [self.walk(arg) for arg in predicate.args])

    def copy(self) -> 'Substitution':
        return Substitution(self.mapping)

    def compose(self, other: 'Substitution') -> 'Substitution':
        """Compose this substitution with another."""
        # Apply other to all values in self
        new_mapping = {var: other.lookup(term) for var, term in self.mapping.items()}

        # Add mappings from other that aren't in self
        for var, term in other.mapping.items():
            if var not in new_mapping:
                new_mapping[var] = term

        return Substitution(new_mapping)

    def __contains__(self, var):
        return var in self.mapping

    def __getitem__(self, var):
        return self.mapping[var]

    def __len__(self):
        return len(self.mapping)

    def __eq__(self, other):
        if not isinstance(other, Substitution):
            return False
        return self.mapping == other.mapping

    def __str__(self):
        if not self.mapping:
            return "{}"
        items = [f"{var} -> {term}" for var, term in self.mapping.items()]
        return "{" + ", ".join(items) + "}"

    __repr__ = __str__


def unify(p1: Predicate, p2: Predicate) -> Optional[Substitution]:
    """Unify two predicates argument by argument.

    Returns a fresh Substitution, or UNIFY_FAIL when names, arities or
    constants disagree. There is no occurs check, and a variable bound twice
    keeps its last binding.
    """
    if p1.name != p2.name or len(p1.args) != len(p2.args):
        return UNIFY_FAIL

    substitution = Substitution()
    for a1, a2 in zip(p1.args, p2.args):
        if isinstance(a1, Variable):
            substitution.bind(a1, a2)
        elif isinstance(a2, Variable):
            substitution.bind(a2, a1)
        elif a1 != a2:
            return UNIFY_FAIL
    return substitution


def unify_with(p1: Predicate, p2: Predicate, subst: Substitution) -> Optional[Substitution]:
    """Unify two predicates given an existing substitution.

    Both sides are walked through subst first, so a variable that is already
    bound has to agree with its binding. When both sides are unbound
    variables the one from p2 is bound to the one from p1. subst itself is
    never modified; a new Substitution is returned, or UNIFY_FAIL.
    """
    if p1.name != p2.name or len(p1.args) != len(p2.args):
        return UNIFY_FAIL

    result = subst.copy()
    for a1, a2 in zip(p1.args, p2.args):
        a1 = result.walk(a1)
        a2 = result.walk(a2)
        if a1 == a2:
            continue
        if isinstance(a2, Variable):
            result.bind(a2, a1)
        elif isinstance(a1, Variable):
            result.bind(a1, a2)
        else:
            return UNIFY_FAIL
    return result


def apply_substitution(predicate: Predicate, substitution: Substitution) -> Predicate:
    """Instantiate the bound variables of a predicate."""
    return substitution.apply(predicate)


def rename_variables(predicate: Predicate, suffix: str) -> Predicate:
    """Rename all variables in a predicate by adding a suffix."""
    return Predicate(predicate.name, [
        Variable(arg.name + suffix) if isinstance(arg, Variable) else arg
        for arg in predicate.args
    ])
