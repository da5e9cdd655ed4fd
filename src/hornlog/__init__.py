"""
hornlog: a minimal logic-programming inference engine.

hornlog stores facts and Horn clause rules and answers queries against them
by unification and depth-first resolution with backtracking. It includes:

- Constants, variables, predicates, facts and rules
- An insertion-ordered knowledge base
- A lark-based parser for `name(args)` statements and `head :- body` rules
- Unification and substitution
- SLD and single-pass resolution strategies
- Derivation traces exportable as networkx trees or JSON

Basic usage:
    >>> from hornlog import Engine
    >>> engine = Engine()
    >>> engine.add_knowledge('''
    ... parent(john, mary).
    ... parent(mary, ann).
    ... grandparent(X, Z) :- parent(X, Y), parent(Y, Z).
    ... ''')
    3
    >>> result = engine.resolve_query("grandparent(john, Z)")
    >>> print(result.format_solutions())
    grandparent(john, ann)
"""

__version__ = "0.1.0"

# Core logic structures
from hornlog.core import (
    Term, Constant, Variable, Predicate,
    Clause, Fact, Rule,
    is_variable, make_term,
    KnowledgeBase,
    HornlogError, ParseError, ResolutionDepthError
)

# Unification
from hornlog.core.unification import (
    Substitution, UNIFY_FAIL, unify, apply_substitution
)

# Parsing
from hornlog.fileformats import (
    parse_statement, parse_predicate, parse_knowledge_text,
    get_format_handler
)

# Derivations
from hornlog.proofs import (
    Derivation, DerivationTrace, QueryResult,
    result_to_json, trace_to_json
)

# Resolution
from hornlog.resolution import (
    Resolver, resolve, get_strategy
)

# Engine
from hornlog.engine import Engine, resolve_query

# Configuration
from hornlog.utils.config import get_config


__all__ = [
    # Version
    "__version__",

    # Core logic
    "Term", "Constant", "Variable", "Predicate",
    "Clause", "Fact", "Rule",
    "is_variable", "make_term",
    "KnowledgeBase",
    "HornlogError", "ParseError", "ResolutionDepthError",

    # Unification
    "Substitution", "UNIFY_FAIL", "unify", "apply_substitution",

    # Parsing
    "parse_statement", "parse_predicate", "parse_knowledge_text",
    "get_format_handler",

    # Derivations
    "Derivation", "DerivationTrace", "QueryResult",
    "result_to_json", "trace_to_json",

    # Resolution
    "Resolver", "resolve", "get_strategy",

    # Engine
    "Engine", "resolve_query",

    # Configuration
    "get_config",
]
