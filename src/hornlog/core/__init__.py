"""Core knowledge representation and unification."""

from .logic import (
    Term, Constant, Variable, Predicate,
    Clause, Fact, Rule,
    is_variable, make_term
)
from .knowledge import KnowledgeBase
from .unification import (
    Substitution, UNIFY_FAIL, unify, unify_with, apply_substitution, rename_variables
)
from .exception import HornlogError, ParseError, ResolutionDepthError
from .serialization import (
    CoreJSONEncoder, decode_core_object,
    predicate_to_json, predicate_from_json
)

__all__ = [
    # Logic
    'Term', 'Constant', 'Variable', 'Predicate',
    'Clause', 'Fact', 'Rule',
    'is_variable', 'make_term',
    # Knowledge base
    'KnowledgeBase',
    # Unification
    'Substitution', 'UNIFY_FAIL', 'unify', 'unify_with', 'apply_substitution',
    'rename_variables',
    # Errors
    'HornlogError', 'ParseError', 'ResolutionDepthError',
    # Serialization
    'CoreJSONEncoder', 'decode_core_object',
    'predicate_to_json', 'predicate_from_json'
]
