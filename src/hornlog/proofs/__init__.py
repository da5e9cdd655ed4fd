"""
Derivation traces and query results.
"""

from .derivation import Derivation, DerivationTrace
from .result import QueryResult
from .serialization import (
    ProofJSONEncoder, ProofJSONDecoder,
    trace_to_json, trace_from_json,
    result_to_json, result_from_json,
    save_result, load_result
)

__all__ = [
    'Derivation', 'DerivationTrace', 'QueryResult',
    'ProofJSONEncoder', 'ProofJSONDecoder',
    'trace_to_json', 'trace_from_json',
    'result_to_json', 'result_from_json',
    'save_result', 'load_result'
]
