"""JSON serialization for derivation traces and query results."""

import json
from pathlib import Path
from typing import Union

from hornlog.core.serialization import CoreJSONEncoder, decode_core_object
from .derivation import Derivation, DerivationTrace
from .result import QueryResult


class ProofJSONEncoder(CoreJSONEncoder):
    """JSON encoder for proof objects."""

    def default(self, obj):
        if isinstance(obj, Derivation):
            return {
                "_type": "Derivation",
                "nodes": list(obj.nodes)
            }

        elif isinstance(obj, DerivationTrace):
            return {
                "_type": "DerivationTrace",
                "derivations": obj.derivations
            }

        elif isinstance(obj, QueryResult):
            return {
                "_type": "QueryResult",
                "query": obj.query,
                "solutions": obj.solutions,
                "trace": obj.trace
            }

        # Fall back to parent encoder
        return super().default(obj)


class ProofJSONDecoder(json.JSONDecoder):
    """JSON decoder for proof objects."""

    def __init__(self):
        super().__init__(object_hook=self.object_hook)

    def object_hook(self, obj):
        # First try core decoder
        result = decode_core_object(obj)
        if result is not obj:
            return result

        if obj.get("_type") == "Derivation":
            return Derivation(tuple(obj["nodes"]))

        elif obj.get("_type") == "DerivationTrace":
            return DerivationTrace(obj["derivations"])

        elif obj.get("_type") == "QueryResult":
            return QueryResult(
                query=obj["query"],
                solutions=obj.get("solutions", []),
                trace=obj.get("trace") or DerivationTrace()
            )

        return obj


def trace_to_json(trace: DerivationTrace, indent: int = 2) -> str:
    return json.dumps(trace, cls=ProofJSONEncoder, indent=indent)


def trace_from_json(json_str: str) -> DerivationTrace:
    return json.loads(json_str, cls=ProofJSONDecoder)


def result_to_json(result: QueryResult, indent: int = 2) -> str:
    return json.dumps(result, cls=ProofJSONEncoder, indent=indent)


def result_from_json(json_str: str) -> QueryResult:
    return json.loads(json_str, cls=ProofJSONDecoder)


def save_result(result: QueryResult, file_path: Union[str, Path]) -> None:
    """Save a QueryResult to a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'w') as f:
        json.dump(result, f, cls=ProofJSONEncoder, indent=2)


def load_result(file_path: Union[str, Path]) -> QueryResult:
    """Load a QueryResult from a JSON file."""
    file_path = Path(file_path)
    with open(file_path, 'r') as f:
        return json.load(f, cls=ProofJSONDecoder)
