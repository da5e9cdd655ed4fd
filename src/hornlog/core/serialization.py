"""JSON serialization for core objects."""

import json
from typing import Dict, Any

from .logic import Constant, Variable, Predicate, Fact, Rule


class CoreJSONEncoder(json.JSONEncoder):
    """JSON encoder for terms, predicates and clauses."""

    def default(self, obj):
        # Terms
        if isinstance(obj, Variable):
            return {
                "_type": "Variable",
                "name": obj.name
            }

        elif isinstance(obj, Constant):
            return {
                "_type": "Constant",
                "name": obj.name
            }

        # Predicates
        elif isinstance(obj, Predicate):
            return {
                "_type": "Predicate",
                "name": obj.name,
                "args": list(obj.args)
            }

        # Clauses
        elif isinstance(obj, Fact):
            return {
                "_type": "Fact",
                "predicate": obj.predicate
            }

        elif isinstance(obj, Rule):
            return {
                "_type": "Rule",
                "head": obj.head,
                "body": list(obj.body)
            }

        return super().default(obj)


def decode_core_object(dct: Dict[str, Any]) -> Any:
    """Decode a JSON dictionary back to core objects."""
    if "_type" not in dct:
        return dct

    obj_type = dct["_type"]

    if obj_type == "Variable":
        return Variable(dct["name"])

    elif obj_type == "Constant":
        return Constant(dct["name"])

    elif obj_type == "Predicate":
        return Predicate(dct["name"], dct["args"])

    elif obj_type == "Fact":
        return Fact(dct["predicate"])

    elif obj_type == "Rule":
        return Rule(dct["head"], dct["body"])

    return dct


def predicate_to_json(predicate: Predicate, indent: int = 2) -> str:
    return json.dumps(predicate, cls=CoreJSONEncoder, indent=indent)


def predicate_from_json(json_str: str) -> Predicate:
    return json.loads(json_str, object_hook=decode_core_object)
