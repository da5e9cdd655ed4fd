#!/usr/bin/env python3
"""
Answer queries against a knowledge file.

USAGE:
    hornlog family.pl -q "grandparent(john, Z)"
    hornlog family.pl -q "parent(X, Y)" --trace
    hornlog family.pl --queries queries.txt --json results.json
    hornlog family.pl -q "ancestor(a, X)" --strategy shallow --max-depth 50
"""

import argparse
import json
import sys
from pathlib import Path

from tqdm import tqdm

from hornlog.core.exception import HornlogError
from hornlog.engine import Engine
from hornlog.fileformats.parser import COMMENT_PREFIX
from hornlog.proofs.serialization import ProofJSONEncoder
from hornlog.resolution.registry import list_strategies
from hornlog.utils.config import Config, get_config
from hornlog.utils.log import setup_logging


def read_queries(path: Path) -> list:
    with open(path) as f:
        lines = [line.strip() for line in f]
    return [line for line in lines if line and not line.startswith(COMMENT_PREFIX)]


def print_result(result, show_trace: bool = False):
    if result:
        print("Results:")
        print(result.format_solutions())
    else:
        print("No solution found.")
    if show_trace and len(result.trace):
        print("Derivation:")
        print(result.trace.format_tree())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Answer Horn clause queries against a knowledge file",
    )
    parser.add_argument("knowledge", nargs="+", help="Knowledge file(s) with one fact or rule per line")
    parser.add_argument("-q", "--query", action="append", default=[], help="Query to answer (repeatable)")
    parser.add_argument("--queries", type=Path, help="File with one query per line")
    parser.add_argument("--trace", action="store_true", help="Print the derivation tree of each query")
    parser.add_argument("--json", type=Path, help="Write all results as JSON to this file")
    parser.add_argument("--strategy", choices=list_strategies(), help="Resolution strategy")
    parser.add_argument("--max-depth", type=int, help="Recursion limit for proof search")
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    config = Config(args.config) if args.config else get_config()
    overrides = {}
    if args.strategy:
        overrides.setdefault("resolution", {})["strategy"] = args.strategy
    if args.max_depth is not None:
        overrides.setdefault("resolution", {})["max_depth"] = args.max_depth
    if args.log_level:
        overrides["logging"] = {"level": args.log_level}
    config.update(overrides)

    setup_logging(config.get("logging.level", "WARNING"))

    queries = list(args.query)
    if args.queries:
        queries += read_queries(args.queries)
    if not queries:
        print("Error: no query given (use -q or --queries)", file=sys.stderr)
        return 2

    try:
        engine = Engine.from_config(config)
        for path in args.knowledge:
            engine.consult(path)
    except (HornlogError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    results = []
    failed = False
    batch = len(queries) > 1 and args.queries is not None
    for text in tqdm(queries, desc="Resolving queries", disable=not batch, file=sys.stderr):
        print(f"?- {text}")
        try:
            result = engine.resolve_query(text)
        except HornlogError as e:
            print(f"Error: {e}", file=sys.stderr)
            failed = True
            continue
        print_result(result, show_trace=args.trace)
        results.append(result)

    if args.json:
        with open(args.json, "w") as f:
            json.dump(results, f, cls=ProofJSONEncoder, indent=2)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
