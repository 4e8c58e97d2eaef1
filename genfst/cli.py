"""
GenFST CLI - Command-line interface for the transducer.

Usage:
    genfst parse <rules_file> <input>...   Transduce inputs
    genfst stats <rules_file>              Show graph statistics
    genfst validate <rules_file>           Check rules for errors
    genfst serve                           Run the HTTP API

A rules file is JSON: a list of rules, each a list of items. A string
item is literal text, a two-element list is [source, destination]:

    [["play", ["s", "^s"]], ["act", ["ing", ""]]]
"""

import argparse
import json
import logging
import os
import sys

from .fst import compile_rules, parse_batch, stats
from .rule_spec import validate_rules, RuleValidationError
from .engine_core import ResultKind


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="GenFST - rule-driven finite-state transducer",
        prog="genfst",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Transduce inputs")
    parse_parser.add_argument("rules_file", help="Path to rules JSON file")
    parse_parser.add_argument("inputs", nargs="+", help="Input strings")
    parse_parser.add_argument("--json", action="store_true", help="Emit JSON")

    # Stats command
    stats_parser = subparsers.add_parser("stats", help="Show graph statistics")
    stats_parser.add_argument("rules_file", help="Path to rules JSON file")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Check rules for errors")
    validate_parser.add_argument("rules_file", help="Path to rules JSON file")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "parse":
        return cmd_parse(args)
    elif args.command == "stats":
        return cmd_stats(args)
    elif args.command == "validate":
        return cmd_validate(args)
    elif args.command == "serve":
        return cmd_serve(args)
    else:
        parser.print_help()
        return 1


def log_level(verbose: bool = False) -> str:
    """Level name from --verbose or GENFST_LOG_LEVEL, WARNING if unrecognised."""
    if verbose:
        return "DEBUG"
    level = os.getenv("GENFST_LOG_LEVEL", "WARNING").upper()
    # unknown names map to "Level <name>" strings
    if not isinstance(logging.getLevelName(level), int):
        return "WARNING"
    return level


def configure_logging(verbose: bool = False):
    """Set up root logging from --verbose or GENFST_LOG_LEVEL."""
    logging.basicConfig(
        level=log_level(verbose),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_rules(path: str) -> list:
    """Read a rules JSON file. Exits with status 1 on I/O or JSON errors."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            rules = json.load(f)
    except FileNotFoundError:
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {path}: {e}", file=sys.stderr)
        sys.exit(1)

    if not isinstance(rules, list):
        print(f"Error: {path} must contain a list of rules", file=sys.stderr)
        sys.exit(1)

    # JSON pairs arrive as lists
    return [
        [tuple(item) if isinstance(item, list) else item for item in r]
        if isinstance(r, list) else r
        for r in rules
    ]


def build_fst(path: str):
    rules = load_rules(path)
    try:
        return compile_rules(rules)
    except RuleValidationError as e:
        print("Error: invalid rules:", file=sys.stderr)
        for err in e.errors:
            print(f"  - {err}", file=sys.stderr)
        sys.exit(1)


def cmd_parse(args) -> int:
    """Transduce each input and print the result."""
    fst = build_fst(args.rules_file)
    results = parse_batch(fst, args.inputs)

    if args.json:
        print(json.dumps(
            [
                {"input": text, "result": list(result.as_tuple())}
                for text, result in zip(args.inputs, results)
            ],
            ensure_ascii=False,
            indent=2,
        ))
    else:
        for text, result in zip(args.inputs, results):
            if result.kind == ResultKind.SUCCESS:
                print(f"{text}\tok\t{result.output}")
            elif result.kind == ResultKind.AMBIGUOUS:
                print(f"{text}\tambiguous\t{', '.join(result.outputs)}")
            else:
                print(f"{text}\terror\t{result.error}")

    return 0 if all(r.accepted for r in results) else 1


def cmd_stats(args) -> int:
    """Print graph statistics."""
    fst = build_fst(args.rules_file)
    info = stats(fst)
    print(f"Vertices: {info.vertex_count}")
    print(f"Edges: {info.edge_count}")
    print(f"Terminal vertices: {info.terminal_vertices}")
    return 0


def cmd_validate(args) -> int:
    """Validate rules without building."""
    rules = load_rules(args.rules_file)
    result = validate_rules(rules)

    print(f"Rules: {len(rules)}")
    if result.warnings:
        print("\nWarnings:")
        for w in result.warnings:
            print(f"  - {w}")

    if result.errors:
        print("\nErrors:")
        for e in result.errors:
            print(f"  - {e}")
        return 1

    print("OK")
    return 0


def cmd_serve(args) -> int:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "genfst.api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
