"""
Command-line front end for the expression engine.

    proplogic table "p -> q" --vars p,q --steps
    proplogic classify "p | ~p" --vars p
    proplogic gates "~(p & q)" --vars p,q --json
    proplogic normalize "p && q -> r"
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, Optional

from .assignments import parse_variable_list
from .config import EngineConfig, load_config
from .engine import EvaluationResult, evaluate_expression
from .errors import ConfigError, EngineError
from .gates import GateRef
from .symbols import normalize_symbols

EXIT_OK = 0
EXIT_ENGINE_ERROR = 1
EXIT_CONFIG_ERROR = 2


def _dump(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False))


def _run(args: argparse.Namespace, show_steps: Optional[bool] = None) -> EvaluationResult:
    config: EngineConfig = args.config_obj
    return evaluate_expression(
        args.expression,
        parse_variable_list(args.vars),
        show_steps=show_steps,
        config=config,
    )


def _report_error(args: argparse.Namespace, exc: EngineError) -> int:
    if args.json:
        _dump({"error": exc.to_dict()})
    else:
        print(f"Error: {exc.message}", file=sys.stderr)
    return EXIT_ENGINE_ERROR


def cmd_table(args: argparse.Namespace) -> int:
    """Print the truth table and its classification."""
    show_steps = True if args.steps else None
    try:
        result = _run(args, show_steps=show_steps)
    except EngineError as exc:
        return _report_error(args, exc)

    if args.json:
        _dump(result.to_dict())
        return EXIT_OK

    style = args.style or args.config_obj.output_style
    print(result.table.render(style))
    print()
    print(f"Expression type: {result.classification.label}")
    print(f"Without conditionals: {result.simplified.to_text()}")
    return EXIT_OK


def cmd_classify(args: argparse.Namespace) -> int:
    try:
        result = _run(args, show_steps=False)
    except EngineError as exc:
        return _report_error(args, exc)

    if args.json:
        _dump({"expression": args.expression, "classification": result.classification.value})
    else:
        print(result.classification.label)
    return EXIT_OK


def cmd_gates(args: argparse.Namespace) -> int:
    """Print the gate decomposition."""
    try:
        result = _run(args, show_steps=False)
    except EngineError as exc:
        return _report_error(args, exc)

    graph = result.gate_graph
    summary = graph.summary(len(result.request.variables))
    if args.json:
        _dump({"gate_graph": graph.to_dict(), "summary": summary})
        return EXIT_OK

    print(f"Inputs: {summary['inputs']}")
    print(f"Outputs: {summary['outputs']}")
    print(f"Total gates: {summary['total_gates']}")
    detail = ", ".join(f"{name}: {count}" for name, count in summary["gates"].items())
    print(f"Gate detail: {detail or 'no gates'}")
    for gate in graph.gates:
        inputs = ", ".join(
            ref.gate_id if isinstance(ref, GateRef) else ref.name for ref in gate.inputs
        )
        print(f"  {gate.id}: {gate.type.value}({inputs})")
    output = graph.output_gate_id or result.parsed.ast.to_text()
    print(f"Output: {output}")
    return EXIT_OK


def cmd_normalize(args: argparse.Namespace) -> int:
    print(normalize_symbols(args.expression))
    return EXIT_OK


def _add_expression_args(sub: argparse.ArgumentParser) -> None:
    sub.add_argument("expression", type=str, help="Expression, e.g. \"(p -> q) & r\"")
    sub.add_argument(
        "--vars",
        type=str,
        required=True,
        help="Comma separated variable names in column order, e.g. p,q,r",
    )
    sub.add_argument("--json", action="store_true", help="Output as JSON")


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Truth tables, classification and gate decomposition for propositional formulas"
    )
    parser.add_argument("--config", type=str, default=None, help="Path to an engine YAML config")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    table_parser = subparsers.add_parser("table", help="Print the truth table")
    _add_expression_args(table_parser)
    table_parser.add_argument("--steps", action="store_true", help="Add intermediate columns")
    table_parser.add_argument(
        "--style",
        type=str,
        choices=["TF", "VF", "01"],
        default=None,
        help="Cell format (default: from config)",
    )

    classify_parser = subparsers.add_parser(
        "classify",
        help="Report tautology, contradiction or contingency",
    )
    _add_expression_args(classify_parser)

    gates_parser = subparsers.add_parser("gates", help="Decompose into logic gates")
    _add_expression_args(gates_parser)

    normalize_parser = subparsers.add_parser("normalize", help="Rewrite operator aliases")
    normalize_parser.add_argument("expression", type=str)

    args = parser.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        return 1

    try:
        args.config_obj = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.command == "table":
        return cmd_table(args)
    elif args.command == "classify":
        return cmd_classify(args)
    elif args.command == "gates":
        return cmd_gates(args)
    elif args.command == "normalize":
        return cmd_normalize(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
