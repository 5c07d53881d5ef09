#!/usr/bin/env python3
"""
rpncalc.py - command line front end for the RPN evaluator.

Runs fully locally; the HTTP API does not need to be running.

Configuration: environment variables with the RPNCALC_ prefix
or a .env file (e.g. RPNCALC_OPERATOR_SET=narrow).

Subcommands:
    eval   - evaluate one expression
    file   - evaluate every non-blank line of a file
    repl   - read expressions from stdin until EOF or "quit"

Usage:
    python rpncalc.py eval "5 5 + 5 +"
    python rpncalc.py eval --narrow "1 2 -"
    python rpncalc.py file expressions.txt
    python rpncalc.py repl
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.evaluator.state_machine_evaluator import StateMachineEvaluator
from adapters.result_formatter import describe_result
from config import Settings
from contracts import EvaluationResult, OperatorSet

logger = logging.getLogger("rpncalc.cli")

_QUIT_WORDS = {"quit", "exit"}


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _short(value: Any, limit: int = 64) -> str:
    s = str(value).replace("\n", " ").strip()
    if len(s) <= limit:
        return s
    return s[: limit - 3] + "..."


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    _console().print(table)


def _print_results_table(title: str, rows: list[tuple[int, str, EvaluationResult]]) -> None:
    table = Table(title=f"{title} [{len(rows)}]", box=box.ASCII, show_lines=False)
    table.add_column("Line", justify="right", no_wrap=True, style="cyan")
    table.add_column("Expression")
    table.add_column("Kind", no_wrap=True)
    table.add_column("Result")
    for lineno, expression, result in rows:
        table.add_row(
            str(lineno),
            _short(expression, 44),
            result.kind,
            describe_result(result),
        )
    _console().print(table)


def _evaluator(args: argparse.Namespace) -> StateMachineEvaluator:
    operator_set = OperatorSet.NARROW if args.narrow else Settings().operator_set
    return StateMachineEvaluator(operator_set)


# -- subcommands -----------------------------------------------------------

def _eval(args: argparse.Namespace) -> int:
    evaluator = _evaluator(args)
    result = evaluator.evaluate(args.expression)
    _print_kv_table("Evaluation", [
        ("input", args.expression),
        ("operator set", evaluator.operator_set.value),
        ("kind", result.kind),
        ("result", describe_result(result)),
    ])
    return 0 if result.is_success else 1


def _file(args: argparse.Namespace) -> int:
    path = Path(args.path)
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        print(f"Error: cannot read {path}: {exc}", file=sys.stderr)
        return 1

    evaluator = _evaluator(args)
    rows = [
        (lineno, line, evaluator.evaluate(line))
        for lineno, line in enumerate(lines, start=1)
        if line.strip()
    ]
    _print_results_table(path.name, rows)
    failed = sum(1 for _, _, result in rows if not result.is_success)
    if failed:
        logger.info("%d of %d expressions failed", failed, len(rows))
    return 1 if failed else 0


def _repl(args: argparse.Namespace) -> int:
    evaluator = _evaluator(args)
    for line in sys.stdin:
        line = line.rstrip("\n")
        if line.strip() in _QUIT_WORDS:
            break
        if not line.strip():
            continue
        result = evaluator.evaluate(line)
        prefix = "=" if result.is_success else "error:"
        _console().print(f"{prefix} {describe_result(result)}", markup=False)
    return 0


# -- main ------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rpncalc",
        description="rpncalc - 32-bit integer RPN calculator",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # eval
    p = sub.add_parser("eval", help="Evaluate one expression")
    p.add_argument("expression", help='RPN expression, e.g. "5 5 + 5 +"')
    p.add_argument("--narrow", action="store_true",
                   help="Accept only + and - (report Underflow on subtraction)")

    # file
    p = sub.add_parser("file", help="Evaluate every non-blank line of a file")
    p.add_argument("path", help="Path to a file with one expression per line")
    p.add_argument("--narrow", action="store_true")

    # repl
    p = sub.add_parser("repl", help="Read expressions from stdin until EOF or 'quit'")
    p.add_argument("--narrow", action="store_true")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=Settings().log_level.upper())

    commands = {
        "eval": _eval,
        "file": _file,
        "repl": _repl,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
