#!/usr/bin/env python3
"""
algebra_cli.py: CLI silnika wyrażeń algebraicznych.

Działa całkowicie lokalnie, nie wymaga uruchomionego serwera API.
Konfiguracja: zmienne środowiskowe z prefiksem ALGEBRA_ENGINE_ lub plik .env.

Podkomendy:
    parse  - sparsuj wyrażenie i pokaż drzewo (JSON)
    eval   - zredukuj wyrażenie do postaci normalnej
    render - wyrenderuj wyrażenie (infiks lub LaTeX)
    equiv  - sprawdź równoważność dwóch wyrażeń (Monte Carlo)

Użycie:
    python algebra_cli.py parse --text "1 + 2 * x"
    python algebra_cli.py eval --text "4 / 2 + 5 - 9" --steps
    python algebra_cli.py render --text "x / (y * 2)" --typeset
    python algebra_cli.py equiv "x + x" "2 * x" --seed 7
"""
from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _safe_terminal_text(value: Any) -> str:
    s = str(value)
    encoding = sys.stdout.encoding or "utf-8"
    try:
        s.encode(encoding)
        return s
    except UnicodeEncodeError:
        return s.encode(encoding, errors="replace").decode(encoding, errors="replace")


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(_safe_terminal_text(key), _safe_terminal_text(value))
    _console().print(table)


def _print_steps_table(steps: list[str]) -> None:
    table = Table(title=f"Steps [{len(steps)}]", box=box.ASCII)
    table.add_column("#", justify="right", no_wrap=True, style="cyan")
    table.add_column("Reduction")
    for i, step in enumerate(steps, 1):
        table.add_row(str(i), _safe_terminal_text(step))
    _console().print(table)


def _read_text(args: argparse.Namespace) -> str:
    text = getattr(args, "text", None) or sys.stdin.read().strip()
    if not text:
        print("Błąd: podaj wyrażenie przez --text lub stdin", file=sys.stderr)
        sys.exit(1)
    return text


def _parse_or_exit(text: str):
    from contracts import ExprSyntaxError
    from engine import parse

    try:
        return parse(text)
    except ExprSyntaxError as e:
        print(f"Błąd składni: {e}", file=sys.stderr)
        sys.exit(1)


# -- podkomendy ------------------------------------------------------------

def _parse(args: argparse.Namespace) -> None:
    from engine import render

    ast = _parse_or_exit(_read_text(args))
    if args.json:
        print(json.dumps(ast.model_dump(), indent=2))
        return
    _print_kv_table("Parsed", [
        ("infix", render(ast)),
        ("tree", ast.model_dump_json()),
    ])


def _eval(args: argparse.Namespace) -> None:
    from engine import evaluate_with_steps, render, render_typeset

    ast = _parse_or_exit(_read_text(args))
    traced = evaluate_with_steps(ast)
    _print_kv_table("Evaluation", [
        ("input", render(ast)),
        ("result", render(traced.result)),
        ("typeset", render_typeset(traced.result)),
    ])
    if args.steps:
        _print_steps_table(traced.steps)


def _render(args: argparse.Namespace) -> None:
    from engine import render, render_typeset

    ast = _parse_or_exit(_read_text(args))
    print(render_typeset(ast) if args.typeset else render(ast))


def _equiv(args: argparse.Namespace) -> None:
    from config import Settings
    from engine import check_equivalence
    from ports.equivalence_checker import EquivalenceConfig

    settings = Settings()
    expr1 = _parse_or_exit(args.expr1)
    expr2 = _parse_or_exit(args.expr2)

    seed = args.seed if args.seed is not None else settings.random_seed
    try:
        config = EquivalenceConfig(
            trials=args.trials if args.trials is not None else settings.equivalence_trials,
            sample_low=settings.sample_low,
            sample_high=settings.sample_high,
            tolerance=settings.tolerance,
        )
    except ValueError as e:
        print(f"Błąd konfiguracji: {e}", file=sys.stderr)
        sys.exit(1)
    report = check_equivalence(expr1, expr2, rng=random.Random(seed), config=config)

    rows: list[tuple[str, Any]] = [
        ("equivalent", "yes" if report.equivalent else "no"),
        ("variables", ", ".join(report.variables) or "-"),
        ("trials run", report.trials_run),
        ("trials skipped", report.trials_skipped),
    ]
    if report.counterexample is not None:
        ce = report.counterexample
        assignment = ", ".join(f"{k}={v}" for k, v in sorted(ce.assignment.items()))
        rows.append(("counterexample", assignment or "-"))
        rows.append(("values", f"{ce.value1!r} vs {ce.value2!r}"))
    _print_kv_table("Equivalence", rows)
    if not report.equivalent:
        sys.exit(2)


# -- main ------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    from config import Settings

    logging.basicConfig(level=Settings().log_level.upper())

    parser = argparse.ArgumentParser(
        prog="algebra",
        description="AlgebraEngine: CLI (lokalny, bez serwera API)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # parse
    p = sub.add_parser("parse", help="Sparsuj wyrażenie")
    p.add_argument("--text", "-t", help="Wyrażenie (lub stdin)")
    p.add_argument("--json", action="store_true", help="Drzewo jako JSON")

    # eval
    p = sub.add_parser("eval", help="Zredukuj wyrażenie do postaci normalnej")
    p.add_argument("--text", "-t", help="Wyrażenie (lub stdin)")
    p.add_argument("--steps", "-s", action="store_true", help="Pokaż kroki redukcji")

    # render
    p = sub.add_parser("render", help="Wyrenderuj wyrażenie")
    p.add_argument("--text", "-t", help="Wyrażenie (lub stdin)")
    p.add_argument("--typeset", action="store_true", help="Zapis LaTeX")

    # equiv
    p = sub.add_parser("equiv", help="Sprawdź równoważność dwóch wyrażeń")
    p.add_argument("expr1")
    p.add_argument("expr2")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--trials", type=int, default=None, metavar="N")

    args = parser.parse_args(argv)

    cmds = {
        "parse":  _parse,
        "eval":   _eval,
        "render": _render,
        "equiv":  _equiv,
    }
    cmds[args.command](args)


if __name__ == "__main__":
    main()
