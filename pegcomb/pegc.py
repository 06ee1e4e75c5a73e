# pegcomb/pegc.py
"""pegc – pegcomb developer CLI

Usage:
    $ pegc render --text "'if' ![a-z] / [a-z]+"
    $ pegc render expr.peg -D
    $ pegc check expr.peg

Commands
--------
- render : read one expression in the compact notation and print its canonical form
- check  : read one expression and print a node summary

With -D/--debug, the tree dump and node counts are written to stderr.
"""

from __future__ import annotations
import argparse
import pathlib
import sys
from collections import Counter
from typing import Optional

from .element import Element, iter_elements
from .errors import PegBuildError
from .notation import parse_expression

# ------------------------------
# helpers
# ------------------------------

def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


def _read_source(args) -> str:
    if args.text is not None:
        return args.text
    text = pathlib.Path(args.file).read_text(encoding="utf-8")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _dump_tree(e: Element, depth: int = 0) -> None:
    children = getattr(e.kind, "children", ())
    label = type(e.kind).__name__
    if not children:
        label += f" {e}"
    _eprint(f"{'  ' * depth}{label} lookahead={e.lookahead_kind.name} loop={e.loop_count}")
    for c in children:
        _dump_tree(c, depth + 1)


def _kind_counts(e: Element) -> Counter:
    return Counter(type(n.kind).__name__ for n in iter_elements(e))


def _load(args) -> Element:
    src = _read_source(args)
    if args.debug:
        _eprint(f"[DEBUG] source ready | chars={len(src)}")
    e = parse_expression(src)
    if args.debug:
        _eprint("[DEBUG] tree ready")
        _dump_tree(e)
    return e

# ------------------------------
# commands
# ------------------------------

def _run(args, body) -> int:
    try:
        e = _load(args)
    except SyntaxError as ex:
        _eprint("[SYNTAX ERROR]")
        _eprint(str(ex))
        return 2
    except PegBuildError as ex:
        _eprint("[ERROR]", type(ex).__name__, str(ex))
        return 2
    except OSError as ex:
        _eprint("[ERROR]", type(ex).__name__, str(ex))
        return 2
    body(e)
    return 0


def cmd_render(args) -> int:
    return _run(args, lambda e: print(e))


def cmd_check(args) -> int:
    def _summary(e: Element) -> None:
        counts = _kind_counts(e)
        if args.debug:
            for name, n in sorted(counts.items()):
                _eprint(f"[DEBUG] {name:>14} : {n}")
        detail = " ".join(f"{name}={n}" for name, n in sorted(counts.items()))
        print(f"[CHECK OK] nodes={sum(counts.values())} {detail}")
    return _run(args, _summary)

# ------------------------------
# entry point
# ------------------------------

def _add_source_args(p: argparse.ArgumentParser) -> None:
    src_group = p.add_mutually_exclusive_group(required=True)
    src_group.add_argument("file", nargs="?", help="expression file")
    src_group.add_argument("--text", help="expression text")
    p.add_argument("-D", "--debug", action="store_true", help="print debug details to stderr")


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="pegc", description="pegcomb expression CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_render = sub.add_parser("render", help="print the canonical form of an expression")
    _add_source_args(p_render)
    p_render.set_defaults(func=cmd_render)

    p_check = sub.add_parser("check", help="validate an expression and summarize its nodes")
    _add_source_args(p_check)
    p_check.set_defaults(func=cmd_check)

    args = ap.parse_args(argv)
    return int(args.func(args))

if __name__ == "__main__":
    sys.exit(main())
