# pegcomb/notation.py
from __future__ import annotations
from typing import List, Optional
from .element import (
    Element, LookaheadKind, Sequence, Wildcard, string, char, sequence, choice,
)

# Compact text notation, read straight into combinator calls:
#   expr     := seq (("/" | "|") seq)*
#   seq      := (prefix)+
#   prefix   := ("&"|"!")? suffix
#   suffix   := primary ("?"|"*"|"+"|"{" INT ("-" INT?)? "}")?
#   primary  := literal | class | "." | "(" expr ")"
#
#   literal  := ' ... ' | " ... "  (supports escapes \n \r \t \\ \" \' \xHH \uXXXX)
#   class    := "[" body "]"       body goes to char(); \] and \[ are literal brackets
#   comments/space allowed:
#       - whitespace
#       - "#" ... endline
#       - "/*" ... "*/"
#
# Alternatives fold with "|" and items with "+", so a parenthesized group
# without a suffix or prefix is flattened into its parent like any other
# combinator result.
#
# A group that already carries a repeat or lookahead is wrapped in a
# one-child Sequence before another one is applied, so "('a'{2}){3}"
# keeps both counts and "&(!'a')" keeps both assertions.

def _group(e: Element, lookahead: bool = False) -> Element:
    annotated = e.lookahead_kind is not LookaheadKind.NONE if lookahead else not e.is_plain
    if annotated:
        return Element(Sequence((e,)))
    return e


class _Reader:
    def __init__(self, src: str):
        self.s = src
        self.i = 0
        self.n = len(src)

    def _peek(self, k: int = 0) -> Optional[str]:
        j = self.i + k
        if j >= self.n:
            return None
        return self.s[j]

    def _starts(self, lit: str) -> bool:
        return self.s.startswith(lit, self.i)

    def _bump(self, n: int = 1) -> None:
        self.i += n

    def _eof(self) -> bool:
        return self.i >= self.n

    def _err(self, msg: str) -> SyntaxError:
        return SyntaxError(f"expression parse error at {self.i}: {msg}")

    def _skip_ws(self) -> None:
        while not self._eof():
            if self._starts("/*"):
                j = self.s.find("*/", self.i + 2)
                if j == -1:
                    raise self._err("unclosed block comment")
                self.i = j + 2
                continue
            ch = self._peek()
            if ch in " \t\r\n":
                self._bump(1)
                continue
            if ch == "#":
                while not self._eof() and self._peek() != "\n":
                    self._bump(1)
                continue
            break

    def _eat(self, lit: str) -> None:
        self._skip_ws()
        if not self._starts(lit):
            raise self._err(f"expected {lit!r}")
        self._bump(len(lit))

    def _try_eat(self, lit: str) -> bool:
        self._skip_ws()
        if self._starts(lit):
            self._bump(len(lit))
            return True
        return False

    def _hexval(self, ch: Optional[str]) -> int:
        if ch is not None and ch in "0123456789abcdefABCDEF":
            return int(ch, 16)
        raise self._err("invalid hex digit")

    def _read_escape(self) -> str:
        c = self._peek()
        if c is None:
            raise self._err("unterminated escape")
        self._bump(1)
        if c == "n":
            return "\n"
        if c == "r":
            return "\r"
        if c == "t":
            return "\t"
        if c in "xu":
            val = 0
            for _ in range(2 if c == "x" else 4):
                val = (val << 4) + self._hexval(self._peek())
                self._bump(1)
            return chr(val)
        # quotes, backslash and anything else stand for themselves
        return c

    def _int(self) -> int:
        self._skip_ws()
        start = self.i
        while not self._eof() and self._peek() in "0123456789":
            self._bump(1)
        if start == self.i:
            raise self._err("expected integer")
        return int(self.s[start:self.i])

    # --- primaries ---

    def _literal(self) -> Element:
        q = self._peek()
        self._bump(1)
        out: List[str] = []
        while not self._eof():
            c = self._peek()
            if c == q:
                self._bump(1)
                break
            if c == "\\":
                self._bump(1)
                out.append(self._read_escape())
            else:
                out.append(c)
                self._bump(1)
        else:
            raise self._err("unterminated string")
        return string("".join(out))

    def _class(self) -> Element:
        self._bump(1)  # "["
        body: List[str] = []
        while True:
            c = self._peek()
            if c is None:
                raise self._err("unterminated character class")
            if c == "]":
                self._bump(1)
                break
            if c == "\\" and self._peek(1) in ("[", "]"):
                # char() escapes brackets again
                body.append(self._peek(1))
                self._bump(2)
                continue
            if c == "\\" and self._peek(1) is not None:
                body.append(self.s[self.i:self.i + 2])
                self._bump(2)
                continue
            body.append(c)
            self._bump(1)
        return char("".join(body))

    # --- recursive descent ---

    def parse(self) -> Element:
        e = self._parse_expr()
        self._skip_ws()
        if not self._eof():
            raise self._err(f"unexpected {self._peek()!r}")
        return e

    def _parse_expr(self) -> Element:
        alts = [self._parse_seq()]
        while self._try_eat("/") or self._try_eat("|"):
            alts.append(self._parse_seq())
        return choice(*alts)

    def _parse_seq(self) -> Element:
        items: List[Element] = []
        while True:
            self._skip_ws()
            ch = self._peek()
            if ch is None or ch in ")/|":
                break
            items.append(self._parse_prefix())
        if not items:
            raise self._err("empty expression")
        return sequence(*items)

    def _parse_prefix(self) -> Element:
        if self._try_eat("&"):
            return _group(self._parse_suffix(), lookahead=True).pos()
        if self._try_eat("!"):
            return _group(self._parse_suffix(), lookahead=True).neg()
        return self._parse_suffix()

    def _parse_suffix(self) -> Element:
        e = self._parse_primary()
        self._skip_ws()
        if self._try_eat("?"):
            return _group(e).min_to_max(0, 1)
        if self._try_eat("*"):
            return _group(e).min(0)
        if self._try_eat("+"):
            return _group(e).min(1)
        if self._try_eat("{"):
            e = _group(e)
            lo = self._int()
            if self._try_eat("-"):
                self._skip_ws()
                if self._peek() == "}":
                    e = e.min(lo)
                else:
                    e = e.min_to_max(lo, self._int())
            else:
                e = e.times(lo)
            self._eat("}")
        return e

    def _parse_primary(self) -> Element:
        self._skip_ws()
        ch = self._peek()
        if ch == "(":
            self._bump(1)
            e = self._parse_expr()
            self._eat(")")
            return e
        if ch == ".":
            self._bump(1)
            return Element(Wildcard())
        if ch in ("'", '"'):
            return self._literal()
        if ch == "[":
            return self._class()
        if ch is not None and (ch.isalpha() or ch == "_"):
            raise self._err("rule references are not supported")
        if ch is None:
            raise self._err("unexpected end of input")
        raise self._err(f"unexpected {ch!r}")


def parse_expression(src: str) -> Element:
    """Read one expression written in the compact notation."""
    return _Reader(src).parse()
