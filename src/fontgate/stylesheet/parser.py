"""Lark-based CSS parser producing a mutable stylesheet tree.

The grammar only knows about preludes, blocks and semicolons; this module
decides what each prelude means:

    @media screen { ... }      -> AtRule with a body
    @import "x.css";           -> AtRule without a body
    .a, .b { ... }             -> Rule
    font-family: "X", serif;   -> Declaration (inside a block only)
"""

from __future__ import annotations

import re
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from fontgate.stylesheet.errors import ParseError
from fontgate.stylesheet.model import AtRule, Declaration, Node, Root, Rule

__all__ = ["parse_css"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Quoted strings and url(...) tokens are kept as-is; comments outside them
# are dropped.
_LITERAL_OR_COMMENT_RE = re.compile(
    r"""
    (?P<keep>"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*'|url\((?:[^)"'\\]|\\.)*\))
    |
    /\*[\s\S]*?\*/
    """,
    re.VERBOSE,
)

_AT_RULE_RE = re.compile(r"@(?P<name>[\w-]+)\s*(?P<params>.*)", re.DOTALL)

_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)


def _strip_comments(raw: str) -> str:
    return _LITERAL_OR_COMMENT_RE.sub(lambda m: m.group("keep") or " ", raw).strip()


class _Sentinel:
    """Intermediate objects returned by transformer rules."""

    def __init__(self, token: Token):
        self.text = _strip_comments(str(token))
        self.line = token.line
        self.column = token.column


class _Block(_Sentinel):
    def __init__(self, token: Token, children: list[_Sentinel]):
        super().__init__(token)
        self.children = children


class _Statement(_Sentinel):
    pass


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into intermediate sentinel objects."""

    def block(self, items: list[object]) -> _Block:
        token = items[0]
        children = [item for item in items[1:] if isinstance(item, _Sentinel)]
        return _Block(token, children)  # type: ignore[arg-type]

    def statement(self, items: list[Token]) -> _Statement:
        return _Statement(items[0])

    open_statement = statement

    def start(self, items: list[object]) -> list[_Sentinel]:
        return [item for item in items if isinstance(item, _Sentinel)]


def _build_at_rule(item: _Sentinel) -> AtRule:
    match = _AT_RULE_RE.match(item.text)
    if match is None:
        raise ParseError(
            f"Invalid at-rule: {item.text!r}", line=item.line, column=item.column
        )
    params = " ".join(match.group("params").split())
    if isinstance(item, _Block):
        return AtRule(
            name=match.group("name"),
            params=params,
            nodes=_build_nodes(item.children, allow_declarations=True),
        )
    return AtRule(name=match.group("name"), params=params)


def _build_declaration(item: _Statement) -> Declaration:
    prop, sep, value = item.text.partition(":")
    prop = prop.strip()
    if not sep or not prop:
        raise ParseError(
            f"Expected 'property: value', got {item.text!r}",
            line=item.line,
            column=item.column,
        )
    value, count = _IMPORTANT_RE.subn("", value.strip())
    return Declaration(prop=prop, value=value, important=bool(count))


def _build_nodes(items: list[_Sentinel], allow_declarations: bool) -> list[Node]:
    """Turn sentinel objects into tree nodes, recursing into blocks."""
    nodes: list[Node] = []
    for item in items:
        if item.text.startswith("@"):
            nodes.append(_build_at_rule(item))
        elif isinstance(item, _Block):
            selector = " ".join(item.text.split())
            nodes.append(
                Rule(
                    selector=selector,
                    nodes=_build_nodes(item.children, allow_declarations=True),
                )
            )
        elif allow_declarations:
            nodes.append(_build_declaration(item))  # type: ignore[arg-type]
        else:
            raise ParseError(
                f"Declaration outside of a rule: {item.text!r}",
                line=item.line,
                column=item.column,
            )
    return nodes


_parser = Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_css(source: str) -> Root:
    """Parse CSS *source* into a :class:`Root` whose nodes are in source order."""
    try:
        tree = _parser.parse(source)
    except LarkError as e:
        # Try to extract line/column from Lark exceptions.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        if line is not None and line < 1:  # end of input
            line = column = None
        raise ParseError(str(e), line=line, column=column) from e
    items = CssTransformer().transform(tree)
    return Root(nodes=_build_nodes(items, allow_declarations=False))
