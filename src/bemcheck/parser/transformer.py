"""Lark Transformer that converts a style-sheet parse tree into StyleNodes."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import (
    Lark,
    Token,
    Transformer,
    UnexpectedCharacters,
    UnexpectedInput,
    UnexpectedToken,
)
from lark.exceptions import VisitError

from bemcheck.model.node import NodeKind, StyleNode
from bemcheck.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")
_LEADING_COMMENT_RE = re.compile(r"\s*(/\*[\s\S]*?\*/)")
_AT_RULE_RE = re.compile(r"@(?P<name>[^\s(\"'{;]*)(?P<params>[\s\S]*)")


class _Tail:
    """A trailing prelude with no terminating ``;`` before ``}`` or EOF."""

    def __init__(self, token: Token):
        self.token = token


def _line_of(token: Token, raw: str, offset: int) -> int | None:
    """Line of the character at *offset* inside *token*'s text."""
    if token.line is None:
        return None
    return token.line + raw.count("\n", 0, offset)


def _split_prelude(token: Token | None) -> tuple[list[StyleNode], str, int | None]:
    """Peel leading comments off a prelude.

    Returns the comment nodes, the remaining text with embedded comments
    removed and whitespace stripped, and the line where that text starts.
    """
    if token is None:
        return [], "", None
    raw = str(token)
    comments: list[StyleNode] = []
    pos = 0
    while True:
        match = _LEADING_COMMENT_RE.match(raw, pos)
        if match is None:
            break
        comments.append(
            StyleNode(
                kind=NodeKind.COMMENT,
                value=match.group(1)[2:-2].strip(),
                line=_line_of(token, raw, match.start(1)),
            )
        )
        pos = match.end()
    rest = raw[pos:]
    text = _COMMENT_RE.sub("", rest).strip()
    start = pos + (len(rest) - len(rest.lstrip()))
    return comments, text, _line_of(token, raw, start)


def _at_rule(
    text: str, line: int | None, children: tuple[StyleNode, ...] = ()
) -> StyleNode:
    match = _AT_RULE_RE.match(text)
    name = match.group("name") if match else text[1:]
    params = match.group("params").strip() if match else ""
    return StyleNode(
        kind=NodeKind.ATRULE, name=name, value=params, children=children, line=line
    )


def _statement(token: Token | None) -> list[StyleNode]:
    """Build a declaration or body-less at-rule from a statement prelude."""
    comments, text, line = _split_prelude(token)
    if not text:
        return comments
    if text.startswith("@"):
        return [*comments, _at_rule(text, line)]
    prop, sep, value = text.partition(":")
    if not sep or not prop.strip():
        word = text.split()[0]
        raise ParseError(f"Unknown word {word!r}", line=line)
    decl = StyleNode(kind=NodeKind.DECL, name=prop.strip(), value=value.strip(), line=line)
    return [*comments, decl]


def _flatten(items: list[object]) -> tuple[StyleNode, ...]:
    children: list[StyleNode] = []
    for item in items:
        if isinstance(item, _Tail):
            children.extend(_statement(item.token))
        elif isinstance(item, list):
            children.extend(item)
    return tuple(children)


class StylesheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into lists of StyleNode objects."""

    # ---- text ----

    def group(self, items: list[Token]) -> Token:
        return Token.new_borrow_pos("GROUP", "".join(items), items[0])

    def prelude(self, items: list[Token]) -> Token:
        return Token.new_borrow_pos("PRELUDE", "".join(items), items[0])

    # ---- structural ----

    def tail(self, items: list[Token]) -> _Tail:
        return _Tail(items[0])

    def statement(self, items: list[Token]) -> list[StyleNode]:
        return _statement(items[0] if items else None)

    def block(self, items: list[object]) -> list[StyleNode]:
        prelude: Token | None = None
        if items and isinstance(items[0], Token):
            prelude = items[0]
            items = items[1:]
        comments, text, line = _split_prelude(prelude)
        children = _flatten(items)
        if text.startswith("@"):
            return [*comments, _at_rule(text, line, children)]
        rule = StyleNode(kind=NodeKind.RULE, selector=text, children=children, line=line)
        return [*comments, rule]

    def start(self, items: list[object]) -> StyleNode:
        return StyleNode(kind=NodeKind.ROOT, children=_flatten(items), line=1)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def _position(error: UnexpectedInput) -> tuple[int | None, int | None]:
    line = getattr(error, "line", None)
    column = getattr(error, "column", None)
    if not isinstance(line, int) or line < 1:
        return None, None
    return line, column if isinstance(column, int) else None


def _describe(error: UnexpectedInput) -> str:
    """Turn a Lark error into a short, postcss-like message."""
    line, column = _position(error)
    where = f" at line {line}, column {column}" if line is not None else ""
    if isinstance(error, UnexpectedToken):
        if error.token.type == "$END":
            if "RPAR" in error.expected:
                return f"Unclosed bracket{where}"
            return f"Unclosed block{where}"
        # Outside its context a stray } may lex as bracket text.
        if str(error.token).startswith("}"):
            return f"Unexpected }}{where}"
    if isinstance(error, UnexpectedCharacters):
        if error.char == "/":
            return f"Unclosed comment{where}"
        if error.char in ("'", '"'):
            return f"Unclosed string{where}"
    return f"Unexpected input{where}"


def parse_stylesheet(source: str) -> StyleNode:
    """Parse style-sheet source into a tree of StyleNode objects.

    Returns the root node; its children are the top-level rules, at-rules,
    declarations and comments in source order. A leading byte order mark is
    dropped.
    """
    if source.startswith("\ufeff"):
        source = source[1:]
    try:
        tree = _parser().parse(source)
    except UnexpectedInput as e:
        line, column = _position(e)
        raise ParseError(_describe(e), line=line, column=column) from e
    try:
        return StylesheetTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise
