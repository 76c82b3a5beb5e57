"""Lark Transformer that converts a stylesheet parse tree into a Stylesheet model."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer, Tree
from lark.exceptions import LarkError
from lark.indenter import Indenter

from sassvars.errors import ParseError
from sassvars.model.source import Dialect
from sassvars.model.stylesheet import ImportDirective, Statement, Stylesheet, VariableDeclaration

logger = logging.getLogger(__name__)

GRAMMAR_DIR = Path(__file__).parent / "grammars"

# Imports the compiler treats as plain CSS and never loads as Sass.
_CSS_IMPORT_PREFIXES = ("http://", "https://", "//")


class SassIndenter(Indenter):
    """Turns leading whitespace of the indented syntax into INDENT/DEDENT."""

    NL_type = "_NL"
    OPEN_PAREN_types = ["LPAR"]
    CLOSE_PAREN_types = ["RPAR"]
    INDENT_type = "_INDENT"
    DEDENT_type = "_DEDENT"
    tab_len = 8

    def process(self, stream: Iterator[Token]) -> Iterator[Token]:
        return super().process(self._check_parens(stream))

    def _check_parens(self, stream: Iterator[Token]) -> Iterator[Token]:
        # The base indenter asserts on a stray ")"; report it as a syntax error.
        depth = 0
        for token in stream:
            if token.type in self.OPEN_PAREN_types:
                depth += 1
            elif token.type in self.CLOSE_PAREN_types:
                if depth == 0:
                    error = LarkError(f"unbalanced ')' at line {token.line}, column {token.column}")
                    error.line = token.line  # type: ignore[attr-defined]
                    error.column = token.column  # type: ignore[attr-defined]
                    raise error
                depth -= 1
            yield token


def _blank_sass_comments(source: str) -> str:
    """Empty every comment line of the indented syntax.

    A comment runs on over the lines indented deeper than its opening
    ``//`` or ``/*``; those lines are free text and are emptied too.  Lines
    are kept so positions in parse errors stay correct.
    """
    lines = source.split("\n")
    comment_indent: int | None = None
    for i, line in enumerate(lines):
        text = line.lstrip(" \t")
        indent = len(line) - len(text)
        if comment_indent is not None:
            if not text.strip() or indent > comment_indent:
                lines[i] = ""
                continue
            comment_indent = None
        if text.startswith(("//", "/*")):
            comment_indent = indent
            lines[i] = ""
    return "\n".join(lines)


def _unquote(raw: str) -> str:
    return raw[1:-1]


def _is_css_import(path: str) -> bool:
    return path.endswith(".css") or path.startswith(_CSS_IMPORT_PREFIXES)


def _build_import(args: list[object], line: int | None) -> ImportDirective:
    """Build an ImportDirective from the tokens following ``@import``.

    The import is followable only when its arguments are a comma-separated
    list of quoted paths, none of which is a plain CSS import.
    """
    paths: list[str] = []
    followable = bool(args)
    expect_string = True
    for arg in args:
        if expect_string and isinstance(arg, Token) and arg.type == "STRING":
            paths.append(_unquote(str(arg)))
        elif not expect_string and isinstance(arg, Token) and arg.type == "COMMA":
            pass
        else:
            followable = False
        expect_string = not expect_string
    if expect_string and args:
        # trailing comma
        followable = False
    if any(_is_css_import(p) for p in paths):
        followable = False
    return ImportDirective(paths=tuple(paths), followable=followable, line=line)


class StylesheetTransformer(Transformer):  # type: ignore[type-arg]
    """Keep top-level variable declarations and imports, drop everything else."""

    def variable_declaration(self, items: list[object]) -> VariableDeclaration:
        token = items[0]
        return VariableDeclaration(name=str(token)[1:], line=token.line)

    def at_rule(self, items: list[object]) -> ImportDirective | None:
        keyword = items[0]
        if str(keyword) != "@import":
            return None
        args = [item for item in items[1:] if not (isinstance(item, Tree) and item.data == "block")]
        return _build_import(args, keyword.line)

    def ruleset(self, items: list[object]) -> None:
        return None

    def start(self, items: list[object]) -> Stylesheet:
        statements: list[Statement] = [
            item for item in items if isinstance(item, (VariableDeclaration, ImportDirective))
        ]
        return Stylesheet(statements=statements)


@lru_cache(maxsize=None)
def _parser(dialect: Dialect) -> Lark:
    grammar = (GRAMMAR_DIR / f"{dialect.value}.lark").read_text(encoding="utf-8")
    if dialect is Dialect.SASS:
        return Lark(grammar, parser="lalr", start="start", postlex=SassIndenter())
    return Lark(grammar, parser="lalr", start="start")


def parse_stylesheet(
    source: str, dialect: Dialect, path: Path | str | None = None
) -> Stylesheet:
    """Parse stylesheet *source* written in *dialect*.

    Raises :class:`ParseError` when the grammar rejects the input.
    """
    if dialect is Dialect.SASS:
        source = _blank_sass_comments(source)
        if not source.endswith("\n"):
            source += "\n"
    try:
        tree = _parser(dialect).parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), path=path, line=line, column=column) from e
    stylesheet = StylesheetTransformer().transform(tree)
    logger.debug(
        "parsed %s: %d variable(s), %d import(s)",
        path or f"<{dialect.value}>",
        len(stylesheet.variables),
        len(stylesheet.imports),
    )
    return stylesheet
