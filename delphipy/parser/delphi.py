"""High-level parse entrypoint for decoded Delphi source text."""

from __future__ import annotations

from delphipy.lexer import Lexer
from delphipy.parser.grammar import parse_source_file
from delphipy.parser.options import ParserOptions
from delphipy.parser.parser import Parser
from delphipy.parser.token_source import TokenSource
from delphipy.pipeline.result import DelphiParseResult


def parse_text(
    text: str,
    *,
    source_name: str = "<memory>",
    options: ParserOptions | None = None,
    encoding: str = "utf-8",
    had_bom: bool = False,
) -> DelphiParseResult:
    """Match the file skeleton of `text`.

    `source_name` only matters for its extension, which selects the message
    reported when the opening keyword is missing.
    """
    source = TokenSource(Lexer(text))
    parser = Parser(source, source_name=source_name, options=options)

    parsed = parse_source_file(parser)
    diagnostics = parser.finish()

    return DelphiParseResult(
        source_name=source_name,
        source_text=text,
        file=None if diagnostics else parsed,
        diagnostics=tuple(diagnostics),
        encoding=encoding,
        had_bom=had_bom,
    )
