"""Delphi skeleton grammar.

```
File       := Keyword Identifier ';' 'begin' 'end' '.'
Keyword    := 'program' | 'library' | 'unit' | 'package'
Identifier := WORD
```

Each routine either returns a complete `DelphiFile` or reports one diagnostic
through the parser and returns None.
"""

from collections.abc import Callable
from pathlib import PurePath
from typing import Final

from delphipy.ast import DelphiFile, FileKind
from delphipy.diagnostics import (
    PARSER_MISSING_BEGIN,
    PARSER_MISSING_DPR_KEYWORD,
    PARSER_MISSING_END,
    PARSER_MISSING_FINAL_DOT,
    PARSER_MISSING_KEYWORD,
    PARSER_MISSING_NAME,
    PARSER_MISSING_SEMICOLON,
    PARSER_TRAILING_CONTENT,
    PARSER_UNSUPPORTED_FILE_KIND,
)
from delphipy.lexer import TokenKind
from delphipy.parser.parser import Parser


def parse_source_file(parser: Parser) -> DelphiFile | None:
    kind = _file_kind_keyword(parser)
    if kind is None:
        if _has_extension(parser.source_name, FileKind.PROGRAM.extension):
            parser.error(PARSER_MISSING_DPR_KEYWORD)
        else:
            parser.error(PARSER_MISSING_KEYWORD)
        return None

    return _FILE_GRAMMARS[kind](parser)


def parse_program(parser: Parser) -> DelphiFile | None:
    kind = FileKind.PROGRAM
    parser.bump()

    name = _parse_name(parser, kind)
    if name is None:
        return None

    if not parser.eat(TokenKind.SEMICOLON):
        parser.error(PARSER_MISSING_SEMICOLON, kind=kind)
        return None

    if not parser.eat_word("begin"):
        parser.error(PARSER_MISSING_BEGIN, kind=kind)
        return None

    if not parser.eat_word("end"):
        parser.error(PARSER_MISSING_END, kind=kind)
        return None

    if not parser.eat(TokenKind.DOT):
        parser.error(PARSER_MISSING_FINAL_DOT, kind=kind)
        return None

    if parser.options.reject_trailing_content and not parser.at(TokenKind.EOF):
        parser.error(PARSER_TRAILING_CONTENT)
        return None

    return DelphiFile(kind=kind, name=name)


def parse_library(parser: Parser) -> DelphiFile | None:
    return _unsupported_file_kind(parser, FileKind.LIBRARY)


def parse_unit(parser: Parser) -> DelphiFile | None:
    return _unsupported_file_kind(parser, FileKind.UNIT)


def parse_package(parser: Parser) -> DelphiFile | None:
    return _unsupported_file_kind(parser, FileKind.PACKAGE)


_FILE_GRAMMARS: Final[dict[FileKind, Callable[[Parser], DelphiFile | None]]] = {
    FileKind.PROGRAM: parse_program,
    FileKind.LIBRARY: parse_library,
    FileKind.UNIT: parse_unit,
    FileKind.PACKAGE: parse_package,
}


def _file_kind_keyword(parser: Parser) -> FileKind | None:
    if not parser.at(TokenKind.WORD):
        return None
    return FileKind.from_keyword(parser.current.text)


def _parse_name(parser: Parser, kind: FileKind) -> str | None:
    if not parser.at(TokenKind.WORD):
        parser.error(PARSER_MISSING_NAME, kind=kind)
        return None
    name = parser.current.text
    parser.bump()
    return name


def _unsupported_file_kind(parser: Parser, kind: FileKind) -> None:
    # Keyword not consumed: the diagnostic points at it.
    parser.error(PARSER_UNSUPPORTED_FILE_KIND, kind=kind)
    return None


def _has_extension(source_name: str, extension: str) -> bool:
    return PurePath(source_name).suffix.lower() == extension
