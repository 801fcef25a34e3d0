"""Parser infrastructure (token source + single-pass parser + skeleton grammar)."""

from delphipy.parser.delphi import parse_text
from delphipy.parser.grammar import (
    parse_library,
    parse_package,
    parse_program,
    parse_source_file,
    parse_unit,
)
from delphipy.parser.options import ParserOptions
from delphipy.parser.parser import Parser
from delphipy.parser.token_source import TokenSource

__all__ = [
    "Parser",
    "ParserOptions",
    "TokenSource",
    "parse_library",
    "parse_package",
    "parse_program",
    "parse_source_file",
    "parse_text",
    "parse_unit",
]
