"""Skeleton parser for Delphi source files."""

from delphipy.ast import DelphiFile, FileKind
from delphipy.diagnostics import Diagnostic
from delphipy.encoding import DecodedText, DefaultTextDecoder, EncodingError, TextDecoder
from delphipy.parser import ParserOptions, parse_text
from delphipy.pipeline import (
    DelphiParseResult,
    LoadDelphiProjectResult,
    load_delphi_project,
    parse_code,
    parse_file,
)

__all__ = [
    "DecodedText",
    "DefaultTextDecoder",
    "DelphiFile",
    "DelphiParseResult",
    "Diagnostic",
    "EncodingError",
    "FileKind",
    "LoadDelphiProjectResult",
    "ParserOptions",
    "TextDecoder",
    "load_delphi_project",
    "parse_code",
    "parse_file",
    "parse_text",
]
