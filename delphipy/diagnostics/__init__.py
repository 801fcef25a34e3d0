"""Diagnostics."""

from delphipy.diagnostics.codes import (
    ENCODING_UNKNOWN,
    IO_FILE_READ,
    PARSER_MISSING_BEGIN,
    PARSER_MISSING_DPR_KEYWORD,
    PARSER_MISSING_END,
    PARSER_MISSING_FINAL_DOT,
    PARSER_MISSING_KEYWORD,
    PARSER_MISSING_NAME,
    PARSER_MISSING_SEMICOLON,
    PARSER_TRAILING_CONTENT,
    PARSER_UNSUPPORTED_FILE_KIND,
    DiagnosticSpec,
)
from delphipy.diagnostics.diagnostic import Diagnostic, Severity
from delphipy.diagnostics.report import diagnostic_from_spec, has_errors

__all__ = [
    "ENCODING_UNKNOWN",
    "IO_FILE_READ",
    "PARSER_MISSING_BEGIN",
    "PARSER_MISSING_DPR_KEYWORD",
    "PARSER_MISSING_END",
    "PARSER_MISSING_FINAL_DOT",
    "PARSER_MISSING_KEYWORD",
    "PARSER_MISSING_NAME",
    "PARSER_MISSING_SEMICOLON",
    "PARSER_TRAILING_CONTENT",
    "PARSER_UNSUPPORTED_FILE_KIND",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "diagnostic_from_spec",
    "has_errors",
]
