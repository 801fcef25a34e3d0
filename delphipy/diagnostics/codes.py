"""Diagnostic codes and messages.

Messages may carry `str.format` placeholders that the reporting site fills in.
"""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


IO_FILE_READ: Final[DiagnosticSpec] = DiagnosticSpec(
    code="IO_FILE_READ",
    message="cannot read file '{path}': {reason}",
    severity="error",
    category="io",
)

ENCODING_UNKNOWN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ENCODING_UNKNOWN",
    message="unknown file encoding: {reason}",
    hint="Save the file as UTF-8 or configure a fallback encoding such as `cp1252`.",
    severity="error",
    category="encoding",
)

PARSER_MISSING_DPR_KEYWORD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_KEYWORD",
    message="DPR file must start with 'program' or 'library' keyword",
    severity="error",
    category="parser",
)

PARSER_MISSING_KEYWORD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_KEYWORD",
    message="Delphi files must start with one of these keywords: 'program', 'library', 'unit', 'package'",
    severity="error",
    category="parser",
)

PARSER_UNSUPPORTED_FILE_KIND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNSUPPORTED_FILE_KIND",
    message="parsing '{kind}' files is not supported yet",
    severity="error",
    category="parser",
)

PARSER_MISSING_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_NAME",
    message="missing {kind} name",
    severity="error",
    category="parser",
)

PARSER_MISSING_SEMICOLON: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_SEMICOLON",
    message="missing ';' after {kind} name, found {found}",
    severity="error",
    category="parser",
)

PARSER_MISSING_BEGIN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_BEGIN",
    message="missing 'begin' at {kind} start, found {found}",
    severity="error",
    category="parser",
)

PARSER_MISSING_END: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_END",
    message="missing 'end' at end of {kind}, found {found}",
    severity="error",
    category="parser",
)

PARSER_MISSING_FINAL_DOT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_FINAL_DOT",
    message="missing '.' at end of {kind}, found {found}",
    severity="error",
    category="parser",
)

PARSER_TRAILING_CONTENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TRAILING_CONTENT",
    message="unexpected {found} after final '.'",
    hint="Remove everything after the closing `end.` or disable `reject_trailing_content`.",
    severity="error",
    category="parser",
)
