"""Parse result carrier shared by the text, bytes and file entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from delphipy.ast import DelphiFile
from delphipy.diagnostics import Diagnostic, has_errors


@dataclass(frozen=True, slots=True)
class DelphiParseResult:
    """Outcome of parsing one Delphi source.

    `file` is set only when the whole skeleton matched; a failed parse carries
    the diagnostic that stopped it instead. `source_text` is None when the
    bytes could not be read or decoded.
    """

    source_name: str
    source_text: str | None
    file: DelphiFile | None
    diagnostics: tuple[Diagnostic, ...]
    encoding: str | None = None
    had_bom: bool = False

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def error(self) -> Diagnostic | None:
        """First error diagnostic, if any."""
        return next((d for d in self.diagnostics if d.severity == "error"), None)


@dataclass(frozen=True, slots=True)
class LoadDelphiProjectResult:
    """Parse results for every Delphi source under a project root."""

    parse_results: tuple[DelphiParseResult, ...]

    @property
    def files(self) -> tuple[DelphiFile, ...]:
        return tuple(result.file for result in self.parse_results if result.file is not None)

    @property
    def failed(self) -> tuple[DelphiParseResult, ...]:
        return tuple(result for result in self.parse_results if result.has_errors)
