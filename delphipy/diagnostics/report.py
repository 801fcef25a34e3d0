"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from delphipy.diagnostics.codes import DiagnosticSpec
from delphipy.diagnostics.diagnostic import Diagnostic
from delphipy.text import TextRange


def diagnostic_from_spec(spec: DiagnosticSpec, range: TextRange, **details: str) -> Diagnostic:
    """Build a diagnostic from a catalogue entry, filling message placeholders."""
    return Diagnostic(
        code=spec.code,
        message=spec.message.format(**details) if details else spec.message,
        range=range,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)
