"""Entrypoints that feed bytes and files through decoding and the skeleton parser."""

from __future__ import annotations

from pathlib import Path

from delphipy.ast import DELPHI_SOURCE_EXTENSIONS
from delphipy.diagnostics import ENCODING_UNKNOWN, IO_FILE_READ, Diagnostic, diagnostic_from_spec
from delphipy.encoding import DefaultTextDecoder, EncodingError, TextDecoder
from delphipy.parser import ParserOptions, parse_text
from delphipy.pipeline.result import DelphiParseResult, LoadDelphiProjectResult
from delphipy.text import ZERO, TextRange


def parse_file(
    path: str | Path,
    options: ParserOptions | None = None,
    *,
    decoder: TextDecoder | None = None,
) -> DelphiParseResult:
    """Read one Delphi source from disk and parse it."""
    source_name = str(path)
    try:
        code = Path(path).read_bytes()
    except OSError as exc:
        return _failed(
            source_name,
            diagnostic_from_spec(
                IO_FILE_READ,
                TextRange.empty(ZERO),
                path=source_name,
                reason=exc.strerror or str(exc),
            ),
        )
    return parse_code(source_name, code, options, decoder=decoder)


def parse_code(
    source_name: str,
    code: bytes,
    options: ParserOptions | None = None,
    *,
    decoder: TextDecoder | None = None,
) -> DelphiParseResult:
    """Decode raw source bytes and parse them."""
    resolved_options = options or ParserOptions()
    resolved_decoder = decoder or DefaultTextDecoder(fallback_encoding=resolved_options.fallback_encoding)
    try:
        decoded = resolved_decoder.decode(code)
    except EncodingError as exc:
        return _failed(
            source_name,
            diagnostic_from_spec(ENCODING_UNKNOWN, TextRange.empty(ZERO), reason=str(exc)),
        )
    return parse_text(
        decoded.text,
        source_name=source_name,
        options=resolved_options,
        encoding=decoded.encoding,
        had_bom=decoded.had_bom,
    )


def load_delphi_project(
    project_root: str | Path,
    options: ParserOptions | None = None,
    *,
    decoder: TextDecoder | None = None,
) -> LoadDelphiProjectResult:
    """Parse every `.dpr`, `.pas` and `.dpk` file under `project_root`."""
    root = Path(project_root)
    if not root.is_dir():
        return LoadDelphiProjectResult(parse_results=())

    paths = sorted(
        path for path in root.rglob("*") if path.is_file() and path.suffix.lower() in DELPHI_SOURCE_EXTENSIONS
    )
    return LoadDelphiProjectResult(
        parse_results=tuple(parse_file(path, options, decoder=decoder) for path in paths),
    )


def _failed(source_name: str, diagnostic: Diagnostic) -> DelphiParseResult:
    return DelphiParseResult(
        source_name=source_name,
        source_text=None,
        file=None,
        diagnostics=(diagnostic,),
    )
