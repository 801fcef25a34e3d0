"""Shared parse result carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from delphipy.pipeline.result import DelphiParseResult, LoadDelphiProjectResult

if TYPE_CHECKING:
    from delphipy.encoding import TextDecoder
    from delphipy.parser import ParserOptions


def parse_file(
    path: str | Path,
    options: ParserOptions | None = None,
    *,
    decoder: TextDecoder | None = None,
) -> DelphiParseResult:
    from delphipy.pipeline.entrypoints import parse_file as _parse_file

    return _parse_file(path, options, decoder=decoder)


def parse_code(
    source_name: str,
    code: bytes,
    options: ParserOptions | None = None,
    *,
    decoder: TextDecoder | None = None,
) -> DelphiParseResult:
    from delphipy.pipeline.entrypoints import parse_code as _parse_code

    return _parse_code(source_name, code, options, decoder=decoder)


def load_delphi_project(
    project_root: str | Path,
    options: ParserOptions | None = None,
    *,
    decoder: TextDecoder | None = None,
) -> LoadDelphiProjectResult:
    from delphipy.pipeline.entrypoints import load_delphi_project as _load_delphi_project

    return _load_delphi_project(project_root, options, decoder=decoder)


__all__ = [
    "DelphiParseResult",
    "LoadDelphiProjectResult",
    "load_delphi_project",
    "parse_code",
    "parse_file",
]
