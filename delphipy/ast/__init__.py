"""Typed parse results."""

from delphipy.ast.model import DELPHI_SOURCE_EXTENSIONS, DelphiFile, FileKind, is_identifier

__all__ = [
    "DELPHI_SOURCE_EXTENSIONS",
    "DelphiFile",
    "FileKind",
    "is_identifier",
]
