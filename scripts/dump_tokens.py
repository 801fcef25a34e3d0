#!/usr/bin/env python
"""Print the token stream of one Delphi source file."""

from __future__ import annotations

import argparse
from pathlib import Path

from delphipy.encoding import DefaultTextDecoder, EncodingError
from delphipy.lexer import Lexer, dump_tokens


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump Delphi lexer tokens")
    parser.add_argument("path", type=Path, help="Delphi source file (.dpr, .pas, .dpk)")
    parser.add_argument(
        "--fallback-encoding",
        default=None,
        help="Code page used when the file is not UTF-8 and has no BOM (e.g. cp1252)",
    )
    parser.add_argument(
        "--solid-only",
        action="store_true",
        help="Hide whitespace and comment tokens",
    )
    args = parser.parse_args()

    try:
        decoded = DefaultTextDecoder(fallback_encoding=args.fallback_encoding).decode(args.path.read_bytes())
    except (OSError, EncodingError) as exc:
        raise SystemExit(f"{args.path}: {exc}") from exc

    tokens = Lexer(decoded.text).lex()
    if args.solid_only:
        tokens = [token for token in tokens if not token.kind.is_trivia]

    print(f"# encoding={decoded.encoding} bom={decoded.had_bom}")
    dump_tokens(tokens)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
