"""
Render AsciiDoc-style markup to HTML or normalized text.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from . import renderers  # noqa: F401  # register bundled renderer plugins
from .document import Document
from .errors import HamdocError
from .options import collect_options, split_option
from .plugins import available_documents, available_renderers, get_document_factory, get_renderer_factory

logger = logging.getLogger(__name__)

DEMO_TEXT = """
Coucou

==

123
==

abc
==

Abc
==

Def
==

Def
==

"""


def _option_argument(token: str) -> Tuple[str, str]:
    try:
        return split_option(token)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def read_source(path: Optional[Path]) -> str:
    if path is None or str(path) == "-":
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def convert_text(
    text: str,
    *,
    doc_type: str = "asciidoc",
    renderer_name: str = "text",
    renderer_options: Optional[Dict[str, Any]] = None,
) -> str:
    document = build_document(text, doc_type=doc_type)
    renderer = get_renderer_factory(renderer_name)(**(renderer_options or {}))
    return document.render(renderer)


def build_document(text: str, *, doc_type: str = "asciidoc") -> Document:
    document = get_document_factory(doc_type)(text)
    document.check_source()
    return document


def write_output(path: Optional[Path], content: str) -> None:
    if path is None:
        sys.stdout.write(content)
        if not content.endswith("\n"):
            sys.stdout.write("\n")
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render AsciiDoc-style markup to HTML or normalized text.")
    parser.add_argument(
        "input_path",
        nargs="?",
        type=Path,
        help="Path to the markup file (default: standard input, or '-').",
    )
    parser.add_argument("-o", "--output", type=Path, help="Optional path to write the result to.")
    parser.add_argument(
        "--doc-type",
        default="asciidoc",
        choices=available_documents() or ["asciidoc"],
        help="Document type deciding which constructs are recognized.",
    )
    parser.add_argument(
        "--renderer",
        default="text",
        choices=available_renderers() or ["text"],
        help="Name of the renderer plugin to use.",
    )
    parser.add_argument(
        "--renderer-option",
        action="append",
        default=[],
        type=_option_argument,
        metavar="KEY=VALUE",
        help="Additional renderer option in KEY=VALUE form (may repeat).",
    )
    parser.add_argument(
        "--skeleton",
        action="store_true",
        help="Print the placeholder skeleton instead of rendering.",
    )
    parser.add_argument("--demo", action="store_true", help="Use the bundled sample text as input.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        text = DEMO_TEXT if args.demo else read_source(args.input_path)
    except OSError as exc:
        sys.stderr.write(f"{exc}\n")
        return 2
    renderer_options = collect_options(args.renderer_option or [])
    try:
        if args.skeleton:
            result = build_document(text, doc_type=args.doc_type).skeleton
        else:
            result = convert_text(
                text,
                doc_type=args.doc_type,
                renderer_name=args.renderer,
                renderer_options=renderer_options,
            )
    except (HamdocError, KeyError, ValueError) as exc:
        logger.debug("Conversion failed", exc_info=True)
        sys.stderr.write(f"{exc}\n")
        return 2
    write_output(args.output, result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
