"""Command-line interface for mdhtml.

Usage:
    mdhtml <input.md> [output.html] [options]

Examples:
    mdhtml notes.md
    mdhtml notes.md out/notes.html --title "My notes"
    mdhtml notes.md --no-doctype --no-metadata
    mdhtml notes.md --ast
"""

from __future__ import annotations

import argparse
import logging
import sys

from mdhtml import __version__
from mdhtml.converter import MarkdownConverter
from mdhtml.errors import MdHtmlError
from mdhtml.serialization import to_json

SYNTAX_HELP = """\
supported syntax:
  # Title        -> <h1>Title</h1>
  ## Title       -> <h2>Title</h2>
  **bold**       -> <strong>bold</strong>
  *italic*       -> <em>italic</em>
  plain line     -> <p>plain line</p>
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdhtml",
        description="Convert a Markdown file to an HTML document.",
        epilog=SYNTAX_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", help="Markdown file to convert (.md)")
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="HTML file to write (default: input file name with .html)",
    )
    parser.add_argument("--title", default=None, help="document <title> text")
    parser.add_argument(
        "--no-doctype",
        dest="include_doctype",
        action="store_false",
        help="omit the DOCTYPE declaration",
    )
    parser.add_argument(
        "--no-metadata",
        dest="include_metadata",
        action="store_false",
        help="omit the charset and viewport meta tags",
    )
    parser.add_argument(
        "--fragment",
        action="store_true",
        help="write only the body HTML, without the document shell",
    )
    parser.add_argument(
        "--ast",
        action="store_true",
        help="print the parsed element tree as JSON instead of writing HTML",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI. Returns the process exit status."""
    parser = build_parser()
    args_list = sys.argv[1:] if argv is None else argv
    if not args_list:
        parser.print_help()
        return 0

    args = parser.parse_args(args_list)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    converter = MarkdownConverter()
    try:
        if args.ast:
            blocks = converter.parse_file(args.input)
            sys.stdout.write(to_json(blocks, indent=2) + "\n")
            return 0

        output = converter.convert_file(
            args.input,
            args.output,
            fragment=args.fragment,
            title=args.title,
            include_doctype=args.include_doctype,
            include_metadata=args.include_metadata,
        )
    except MdHtmlError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
