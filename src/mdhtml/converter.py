"""Markdown to HTML conversion pipeline.

Ties the pieces together: validate and read the input file, parse, render,
and write the result.

Example:
    >>> from mdhtml.converter import MarkdownConverter
    >>> converter = MarkdownConverter()
    >>> converter.convert_file("notes.md")          # writes notes.html
    PosixPath('notes.html')
    >>> html = converter.convert_text("# Hi", title="Greeting")

"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from mdhtml.config import DEFAULT_TITLE, RenderConfig
from mdhtml.errors import ConversionError, InputValidationError, MdHtmlError
from mdhtml.files import (
    file_exists,
    file_extension,
    output_path_for,
    read_file,
    write_file,
)
from mdhtml.nodes import Block
from mdhtml.parser import parse
from mdhtml.renderers.html import HtmlRenderer
from mdhtml.utils.logger import get_logger

logger = get_logger(__name__)

MARKDOWN_EXTENSION = ".md"
HTML_EXTENSION = ".html"


class MarkdownConverter:
    """Convert Markdown text or files to HTML.

    Instances hold no state between calls; a single converter can be used
    for any number of conversions.
    """

    def convert_text(self, text: str, *, fragment: bool = False, **options: Any) -> str:
        """Convert Markdown text to an HTML document.

        Args:
            text: Markdown source
            fragment: Return only the body fragment
            **options: Render options (``title``, ``include_doctype``,
                ``include_metadata``; camelCase names accepted)

        Returns:
            HTML string
        """
        config = RenderConfig.from_dict(options)
        return self._render(text, config, fragment=fragment)

    def convert_file(
        self,
        input_path: str | Path | None,
        output_path: str | Path | None = None,
        *,
        fragment: bool = False,
        **options: Any,
    ) -> Path:
        """Convert a ``.md`` file and write the HTML next to it (or to ``output_path``).

        The document title defaults to ``"Markdown转换结果 - <input_path>"``.

        Args:
            input_path: Markdown file to convert
            output_path: Destination; defaults to the input path with ``.html``
            fragment: Write only the body fragment
            **options: Render options, as for ``convert_text()``

        Returns:
            Path of the written HTML file

        Raises:
            ConversionError: If validation, reading or writing fails. The
                original error is chained as ``__cause__``.
        """
        try:
            source_path = self._validate_input(input_path)

            logger.info("Reading file: %s", source_path)
            markdown = read_file(source_path)

            config = RenderConfig(title=f"{DEFAULT_TITLE} - {input_path}").merged(options)
            html = self._render(markdown, config, fragment=fragment, source_file=str(source_path))

            target = Path(output_path) if output_path else output_path_for(source_path, HTML_EXTENSION)
            logger.info("Writing file: %s", target)
            write_file(target, html)
        except MdHtmlError as e:
            raise ConversionError(str(e)) from e

        logger.info("Conversion finished: %s", target)
        return target

    def parse_file(self, input_path: str | Path | None) -> list[Block]:
        """Validate and read a ``.md`` file and return its parsed blocks.

        Applies the same input checks as ``convert_file()``.

        Raises:
            ConversionError: If validation or reading fails
        """
        try:
            source_path = self._validate_input(input_path)
            logger.info("Reading file: %s", source_path)
            markdown = read_file(source_path)
        except MdHtmlError as e:
            raise ConversionError(str(e)) from e

        logger.info("Parsing Markdown content")
        return parse(markdown, source_file=str(source_path))

    def _render(
        self,
        text: str,
        config: RenderConfig,
        *,
        fragment: bool,
        source_file: str | None = None,
    ) -> str:
        logger.info("Parsing Markdown content")
        blocks = parse(text, source_file=source_file)

        logger.info("Generating HTML content")
        renderer = HtmlRenderer(config)
        if fragment:
            return renderer.render_fragment(blocks)
        return renderer.render(blocks)

    def _validate_input(self, input_path: str | Path | None) -> Path:
        if not input_path:
            raise InputValidationError("No input file path given")

        path = Path(input_path)
        if not file_exists(path):
            raise InputValidationError(f"File not found: {input_path}", path)

        extension = file_extension(path)
        if extension != MARKDOWN_EXTENSION:
            raise InputValidationError(
                f"Unsupported file format: {extension or '(none)'}, expected a .md file",
                path,
            )
        return path


# Shared instance for the module-level helpers
converter = MarkdownConverter()


def convert_text(text: str, **options: Any) -> str:
    """Convert Markdown text to HTML with the shared converter."""
    return converter.convert_text(text, **options)


def convert_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    **options: Any,
) -> Path:
    """Convert a Markdown file with the shared converter."""
    return converter.convert_file(input_path, output_path, **options)


__all__ = [
    "MarkdownConverter",
    "convert_file",
    "convert_text",
    "converter",
]
