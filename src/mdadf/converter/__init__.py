"""Text to rich-text document conversion.

Public API:

- :class:`MarkdownToAdfConverter` — configured text -> document entry point.
- :func:`build_document` — flag-dispatched markdown / plain-text build.
- :func:`build_from_markdown` / :func:`build_from_plain_text` — the two paths.
- :func:`segment_blocks` — markdown lines -> top-level blocks.
- :func:`scan_inline` — one line -> marked text runs.
- :func:`document_from_dict` — decode a wire dict into a document.
- :class:`AdfToMarkdownRenderer` — document -> markdown preview.
"""

from mdadf.converter.adf_loader import document_from_dict
from mdadf.converter.adf_to_md import AdfToMarkdownRenderer
from mdadf.converter.block_segmenter import LineKind, classify_line, segment_blocks
from mdadf.converter.document_builder import (
    build_document,
    build_from_markdown,
    build_from_plain_text,
)
from mdadf.converter.inline_scanner import scan_inline
from mdadf.converter.md_to_adf import MarkdownToAdfConverter

__all__ = [
    "AdfToMarkdownRenderer",
    "LineKind",
    "MarkdownToAdfConverter",
    "build_document",
    "build_from_markdown",
    "build_from_plain_text",
    "classify_line",
    "document_from_dict",
    "scan_inline",
    "segment_blocks",
]
