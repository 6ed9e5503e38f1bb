"""mdadf — markdown and plain text to Atlassian rich-text documents.

Public re-exports
-----------------

* **Converter:** :class:`MarkdownToAdfConverter`, :func:`build_document`
* **Configuration:** :class:`MdAdfConfig`
* **Errors:** :class:`MdAdfError`, its subclasses and :class:`ErrorCode`
* **Models:** the document, block, inline and mark node types

Usage::

    from mdadf import MarkdownToAdfConverter, MdAdfConfig

    converter = MarkdownToAdfConverter(MdAdfConfig(markdown=True))
    body = converter.convert_to_dict("Fixed in `v2.1`, see **notes**")
    # ``body`` is ready to send as a comment body.
"""

from __future__ import annotations

# ── Converter ──────────────────────────────────────────────────────────
from mdadf.converter import (
    AdfToMarkdownRenderer,
    MarkdownToAdfConverter,
    build_document,
    build_from_markdown,
    build_from_plain_text,
    document_from_dict,
)

# ── Configuration ───────────────────────────────────────────────────────
from mdadf.config import MdAdfConfig

# ── Errors ──────────────────────────────────────────────────────────────
from mdadf.errors import (
    ErrorCode,
    MdAdfError,
    MdAdfSchemaError,
    MdAdfUnsupportedNodeError,
)

# ── Models ──────────────────────────────────────────────────────────────
from mdadf.models import (
    Block,
    BulletList,
    Code,
    CodeBlock,
    Document,
    Em,
    Heading,
    Inline,
    Link,
    ListItem,
    Mark,
    OrderedList,
    Paragraph,
    Strong,
    Text,
)

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Converter
    "MarkdownToAdfConverter",
    "AdfToMarkdownRenderer",
    "build_document",
    "build_from_markdown",
    "build_from_plain_text",
    "document_from_dict",
    # Configuration
    "MdAdfConfig",
    # Errors
    "ErrorCode",
    "MdAdfError",
    "MdAdfSchemaError",
    "MdAdfUnsupportedNodeError",
    # Models — root and blocks
    "Document",
    "Block",
    "Heading",
    "CodeBlock",
    "BulletList",
    "OrderedList",
    "ListItem",
    "Paragraph",
    # Models — inline and marks
    "Inline",
    "Text",
    "Mark",
    "Strong",
    "Em",
    "Code",
    "Link",
]
