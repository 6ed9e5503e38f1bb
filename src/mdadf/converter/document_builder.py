"""Wrap converted blocks in a :class:`Document`.

Two entry points share the same envelope:

* :func:`build_from_markdown` runs the block segmenter.
* :func:`build_from_plain_text` takes each non-blank line literally, with
  no inline scanning at all.

:func:`build_document` picks one of them from a boolean flag.  None of
these functions raise; every string maps to a well-formed document.
"""

from __future__ import annotations

from mdadf.converter.block_segmenter import segment_blocks
from mdadf.models import Document, Paragraph, Text


def build_from_markdown(text: str) -> Document:
    """Convert markdown *text* into a document."""
    return Document(tuple(segment_blocks(text)))


def build_from_plain_text(text: str) -> Document:
    """Convert plain *text* into one paragraph per non-blank line.

    Lines are kept verbatim (surrounding whitespace included).  Markdown
    characters are not interpreted.
    """
    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        return Document.empty()
    return Document(tuple(Paragraph((Text(line),)) for line in lines))


def build_document(text: str, markdown: bool = False) -> Document:
    """Build a document from *text*, reading it as markdown when asked."""
    if markdown:
        return build_from_markdown(text)
    return build_from_plain_text(text)
