"""Configured entry point for text-to-document conversion.

:class:`MarkdownToAdfConverter` chooses between the two builders:

1. **Markdown** — :func:`build_from_markdown` (block segmenter plus
   inline scanner).
2. **Plain text** — :func:`build_from_plain_text` (one literal paragraph
   per non-blank line).

The choice comes from the per-call ``markdown`` flag, falling back to
:attr:`MdAdfConfig.markdown`.  The returned :class:`Document` (or its
``to_dict()`` form) is what gets submitted as a comment body or rich-text
field value.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from mdadf.config import MdAdfConfig
from mdadf.converter.document_builder import build_from_markdown, build_from_plain_text
from mdadf.models import Document
from mdadf.observability import get_logger


class MarkdownToAdfConverter:
    """Convert comment or description text into a rich-text document.

    Parameters
    ----------
    config:
        Converter configuration.  Defaults to :class:`MdAdfConfig()`.

    Examples
    --------
    >>> converter = MarkdownToAdfConverter(MdAdfConfig(markdown=True))
    >>> doc = converter.convert("# Hello\\n\\nWorld")
    >>> [block.type for block in doc.content]
    ['heading', 'paragraph']
    """

    def __init__(self, config: MdAdfConfig | None = None) -> None:
        self._config = config or MdAdfConfig()
        self._log = get_logger("mdadf.converter")

    @property
    def config(self) -> MdAdfConfig:
        return self._config

    def convert(self, text: str, *, markdown: bool | None = None) -> Document:
        """Convert *text* to a :class:`Document`.

        Parameters
        ----------
        text:
            Input text.  Any string is accepted.
        markdown:
            Read *text* as markdown (``True``) or plain text (``False``).
            ``None`` uses the configured default.

        Returns
        -------
        Document
            A document with at least one block.
        """
        use_markdown = self._config.markdown if markdown is None else markdown
        if use_markdown:
            document = build_from_markdown(text)
        else:
            document = build_from_plain_text(text)

        if self._config.log_level_number <= logging.DEBUG:
            self._log.debug(
                "converted",
                extra={"extra_fields": {
                    "path": "markdown" if use_markdown else "plain_text",
                    "input_chars": len(text),
                    "blocks": len(document.content),
                }},
            )
            if self._config.debug_dump_document:
                self._log.debug(
                    "document payload",
                    extra={"extra_fields": {
                        "document": json.dumps(document.to_dict(), ensure_ascii=False),
                    }},
                )

        return document

    def convert_to_dict(self, text: str, *, markdown: bool | None = None) -> dict[str, Any]:
        """Like :meth:`convert`, returning the wire dict."""
        return self.convert(text, markdown=markdown).to_dict()
