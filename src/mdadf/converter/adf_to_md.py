"""Render a rich-text document back to the markdown dialect.

Used to preview a comment body or to show a fetched description in a
terminal.  The output uses the same dialect the converter reads:

* ``#`` x level headings
* fenced code blocks with the language as info string
* ``- `` bullet items and ``1.``, ``2.``, ... ordered items
* one line per paragraph

Blocks are separated by a blank line.  The conversion is lossy: the
dialect has no escapes, so literal ``*``, ``[`` or backticks in plain runs
may read back as marks, and list numbering always restarts at 1.

Usage::

    from mdadf.converter.adf_to_md import AdfToMarkdownRenderer

    md = AdfToMarkdownRenderer().render(document)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from mdadf.converter.adf_loader import document_from_dict
from mdadf.models import (
    Block,
    BulletList,
    Code,
    CodeBlock,
    Document,
    Em,
    Heading,
    Link,
    ListItem,
    OrderedList,
    Paragraph,
    Strong,
    Text,
)


def render_inline(runs: Iterable[Text]) -> str:
    """Render inline runs to markdown.

    Marks are applied innermost first: code, strong, em, then link.
    """
    parts: list[str] = []
    for run in runs:
        text = run.text
        marks = run.marks
        if any(isinstance(m, Code) for m in marks):
            text = f"`{text}`"
        if any(isinstance(m, Strong) for m in marks):
            text = f"**{text}**"
        if any(isinstance(m, Em) for m in marks):
            text = f"*{text}*"
        for mark in marks:
            if isinstance(mark, Link):
                text = f"[{text}]({mark.href})"
                break
        parts.append(text)
    return "".join(parts)


class AdfToMarkdownRenderer:
    """Render documents (or their wire dicts) to markdown text."""

    def render(self, document: Document | dict[str, Any]) -> str:
        """Render a whole document.

        Parameters
        ----------
        document:
            A :class:`Document`, or a wire dict which is decoded first
            (and may raise :class:`~mdadf.errors.MdAdfSchemaError`).

        Returns
        -------
        str
            Markdown without a trailing newline.  Empty paragraphs
            contribute nothing.
        """
        if isinstance(document, dict):
            document = document_from_dict(document)
        rendered = (self.render_block(block) for block in document.content)
        return "\n\n".join(part for part in rendered if part)

    def render_block(self, block: Block) -> str:
        """Render a single top-level block."""
        handler = self._HANDLERS[type(block)]
        return handler(self, block)

    # ------------------------------------------------------------------
    # Block handlers
    # ------------------------------------------------------------------

    def _render_heading(self, block: Heading) -> str:
        return f"{'#' * block.level} {render_inline(block.content)}"

    def _render_code_block(self, block: CodeBlock) -> str:
        return f"```{block.language or ''}\n{block.text}\n```"

    def _render_bullet_list(self, block: BulletList) -> str:
        return "\n".join(f"- {self._item_text(item)}" for item in block.items)

    def _render_ordered_list(self, block: OrderedList) -> str:
        return "\n".join(
            f"{n}. {self._item_text(item)}" for n, item in enumerate(block.items, start=1)
        )

    def _render_paragraph(self, block: Paragraph) -> str:
        return render_inline(block.content)

    @staticmethod
    def _item_text(item: ListItem) -> str:
        return render_inline(item.paragraph.content)

    _HANDLERS: dict[type, Callable[[AdfToMarkdownRenderer, Any], str]] = {
        Heading: _render_heading,
        CodeBlock: _render_code_block,
        BulletList: _render_bullet_list,
        OrderedList: _render_ordered_list,
        Paragraph: _render_paragraph,
    }
