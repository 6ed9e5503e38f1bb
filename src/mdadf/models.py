"""Rich-text document model for mdadf.

Every node is a frozen dataclass, so a converted document is an immutable
value.  Node families are closed sets:

* **Marks:** :class:`Strong`, :class:`Em`, :class:`Code`, :class:`Link`
* **Inline:** :class:`Text`
* **Blocks:** :class:`Heading`, :class:`CodeBlock`, :class:`BulletList`,
  :class:`OrderedList`, :class:`Paragraph`
* **Containers:** :class:`ListItem`, :class:`Document`

``to_dict()`` on any node produces the Atlassian Document Format wire
shape consumed by the remote API::

    >>> Document((Paragraph((Text("hi"),)),)).to_dict()
    {'type': 'doc', 'version': 1, 'content': [{'type': 'paragraph', 'content': [{'type': 'text', 'text': 'hi'}]}]}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

DOC_VERSION = 1
"""The only document version produced and accepted."""

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6


# ---------------------------------------------------------------------------
# Marks
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Strong:
    """Bold text (``**x**``)."""

    type: str = field(default="strong", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type}


@dataclass(frozen=True)
class Em:
    """Italic text (``*x*``)."""

    type: str = field(default="em", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type}


@dataclass(frozen=True)
class Code:
    """Inline code (`` `x` ``)."""

    type: str = field(default="code", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type}


@dataclass(frozen=True)
class Link:
    """Hyperlink (``[x](href)``).

    Attributes
    ----------
    href:
        Link target, copied verbatim from the markdown source.
    """

    href: str
    type: str = field(default="link", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "attrs": {"href": self.href}}


Mark = Union[Strong, Em, Code, Link]


# ---------------------------------------------------------------------------
# Inline
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Text:
    """A run of text sharing one set of marks.

    Attributes
    ----------
    text:
        The literal characters of the run, delimiters removed.
    marks:
        Formatting marks.  Empty for plain text.  Runs produced by the
        inline scanner carry at most one mark.
    """

    text: str
    marks: tuple[Mark, ...] = ()
    type: str = field(default="text", init=False)

    def to_dict(self) -> dict[str, Any]:
        node: dict[str, Any] = {"type": self.type, "text": self.text}
        # The wire shape omits "marks" entirely for plain runs.
        if self.marks:
            node["marks"] = [mark.to_dict() for mark in self.marks]
        return node


Inline = Text


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Paragraph:
    """A paragraph of inline runs (possibly none)."""

    content: tuple[Inline, ...] = ()
    type: str = field(default="paragraph", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "content": [inline.to_dict() for inline in self.content],
        }


@dataclass(frozen=True)
class Heading:
    """A heading of level 1 to 6."""

    level: int
    content: tuple[Inline, ...] = ()
    type: str = field(default="heading", init=False)

    def __post_init__(self) -> None:
        if not MIN_HEADING_LEVEL <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(
                f"heading level must be in [{MIN_HEADING_LEVEL}, "
                f"{MAX_HEADING_LEVEL}], got {self.level}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "attrs": {"level": self.level},
            "content": [inline.to_dict() for inline in self.content],
        }


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block.

    Attributes
    ----------
    text:
        The raw body, lines joined with ``"\\n"``.  Never reformatted.
    language:
        Info string from the opening fence, or ``None``.
    """

    text: str
    language: str | None = None
    type: str = field(default="codeBlock", init=False)

    def to_dict(self) -> dict[str, Any]:
        attrs: dict[str, Any] = {}
        if self.language:
            attrs["language"] = self.language
        return {
            "type": self.type,
            "attrs": attrs,
            "content": [{"type": "text", "text": self.text}],
        }


@dataclass(frozen=True)
class ListItem:
    """One list entry; wraps exactly one :class:`Paragraph`."""

    content: tuple[Paragraph, ...]
    type: str = field(default="listItem", init=False)

    def __post_init__(self) -> None:
        if len(self.content) != 1 or not isinstance(self.content[0], Paragraph):
            raise ValueError("a list item must hold exactly one paragraph")

    @classmethod
    def of(cls, inlines: tuple[Inline, ...] | list[Inline]) -> ListItem:
        """Build an item whose paragraph holds *inlines*."""
        return cls((Paragraph(tuple(inlines)),))

    @property
    def paragraph(self) -> Paragraph:
        return self.content[0]

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "content": [paragraph.to_dict() for paragraph in self.content],
        }


@dataclass(frozen=True)
class BulletList:
    """An unordered list."""

    items: tuple[ListItem, ...]
    type: str = field(default="bulletList", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "content": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class OrderedList:
    """An ordered list.  Source numbering is not retained."""

    items: tuple[ListItem, ...]
    type: str = field(default="orderedList", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "content": [item.to_dict() for item in self.items],
        }


Block = Union[Heading, CodeBlock, BulletList, OrderedList, Paragraph]


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Document:
    """Root of a rich-text tree.

    The builders in :mod:`mdadf.converter.document_builder` guarantee
    that ``content`` is never empty.
    """

    content: tuple[Block, ...]
    type: str = field(default="doc", init=False)
    version: int = field(default=DOC_VERSION, init=False)

    @classmethod
    def empty(cls) -> Document:
        """A document holding a single empty paragraph."""
        return cls((Paragraph(),))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "version": self.version,
            "content": [block.to_dict() for block in self.content],
        }
