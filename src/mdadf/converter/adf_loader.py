"""Decode wire-shape rich-text dicts back into model values.

Comment bodies and description fields come back from the remote API in
the same JSON shape that :meth:`Document.to_dict` produces.
:func:`document_from_dict` turns such a dict into a :class:`Document`,
validating it against the closed node set along the way.

Only the node types this library produces are accepted.  Anything else
(``table``, ``rule``, ``mention``, ``hardBreak``, ...) raises
:class:`MdAdfUnsupportedNodeError`; a recognised node with a bad shape
raises :class:`MdAdfSchemaError`.  Error context carries a ``path`` such
as ``/content/2/content/0`` pointing at the offending node.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from mdadf.errors import MdAdfSchemaError, MdAdfUnsupportedNodeError
from mdadf.models import (
    DOC_VERSION,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    Block,
    BulletList,
    Code,
    CodeBlock,
    Document,
    Em,
    Heading,
    Link,
    ListItem,
    Mark,
    OrderedList,
    Paragraph,
    Strong,
    Text,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def document_from_dict(data: Any) -> Document:
    """Decode a ``{"type": "doc", ...}`` dict.

    Raises
    ------
    MdAdfSchemaError
        If *data* is not a well-formed document.
    MdAdfUnsupportedNodeError
        If *data* contains a node or mark outside the supported set.
    """
    node = _expect_node(data, "", "doc")
    if node.get("version") != DOC_VERSION:
        raise MdAdfSchemaError(
            f"unsupported document version {node.get('version')!r}",
            context={"path": "/version", "node_type": "doc"},
        )
    content = _expect_list(node, "content", "")
    if not content:
        raise MdAdfSchemaError(
            "document content must not be empty",
            context={"path": "/content", "node_type": "doc"},
        )
    return Document(tuple(
        block_from_dict(child, f"/content/{i}") for i, child in enumerate(content)
    ))


def block_from_dict(data: Any, path: str = "") -> Block:
    """Decode one top-level block node."""
    node_type = _node_type(data, path)
    handler = _BLOCK_DECODERS.get(node_type)
    if handler is None:
        raise MdAdfUnsupportedNodeError(
            f"unsupported block type {node_type!r}",
            context={"path": path, "node_type": node_type},
        )
    return handler(data, path)


def inline_from_dict(data: Any, path: str = "") -> Text:
    """Decode one ``text`` node, including its marks."""
    node_type = _node_type(data, path)
    if node_type != "text":
        raise MdAdfUnsupportedNodeError(
            f"unsupported inline type {node_type!r}",
            context={"path": path, "node_type": node_type},
        )
    text = data.get("text")
    if not isinstance(text, str):
        raise MdAdfSchemaError(
            "text node needs a string 'text'",
            context={"path": path, "node_type": "text"},
        )
    marks = data.get("marks", [])
    if not isinstance(marks, list):
        raise MdAdfSchemaError(
            "'marks' must be a list",
            context={"path": f"{path}/marks", "node_type": "text"},
        )
    return Text(text, tuple(
        mark_from_dict(mark, f"{path}/marks/{i}") for i, mark in enumerate(marks)
    ))


def mark_from_dict(data: Any, path: str = "") -> Mark:
    """Decode one mark."""
    mark_type = _node_type(data, path)
    if mark_type == "strong":
        return Strong()
    if mark_type == "em":
        return Em()
    if mark_type == "code":
        return Code()
    if mark_type == "link":
        attrs = _expect_attrs(data, path, "link")
        href = attrs.get("href")
        if not isinstance(href, str):
            raise MdAdfSchemaError(
                "link mark needs a string 'href'",
                context={"path": f"{path}/attrs", "node_type": "link"},
            )
        return Link(href)
    raise MdAdfUnsupportedNodeError(
        f"unsupported mark type {mark_type!r}",
        context={"path": path, "node_type": mark_type},
    )


# ---------------------------------------------------------------------------
# Block decoders
# ---------------------------------------------------------------------------

def _decode_paragraph(data: dict, path: str) -> Paragraph:
    return Paragraph(_decode_inlines(data, path))


def _decode_heading(data: dict, path: str) -> Heading:
    level = _expect_attrs(data, path, "heading").get("level")
    if (
        isinstance(level, bool)
        or not isinstance(level, int)
        or not MIN_HEADING_LEVEL <= level <= MAX_HEADING_LEVEL
    ):
        raise MdAdfSchemaError(
            f"heading level must be an int in [{MIN_HEADING_LEVEL}, {MAX_HEADING_LEVEL}], "
            f"got {level!r}",
            context={"path": f"{path}/attrs/level", "node_type": "heading"},
        )
    return Heading(level, _decode_inlines(data, path))


def _decode_code_block(data: dict, path: str) -> CodeBlock:
    # "attrs" is optional here; {} and a missing key both mean no language.
    attrs = data.get("attrs") or {}
    if not isinstance(attrs, dict):
        raise MdAdfSchemaError(
            "codeBlock 'attrs' must be an object",
            context={"path": f"{path}/attrs", "node_type": "codeBlock"},
        )
    language = attrs.get("language")
    if language is not None and not isinstance(language, str):
        raise MdAdfSchemaError(
            "codeBlock language must be a string",
            context={"path": f"{path}/attrs/language", "node_type": "codeBlock"},
        )
    text = "".join(run.text for run in _decode_inlines(data, path))
    return CodeBlock(text, language or None)


def _decode_bullet_list(data: dict, path: str) -> BulletList:
    return BulletList(_decode_items(data, path))


def _decode_ordered_list(data: dict, path: str) -> OrderedList:
    return OrderedList(_decode_items(data, path))


_BLOCK_DECODERS: dict[str, Callable[[dict, str], Block]] = {
    "paragraph": _decode_paragraph,
    "heading": _decode_heading,
    "codeBlock": _decode_code_block,
    "bulletList": _decode_bullet_list,
    "orderedList": _decode_ordered_list,
}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _decode_inlines(data: dict, path: str) -> tuple[Text, ...]:
    # A paragraph may omit "content" entirely when it is empty.
    content = data.get("content", [])
    if not isinstance(content, list):
        raise MdAdfSchemaError(
            "'content' must be a list",
            context={"path": f"{path}/content", "node_type": data.get("type")},
        )
    return tuple(
        inline_from_dict(child, f"{path}/content/{i}") for i, child in enumerate(content)
    )


def _decode_items(data: dict, path: str) -> tuple[ListItem, ...]:
    items: list[ListItem] = []
    for i, child in enumerate(_expect_list(data, "content", path)):
        item_path = f"{path}/content/{i}"
        item = _expect_node(child, item_path, "listItem")
        paragraphs = _expect_list(item, "content", item_path)
        if len(paragraphs) != 1:
            raise MdAdfSchemaError(
                f"listItem must hold exactly one paragraph, got {len(paragraphs)} nodes",
                context={"path": f"{item_path}/content", "node_type": "listItem"},
            )
        para_path = f"{item_path}/content/0"
        block = block_from_dict(paragraphs[0], para_path)
        if not isinstance(block, Paragraph):
            raise MdAdfUnsupportedNodeError(
                f"listItem may only hold a paragraph, got {block.type!r}",
                context={"path": para_path, "node_type": block.type},
            )
        items.append(ListItem((block,)))
    return tuple(items)


def _node_type(data: Any, path: str) -> str:
    if not isinstance(data, dict):
        raise MdAdfSchemaError(
            f"expected a node object, got {type(data).__name__}",
            context={"path": path},
        )
    node_type = data.get("type")
    if not isinstance(node_type, str):
        raise MdAdfSchemaError(
            "node is missing a string 'type'",
            context={"path": path},
        )
    return node_type


def _expect_node(data: Any, path: str, expected: str) -> dict:
    node_type = _node_type(data, path)
    if node_type != expected:
        raise MdAdfSchemaError(
            f"expected a {expected!r} node, got {node_type!r}",
            context={"path": path, "node_type": node_type},
        )
    return data


def _expect_list(node: dict, key: str, path: str) -> list:
    value = node.get(key)
    if not isinstance(value, list):
        raise MdAdfSchemaError(
            f"{node.get('type')!r} node needs a list {key!r}",
            context={"path": f"{path}/{key}", "node_type": node.get("type")},
        )
    return value


def _expect_attrs(node: dict, path: str, node_type: str) -> dict:
    attrs = node.get("attrs")
    if not isinstance(attrs, dict):
        raise MdAdfSchemaError(
            f"{node_type!r} node needs an 'attrs' object",
            context={"path": f"{path}/attrs", "node_type": node_type},
        )
    return attrs
