"""Group markdown lines into top-level blocks.

Lines are classified one at a time by :func:`classify_line`, which tries
the line kinds in a fixed priority order:

    BLANK -> HEADING -> FENCE -> BULLET -> ORDERED -> PARAGRAPH

:func:`segment_blocks` then walks the lines with a single index and a
small state machine.  Fences and list runs span several lines; every
other kind produces one block (or nothing, for blanks) per line.

Consecutive text lines are *not* merged: each becomes its own paragraph.
Bullet runs accept any mix of ``*``, ``-`` and ``+`` markers, and
ordered runs ignore their numbering (``1.``, ``5.``, ``10.`` form one
list).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from mdadf.converter.inline_scanner import scan_inline
from mdadf.models import (
    Block,
    BulletList,
    CodeBlock,
    Heading,
    ListItem,
    OrderedList,
    Paragraph,
)

FENCE = "```"

_HEADING_RE = re.compile(r"^(#{1,6})\s+([^\r\n\u2028\u2029]+)$")
_BULLET_RE = re.compile(r"^[ \t]*[*+\-]\s+(.*)$")
_ORDERED_RE = re.compile(r"^[0-9]+\.\s+(.*)$")


class LineKind(str, Enum):
    """What a single source line starts or continues."""

    BLANK = "blank"
    HEADING = "heading"
    FENCE = "fence"
    BULLET = "bullet"
    ORDERED = "ordered"
    PARAGRAPH = "paragraph"


class SegmenterState(str, Enum):
    """States of the line-grouping loop in :func:`segment_blocks`."""

    IDLE = "idle"
    IN_FENCE = "in_fence"
    IN_BULLET_RUN = "in_bullet_run"
    IN_ORDERED_RUN = "in_ordered_run"


@dataclass(frozen=True)
class LineMatch:
    """Classification of one line.

    Attributes
    ----------
    kind:
        The line kind.
    text:
        The payload with the block prefix removed: heading text, list
        item text, the fence info string (trimmed), or the whole line
        for paragraphs.  Empty for blank lines.
    level:
        Heading level; ``0`` for every other kind.
    """

    kind: LineKind
    text: str = ""
    level: int = 0


def classify_line(line: str) -> LineMatch:
    """Classify *line* against the line kinds in priority order."""
    if not line.strip():
        return LineMatch(LineKind.BLANK)

    m = _HEADING_RE.match(line)
    if m:
        return LineMatch(LineKind.HEADING, m.group(2), len(m.group(1)))

    if line.startswith(FENCE):
        return LineMatch(LineKind.FENCE, line[len(FENCE):].strip())

    m = _BULLET_RE.match(line)
    if m:
        return LineMatch(LineKind.BULLET, m.group(1))

    m = _ORDERED_RE.match(line)
    if m:
        return LineMatch(LineKind.ORDERED, m.group(1))

    return LineMatch(LineKind.PARAGRAPH, line)


# Which state a run-opening line kind enters, and which kind continues it.
_RUN_STATES: dict[LineKind, SegmenterState] = {
    LineKind.BULLET: SegmenterState.IN_BULLET_RUN,
    LineKind.ORDERED: SegmenterState.IN_ORDERED_RUN,
}
_RUN_KINDS: dict[SegmenterState, LineKind] = {
    state: kind for kind, state in _RUN_STATES.items()
}


def segment_blocks(markdown: str) -> list[Block]:
    """Split *markdown* into top-level blocks.

    Parameters
    ----------
    markdown:
        The full input.  Lines are split on ``"\\n"`` only.

    Returns
    -------
    list[Block]
        Blocks in source order.  Never empty: input without any block
        yields a single empty :class:`Paragraph`.
    """
    lines = markdown.split("\n")
    blocks: list[Block] = []

    state = SegmenterState.IDLE
    language: str | None = None
    fence_body: list[str] = []
    run_items: list[ListItem] = []

    i = 0
    while i < len(lines):
        line = lines[i]

        if state is SegmenterState.IN_FENCE:
            if line.startswith(FENCE):
                blocks.append(CodeBlock("\n".join(fence_body), language))
                state = SegmenterState.IDLE
            else:
                fence_body.append(line)
            i += 1
            continue

        match = classify_line(line)

        if state in _RUN_KINDS:
            if match.kind is _RUN_KINDS[state]:
                run_items.append(ListItem.of(scan_inline(match.text)))
                i += 1
                continue
            # The run is over; this line is re-read from IDLE.
            blocks.append(_close_run(state, run_items))
            state = SegmenterState.IDLE
            continue

        # IDLE
        if match.kind is LineKind.HEADING:
            blocks.append(Heading(match.level, tuple(scan_inline(match.text))))
        elif match.kind is LineKind.FENCE:
            language = match.text or None
            fence_body = []
            state = SegmenterState.IN_FENCE
        elif match.kind in _RUN_STATES:
            run_items = [ListItem.of(scan_inline(match.text))]
            state = _RUN_STATES[match.kind]
        elif match.kind is LineKind.PARAGRAPH:
            blocks.append(Paragraph(tuple(scan_inline(match.text))))
        i += 1

    # End of input closes whatever is still open, including a fence that
    # never saw its closing line.
    if state is SegmenterState.IN_FENCE:
        blocks.append(CodeBlock("\n".join(fence_body), language))
    elif state in _RUN_KINDS:
        blocks.append(_close_run(state, run_items))

    if not blocks:
        blocks.append(Paragraph())
    return blocks


def _close_run(state: SegmenterState, items: list[ListItem]) -> Block:
    if state is SegmenterState.IN_BULLET_RUN:
        return BulletList(tuple(items))
    return OrderedList(tuple(items))
