"""Scan one line of markdown into marked text runs.

The scanner recognises four inline forms, tried in this order at every
cursor position:

1. ``**strong**``
2. ``*em*``
3. ```code```
4. ``[text](href)``

Anything else is literal text.  Patterns never nest: the captured text of
a match is emitted as-is and never scanned again, so each run carries at
most one mark.  ``**bold *and* nested**`` therefore does not produce an
``em`` run inside the ``strong`` one.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from mdadf.models import Code, Em, Link, Mark, Strong, Text

# Each pattern is anchored at the cursor via ``match(text, pos)``.
_STRONG_RE = re.compile(r"\*\*([^*]+)\*\*")
_EM_RE = re.compile(r"\*([^*]+)\*")
_CODE_RE = re.compile(r"`([^`]+)`")
_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

# Characters that may open one of the patterns above.
_SPECIAL_RE = re.compile(r"[*`\[]")

_MARKERS: tuple[tuple[re.Pattern[str], Callable[[re.Match[str]], Mark]], ...] = (
    (_STRONG_RE, lambda m: Strong()),
    (_EM_RE, lambda m: Em()),
    (_CODE_RE, lambda m: Code()),
    (_LINK_RE, lambda m: Link(href=m.group(2))),
)


def scan_inline(text: str) -> list[Text]:
    """Convert a single line of text into a list of :class:`Text` runs.

    Parameters
    ----------
    text:
        One line (no newlines).  Heading text and list item text are
        passed here with their block prefix already removed.

    Returns
    -------
    list[Text]
        Runs in source order.  Stripping the delimiters of marked runs,
        the runs concatenate back to *text*.  Empty input gives an empty
        list.
    """
    runs: list[Text] = []
    pos = 0
    end = len(text)

    while pos < end:
        marked = _match_marked(text, pos)
        if marked is not None:
            run, pos = marked
            runs.append(run)
            continue

        # A special character that opens nothing is literal; look for the
        # next candidate after it so the cursor always advances.
        search_from = pos + 1 if _SPECIAL_RE.match(text, pos) else pos
        special = _SPECIAL_RE.search(text, search_from)
        stop = special.start() if special else end
        _append_literal(runs, text[pos:stop])
        pos = stop

    return runs


def _match_marked(text: str, pos: int) -> tuple[Text, int] | None:
    """Try each marked pattern at *pos*; return the run and new cursor."""
    for pattern, make_mark in _MARKERS:
        m = pattern.match(text, pos)
        if m:
            return Text(m.group(1), (make_mark(m),)), m.end()
    return None


def _append_literal(runs: list[Text], literal: str) -> None:
    """Append plain text, merging with a preceding plain run."""
    if runs and not runs[-1].marks:
        runs[-1] = Text(runs[-1].text + literal)
    else:
        runs.append(Text(literal))
