"""Tests for the inline scanner (one line -> marked text runs)."""

from mdadf.converter.inline_scanner import scan_inline
from mdadf.models import Code, Em, Link, Strong, Text


def _texts(runs):
    return [run.text for run in runs]


# =========================================================================
# Plain text
# =========================================================================

class TestPlainText:

    def test_empty_string_gives_no_runs(self):
        assert scan_inline("") == []

    def test_plain_line_is_one_run(self):
        assert scan_inline("just words") == [Text("just words")]

    def test_whitespace_is_preserved(self):
        assert scan_inline("  padded  ") == [Text("  padded  ")]


# =========================================================================
# Single marks
# =========================================================================

class TestSingleMarks:

    def test_strong(self):
        assert scan_inline("**bold**") == [Text("bold", (Strong(),))]

    def test_em(self):
        assert scan_inline("*italic*") == [Text("italic", (Em(),))]

    def test_code(self):
        assert scan_inline("`x = 1`") == [Text("x = 1", (Code(),))]

    def test_link(self):
        assert scan_inline("[docs](https://example.com/a?b=1)") == [
            Text("docs", (Link("https://example.com/a?b=1"),)),
        ]

    def test_strong_wins_over_em(self):
        runs = scan_inline("**bold**")
        assert len(runs) == 1
        assert runs[0].marks == (Strong(),)

    def test_code_keeps_asterisks_inside(self):
        assert scan_inline("`a*b*c`") == [Text("a*b*c", (Code(),))]

    def test_link_text_may_hold_special_characters(self):
        assert scan_inline("[*x*](u)") == [Text("*x*", (Link("u"),))]


# =========================================================================
# Mixed lines
# =========================================================================

class TestMixedLine:

    def test_all_four_marks_make_seven_runs(self):
        runs = scan_inline("**Bold** and *italic* and `code` and [link](url)")
        assert runs == [
            Text("Bold", (Strong(),)),
            Text(" and "),
            Text("italic", (Em(),)),
            Text(" and "),
            Text("code", (Code(),)),
            Text(" and "),
            Text("link", (Link("url"),)),
        ]

    def test_text_around_marks(self):
        runs = scan_inline("see `cfg.yml` now")
        assert _texts(runs) == ["see ", "cfg.yml", " now"]
        assert runs[1].marks == (Code(),)
        assert runs[0].marks == () and runs[2].marks == ()

    def test_adjacent_marks(self):
        runs = scan_inline("**a***b*")
        assert runs == [Text("a", (Strong(),)), Text("b", (Em(),))]


# =========================================================================
# Unmatched delimiters degrade to literal text
# =========================================================================

class TestLiteralFallback:

    def test_lone_asterisk(self):
        assert scan_inline("a * b") == [Text("a * b")]

    def test_unclosed_strong(self):
        assert scan_inline("**open") == [Text("**open")]

    def test_unclosed_code(self):
        assert scan_inline("`open") == [Text("`open")]

    def test_bracket_without_link(self):
        assert scan_inline("[not a link] here") == [Text("[not a link] here")]

    def test_empty_delimiters(self):
        assert scan_inline("**** `` []()") == [Text("**** `` []()")]

    def test_lone_asterisk_can_open_em_later_in_the_line(self):
        # The first "*" pairs with the next one; the rest is literal.
        runs = scan_inline("2 * 3 is *six*")
        assert runs == [Text("2 "), Text(" 3 is ", (Em(),)), Text("six*")]

    def test_only_special_characters(self):
        assert scan_inline("*`[") == [Text("*`[")]


# =========================================================================
# Marks never nest
# =========================================================================

class TestNoNesting:

    def test_em_inside_strong_is_not_parsed(self):
        # "**bold *and* nested**": the strong pattern cannot span the inner
        # asterisks, so the scanner falls through to em and literals.
        runs = scan_inline("**bold *and* nested**")
        assert runs == [
            Text("*"),
            Text("bold ", (Em(),)),
            Text("and"),
            Text(" nested", (Em(),)),
            Text("*"),
        ]

    def test_strong_inside_link_text_is_literal(self):
        runs = scan_inline("[**b**](u)")
        assert runs == [Text("**b**", (Link("u"),))]

    def test_each_run_has_at_most_one_mark(self):
        runs = scan_inline("*a* **b** `c` [d](e) f")
        assert all(len(run.marks) <= 1 for run in runs)
