"""Tests for fixed-width comment framing."""
from datetime import datetime

import pytest

from cppsetup.scaffold.formatting import COMMENT_COLUMN, FormattingContext, annotate


class TestFill:
    """Column fill up to the closing border."""

    @pytest.mark.parametrize("offset", [1, 10, 40, 78, 79])
    def test_fill_reaches_column_80(self, fixed_ctx, offset):
        assert offset + len(fixed_ctx.fill(offset)) + 1 == 80

    def test_fill_edges(self, fixed_ctx):
        assert fixed_ctx.fill(1) == " " * 78
        assert fixed_ctx.fill(79) == ""

    @pytest.mark.parametrize("offset", [0, 80, -3])
    def test_out_of_range_offsets(self, fixed_ctx, offset):
        with pytest.raises(ValueError):
            fixed_ctx.fill(offset)


class TestFramedLines:
    """Every framed line is exactly 80 columns."""

    def test_rule(self, fixed_ctx):
        assert fixed_ctx.rule() == "#" * 80
        assert fixed_ctx.rule(20) == "#" * 20

    def test_blank_line(self, fixed_ctx):
        line = fixed_ctx.blank_line()
        assert len(line) == 80
        assert line == "#" + " " * 78 + "#"

    def test_section_break(self, fixed_ctx):
        assert fixed_ctx.section_break() == "#" + "=" * 78 + "#"

    def test_framed_text(self, fixed_ctx):
        line = fixed_ctx.framed("# Changelog:")
        assert len(line) == 80
        assert line.startswith("# Changelog: ")
        assert line.endswith(" #")

    def test_framed_with_right_block(self, fixed_ctx):
        line = fixed_ctx.framed("# build.sh", right="# Usage: ./build.sh #")
        assert len(line) == 80
        assert line.endswith("# Usage: ./build.sh #")

    def test_text_one_short_of_border(self, fixed_ctx):
        line = fixed_ctx.framed("#" + "x" * 78)
        assert line == "#" + "x" * 78 + "#"


class TestDateLine:
    """Date line padding adapts to the month name."""

    @pytest.mark.parametrize("month", range(1, 13))
    def test_width_every_month(self, month):
        ctx = FormattingContext(timestamp=datetime(2024, month, 9))
        line = ctx.date_line()
        assert len(line) == 80
        assert line.startswith(f"# Date: 09 {ctx.month_name} 2024")
        assert line.endswith("#")

    def test_short_and_long_month_differ_in_fill(self):
        may = FormattingContext(timestamp=datetime(2023, 5, 1)).date_line()
        september = FormattingContext(timestamp=datetime(2023, 9, 1)).date_line()
        assert may.count(" ") - september.count(" ") == len("September") - len("May")

    def test_date_strings(self, fixed_ctx):
        assert fixed_ctx.date_short == "11/02"
        assert fixed_ctx.date_long == "02 November 2022"


class TestAnnotate:
    """Right-hand comments in generated shell code."""

    def test_comment_starts_at_column(self):
        line = annotate("    popd >/dev/null", "Quietly go back")
        assert line.index("#") == COMMENT_COLUMN
        assert line.endswith("# Quietly go back")

    def test_bare_marker(self):
        line = annotate("fi")
        assert line == "fi".ljust(COMMENT_COLUMN) + "#"

    def test_long_code_keeps_a_space(self):
        code = "x" * (COMMENT_COLUMN + 5)
        assert annotate(code, "note") == f"{code} # note"
