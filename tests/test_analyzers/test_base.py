"""Tests for the line scanner and rule table runner."""

from codequality.analyzers.base import LineRule, SourceFile, run_rules, split_lines


class TestSplitLines:
    """Test splitting source text into lines."""

    def test_empty_text_has_no_lines(self):
        """Empty input yields no lines at all."""
        assert split_lines("") == []

    def test_trailing_newline_adds_no_phantom_line(self):
        """A final newline terminates the last line."""
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_without_trailing_newline(self):
        """Text without a final newline keeps its last line."""
        assert split_lines("a\nb") == ["a", "b"]

    def test_blank_lines_are_preserved(self):
        """Interior and trailing blank lines are real lines."""
        assert split_lines("a\n\n\nb\n\n") == ["a", "", "", "b", ""]

    def test_single_newline_is_one_blank_line(self):
        """A lone newline is one empty line."""
        assert split_lines("\n") == [""]

    def test_crlf_line_endings(self):
        """Carriage returns before newlines are dropped."""
        assert split_lines("a\r\nb\r\n") == ["a", "b"]

    def test_no_line_length_limit(self):
        """Very long lines are kept intact."""
        line = "x" * 100_000
        assert split_lines(line) == [line]


class TestSourceFile:
    """Test file-level facts and line contexts."""

    def test_contexts_are_one_based(self):
        """Line numbers start at 1."""
        source = SourceFile.from_code("first\nsecond")
        numbers = [ctx.number for ctx in source.contexts()]
        assert numbers == [1, 2]

    def test_trimmed_and_raw_forms(self):
        """Contexts carry both raw and trimmed text."""
        ctx = next(SourceFile.from_code("    value = 1;   ").contexts())
        assert ctx.raw == "    value = 1;   "
        assert ctx.trimmed == "value = 1;"
        assert ctx.indent == "    "

    def test_space_indent_detection(self):
        """Detects lines indented with two spaces."""
        assert SourceFile.from_code("a\n  b").has_space_indent
        assert not SourceFile.from_code("a\n\tb").has_space_indent

    def test_window_is_bounded_by_file_end(self):
        """Windows stop at the last line."""
        source = SourceFile.from_code("a\nb\nc")
        last = list(source.contexts())[-1]
        assert last.window(10) == ("c",)

    def test_previous_line(self):
        """First line has no previous line."""
        first, second = SourceFile.from_code("a\nb").contexts()
        assert first.previous is None
        assert second.previous == "a"

    def test_column_of_missing_token_defaults_to_one(self):
        """Column falls back to 1 when the token is absent."""
        ctx = next(SourceFile.from_code("  hello").contexts())
        assert ctx.column_of("hello") == 3
        assert ctx.column_of("absent") == 1


class TestRunRules:
    """Test the rule table runner."""

    def test_rules_run_in_line_major_order(self):
        """Findings are ordered by line, then by rule order."""
        rules = (
            LineRule("first", lambda ctx: [("first", ctx.number)]),
            LineRule("second", lambda ctx: [("second", ctx.number)]),
        )
        source = SourceFile.from_code("a\nb")

        assert run_rules(source, rules) == [
            ("first", 1),
            ("second", 1),
            ("first", 2),
            ("second", 2),
        ]

    def test_no_lines_no_findings(self):
        """Empty source produces nothing."""
        rules = (LineRule("always", lambda ctx: ["hit"]),)
        assert run_rules(SourceFile.from_code(""), rules) == []
