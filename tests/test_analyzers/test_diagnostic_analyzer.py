"""Tests for the diagnostic rule set."""

import pytest

from codequality.analyzers.base import SourceFile
from codequality.analyzers.diagnostic_analyzer import (
    AnalysisOptions,
    DiagnosticAnalyzer,
    IssueSeverity,
    IssueType,
)
from tests.conftest import (
    SAMPLE_JS_COMPLEX_CONDITION,
    SAMPLE_JS_CONSOLE,
    SAMPLE_JS_LONG_SIGNATURE,
)


@pytest.fixture
def analyzer():
    return DiagnosticAnalyzer()


def analyze(analyzer, code, options=None):
    return analyzer.analyze(SourceFile.from_code(code), options)


class TestDiagnosticRules:
    """Test each diagnostic rule in isolation."""

    def test_console_log(self, analyzer):
        """Flags console.log with the column of the call."""
        issues = analyze(analyzer, SAMPLE_JS_CONSOLE)

        assert len(issues) == 1
        issue = issues[0]
        assert issue.rule_id == "no-console"
        assert issue.kind == IssueType.WARNING
        assert issue.severity == IssueSeverity.MINOR
        assert issue.line == 1
        assert issue.column == SAMPLE_JS_CONSOLE.index("console.log") + 1

    def test_long_function_signature(self, analyzer):
        """Flags function lines longer than 80 characters."""
        issues = analyze(analyzer, SAMPLE_JS_LONG_SIGNATURE)

        assert [i.rule_id for i in issues] == ["function-length"]
        assert issues[0].severity == IssueSeverity.MINOR

    def test_short_function_signature_not_flagged(self, analyzer):
        """Function lines of 80 characters or fewer pass."""
        line = "function f() {".ljust(80, " ")
        assert analyze(analyzer, line) == []

    def test_todo_marker(self, analyzer):
        """Flags TODO as informational."""
        issues = analyze(analyzer, "// TODO: handle errors")

        assert len(issues) == 1
        assert issues[0].rule_id == "todo-check"
        assert issues[0].kind == IssueType.INFO
        assert issues[0].severity == IssueSeverity.INFO
        assert issues[0].column == 1

    def test_fixme_marker(self, analyzer):
        """Flags FIXME as well."""
        issues = analyze(analyzer, "x(); // FIXME later")
        assert [i.rule_id for i in issues] == ["todo-check"]

    def test_long_string_literal(self, analyzer):
        """Flags quoted literals of 20 or more characters."""
        code = 'const msg = "this is a rather long message";'
        issues = analyze(analyzer, code)

        assert [i.rule_id for i in issues] == ["no-hardcoded-strings"]
        assert issues[0].kind == IssueType.SUGGESTION
        assert issues[0].column == code.index('"') + 1

    def test_short_string_literal_not_flagged(self, analyzer):
        """Literals under 20 characters pass."""
        assert analyze(analyzer, "const msg = 'short';") == []

    def test_complex_condition(self, analyzer):
        """Flags conditions of 50 or more characters."""
        issues = analyze(analyzer, SAMPLE_JS_COMPLEX_CONDITION)

        assert [i.rule_id for i in issues] == ["complex-condition"]
        assert issues[0].kind == IssueType.WARNING
        assert issues[0].severity == IssueSeverity.MAJOR

    def test_simple_condition_not_flagged(self, analyzer):
        """Short conditions pass."""
        assert analyze(analyzer, "if (ready) {") == []

    def test_line_numbers_follow_source(self, analyzer):
        """Issues report the line they were found on."""
        issues = analyze(analyzer, "let a;\nlet b;\nconsole.log(a, b);\n")
        assert [(i.rule_id, i.line) for i in issues] == [("no-console", 3)]

    def test_multiple_rules_on_one_line(self, analyzer):
        """Several rules may fire on the same line, in table order."""
        issues = analyze(analyzer, "console.log('this message is clearly too long'); // TODO")
        assert [i.rule_id for i in issues] == ["no-console", "todo-check", "no-hardcoded-strings"]


class TestDiagnosticOptions:
    """Test option flags gating rule groups."""

    def test_defaults_run_every_rule(self, analyzer):
        """Default options match running with no options."""
        code = f"{SAMPLE_JS_CONSOLE}\n{SAMPLE_JS_COMPLEX_CONDITION}"
        assert analyze(analyzer, code) == analyze(analyzer, code, AnalysisOptions())

    def test_disable_maintainability(self, analyzer):
        """Maintainability rules can be switched off."""
        options = AnalysisOptions(check_maintainability=False)
        assert analyze(analyzer, SAMPLE_JS_CONSOLE, options) == []

    def test_disable_complexity(self, analyzer):
        """Complexity rules can be switched off."""
        options = AnalysisOptions(check_complexity=False)
        assert analyze(analyzer, SAMPLE_JS_COMPLEX_CONDITION, options) == []

    def test_enabled_groups(self):
        """Reports only enabled groups."""
        options = AnalysisOptions(check_security=False, check_performance=False)
        assert options.enabled_groups() == {"maintainability", "complexity"}


class TestDiagnosticRobustness:
    """Rules never fail on odd input."""

    @pytest.mark.parametrize(
        "code",
        [
            "",
            "\x00\x01\x02\xff",
            "if (" + "x" * 10_000,
            '"' * 5_000,
            "\n" * 1_000,
        ],
    )
    def test_total_over_strings(self, analyzer, code):
        """Every line number stays within the file."""
        source = SourceFile.from_code(code)
        for issue in analyzer.analyze(source):
            assert 1 <= issue.line <= source.line_count
