"""Diagnostic rules for the analysis pipeline.

Every rule looks at a single line in isolation and reports at most one issue
for it. Rules are grouped by the option flag that can switch them off.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from codequality.analyzers.base import LineContext, LineRule, SourceFile, run_rules
from codequality.analyzers.patterns import COMPLEX_CONDITION, LONG_STRING

MAX_SIGNATURE_LENGTH = 80


class IssueType(str, Enum):
    """Issue categories."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    SUGGESTION = "suggestion"


class IssueSeverity(str, Enum):
    """Issue severity levels."""

    CRITICAL = "critical"
    MAJOR = "major"
    MINOR = "minor"
    INFO = "info"


@dataclass(frozen=True)
class Issue:
    """A diagnostic finding."""

    kind: IssueType
    severity: IssueSeverity
    message: str
    line: int
    column: int
    rule_id: str
    remediation: Optional[str] = None


@dataclass(frozen=True)
class AnalysisOptions:
    """Per-group switches for the diagnostic rules."""

    check_security: bool = True
    check_performance: bool = True
    check_maintainability: bool = True
    check_complexity: bool = True

    def enabled_groups(self) -> set[str]:
        flags = {
            "security": self.check_security,
            "performance": self.check_performance,
            "maintainability": self.check_maintainability,
            "complexity": self.check_complexity,
        }
        return {group for group, enabled in flags.items() if enabled}


def _check_function_length(ctx: LineContext) -> list[Issue]:
    if "function" not in ctx.trimmed or len(ctx.raw) <= MAX_SIGNATURE_LENGTH:
        return []
    return [
        Issue(
            kind=IssueType.WARNING,
            severity=IssueSeverity.MINOR,
            message="Function definition is too long; consider splitting it",
            line=ctx.number,
            column=1,
            rule_id="function-length",
            remediation="Split the long function into several smaller functions.",
        )
    ]


def _check_console(ctx: LineContext) -> list[Issue]:
    if "console.log" not in ctx.trimmed:
        return []
    return [
        Issue(
            kind=IssueType.WARNING,
            severity=IssueSeverity.MINOR,
            message="Debug logging should be removed from production code",
            line=ctx.number,
            column=ctx.column_of("console.log"),
            rule_id="no-console",
            remediation="Use a proper logging facility instead of console output.",
        )
    ]


def _check_todo(ctx: LineContext) -> list[Issue]:
    if "TODO" not in ctx.trimmed and "FIXME" not in ctx.trimmed:
        return []
    return [
        Issue(
            kind=IssueType.INFO,
            severity=IssueSeverity.INFO,
            message="Unfinished work marker found",
            line=ctx.number,
            column=1,
            rule_id="todo-check",
        )
    ]


def _check_hardcoded_string(ctx: LineContext) -> list[Issue]:
    match = LONG_STRING.search(ctx.raw)
    if not match:
        return []
    return [
        Issue(
            kind=IssueType.SUGGESTION,
            severity=IssueSeverity.MINOR,
            message="Consider extracting this long string into a constant",
            line=ctx.number,
            column=match.start() + 1,
            rule_id="no-hardcoded-strings",
            remediation="Manage strings through constants or configuration files.",
        )
    ]


def _check_complex_condition(ctx: LineContext) -> list[Issue]:
    match = COMPLEX_CONDITION.search(ctx.raw)
    if not match:
        return []
    return [
        Issue(
            kind=IssueType.WARNING,
            severity=IssueSeverity.MAJOR,
            message="Conditional expression is too complex",
            line=ctx.number,
            column=match.start() + 1,
            rule_id="complex-condition",
            remediation="Split the condition into simpler checks or extract it into a function.",
        )
    ]


DIAGNOSTIC_RULES: tuple[LineRule[Issue], ...] = (
    LineRule("function-length", _check_function_length, group="complexity"),
    LineRule("no-console", _check_console, group="maintainability"),
    LineRule("todo-check", _check_todo, group="maintainability"),
    LineRule("no-hardcoded-strings", _check_hardcoded_string, group="maintainability"),
    LineRule("complex-condition", _check_complex_condition, group="complexity"),
)


class DiagnosticAnalyzer:
    """Runs the diagnostic rule table over a source file."""

    name = "diagnostic"

    def __init__(self, rules: tuple[LineRule[Issue], ...] = DIAGNOSTIC_RULES) -> None:
        self.rules = rules

    def analyze(
        self,
        source: SourceFile,
        options: AnalysisOptions | None = None,
    ) -> list[Issue]:
        groups = (options or AnalysisOptions()).enabled_groups()
        return run_rules(source, (rule for rule in self.rules if rule.group in groups))
