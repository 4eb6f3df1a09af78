"""Review rules.

Rules are pure and report ``ReviewNote`` values. The analyzer stamps each
note with an id, the reviewer identity and a timestamp to produce the final
``ReviewComment``. Lookahead rules scan a fixed window and never past it.
"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

from codequality.analyzers.base import LineContext, LineRule, SourceFile, run_rules
from codequality.analyzers.patterns import DECLARATION, MAGIC_NUMBER, is_comment

SHORT_NAME_ALLOWLIST = frozenset({"i", "j", "k", "id"})
MIN_NAME_LENGTH = 3
MAX_FUNCTION_LINES = 20
ERROR_HANDLING_WINDOW = 10
MIN_COMMENT_LENGTH = 10
ERROR_HANDLING_MARKERS = ("console.error", "logger", "throw")


class CommentType(str, Enum):
    ISSUE = "issue"
    SUGGESTION = "suggestion"
    PRAISE = "praise"
    QUESTION = "question"


class CommentSeverity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class ReviewNote:
    """What a review rule reports for a line."""

    kind: CommentType
    severity: CommentSeverity
    message: str
    line: int
    rule_id: str
    column: int = 1


@dataclass(frozen=True)
class ReviewComment:
    """A review note attributed to the automated reviewer."""

    id: str
    kind: CommentType
    severity: CommentSeverity
    message: str
    line: int
    column: int
    rule_id: str
    author: str
    created_at: datetime


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _check_short_names(ctx: LineContext) -> list[ReviewNote]:
    notes = []
    for match in DECLARATION.finditer(ctx.raw):
        name = match.group(1)
        if len(name) >= MIN_NAME_LENGTH or name in SHORT_NAME_ALLOWLIST:
            continue
        notes.append(
            ReviewNote(
                kind=CommentType.SUGGESTION,
                severity=CommentSeverity.LOW,
                message=f'Variable name "{name}" is too short; use a more meaningful name',
                line=ctx.number,
                rule_id="short-variable-name",
                column=match.start() + 1,
            )
        )
    return notes


def _function_span(window: tuple[str, ...]) -> Optional[int]:
    """Lines spanned until brace depth closes, or None if it stays open."""
    depth = 0
    for offset, line in enumerate(window):
        depth += line.count("{") - line.count("}")
        if offset > 0 and depth <= 0:
            return offset + 1
    return None


def _check_function_length(ctx: LineContext) -> list[ReviewNote]:
    if "function" not in ctx.trimmed and "=>" not in ctx.trimmed:
        return []
    window = ctx.window(MAX_FUNCTION_LINES + 1)
    span = _function_span(window)
    if span is None:
        # Still open at the end of the file.
        if len(window) <= MAX_FUNCTION_LINES:
            return []
    elif span <= MAX_FUNCTION_LINES:
        return []
    return [
        ReviewNote(
            kind=CommentType.ISSUE,
            severity=CommentSeverity.MEDIUM,
            message=f"Function spans more than {MAX_FUNCTION_LINES} lines; split it into smaller functions",
            line=ctx.number,
            rule_id="function-length",
        )
    ]


def _check_comment_quality(ctx: LineContext) -> list[ReviewNote]:
    if not ctx.trimmed.startswith(("//", "/*")) or len(ctx.trimmed) >= MIN_COMMENT_LENGTH:
        return []
    return [
        ReviewNote(
            kind=CommentType.SUGGESTION,
            severity=CommentSeverity.LOW,
            message="Comment is too brief; explain the intent in more detail",
            line=ctx.number,
            rule_id="comment-quality",
        )
    ]


def _check_error_handling(ctx: LineContext) -> list[ReviewNote]:
    if "try {" not in ctx.trimmed and "catch" not in ctx.trimmed:
        return []
    for line in ctx.window(ERROR_HANDLING_WINDOW):
        if any(marker in line for marker in ERROR_HANDLING_MARKERS):
            return []
    return [
        ReviewNote(
            kind=CommentType.ISSUE,
            severity=CommentSeverity.HIGH,
            message="Error handling is incomplete; log the error or rethrow it",
            line=ctx.number,
            rule_id="error-handling",
        )
    ]


def _check_magic_number(ctx: LineContext) -> list[ReviewNote]:
    if is_comment(ctx.trimmed):
        return []
    match = MAGIC_NUMBER.search(ctx.raw)
    if not match:
        return []
    return [
        ReviewNote(
            kind=CommentType.SUGGESTION,
            severity=CommentSeverity.LOW,
            message=f"Extract the magic number {match.group(1)} into a named constant",
            line=ctx.number,
            rule_id="magic-number",
            column=match.start() + 1,
        )
    ]


def _check_async_usage(ctx: LineContext) -> list[ReviewNote]:
    if "async" not in ctx.trimmed or "await" not in ctx.trimmed:
        return []
    return [
        ReviewNote(
            kind=CommentType.PRAISE,
            severity=CommentSeverity.LOW,
            message="Good use of async/await",
            line=ctx.number,
            rule_id="async-await",
        )
    ]


REVIEW_RULES: tuple[LineRule[ReviewNote], ...] = (
    LineRule("short-variable-name", _check_short_names),
    LineRule("function-length", _check_function_length),
    LineRule("comment-quality", _check_comment_quality),
    LineRule("error-handling", _check_error_handling),
    LineRule("magic-number", _check_magic_number),
    LineRule("async-await", _check_async_usage),
)


class ReviewAnalyzer:
    """Runs the review rule table and attributes notes to the reviewer."""

    name = "review"

    def __init__(
        self,
        reviewer: str = "Automated Review Bot",
        id_factory: Callable[[str], str] = new_id,
        clock: Callable[[], datetime] = utc_now,
        rules: tuple[LineRule[ReviewNote], ...] = REVIEW_RULES,
    ) -> None:
        self.reviewer = reviewer
        self.id_factory = id_factory
        self.clock = clock
        self.rules = rules

    def analyze(self, source: SourceFile) -> list[ReviewComment]:
        notes = run_rules(source, self.rules)
        created_at = self.clock()
        return [
            ReviewComment(
                id=self.id_factory("comment"),
                kind=note.kind,
                severity=note.severity,
                message=note.message,
                line=note.line,
                column=note.column,
                rule_id=note.rule_id,
                author=self.reviewer,
                created_at=created_at,
            )
            for note in notes
        ]
