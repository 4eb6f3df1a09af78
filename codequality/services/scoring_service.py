"""Scoring service for findings.

Reduces a finding list to quality metrics, a 0-100 score, a review verdict and
the human-readable guidance that goes with each score band.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from codequality.analyzers.diagnostic_analyzer import Issue, IssueSeverity, IssueType
from codequality.analyzers.optimization_analyzer import OptimizationCategory, OptimizationSuggestion
from codequality.analyzers.review_analyzer import CommentSeverity, CommentType, ReviewComment

MAX_COMPLEXITY = 20


@dataclass(frozen=True)
class CodeMetrics:
    """Quality metrics for an analyzed file."""

    complexity: int
    maintainability_index: int
    technical_debt: int
    code_smells: int
    duplicate_lines: int
    lines_of_code: int


class ReviewStatus(str, Enum):
    """Review verdicts."""

    PENDING = "pending"
    APPROVED = "approved"
    NEEDS_WORK = "needs-work"
    REJECTED = "rejected"


class ScoringService:
    """Service for turning findings into metrics, scores and verdicts."""

    # Points lost per review comment, by severity
    REVIEW_PENALTIES = {
        CommentSeverity.HIGH: 10,
        CommentSeverity.MEDIUM: 5,
        CommentSeverity.LOW: 2,
    }

    APPROVAL_THRESHOLD = 85
    REJECTION_THRESHOLD = 60

    # ========================================
    # ANALYSIS
    # ========================================

    def compute_metrics(self, issues: Sequence[Issue], lines: Sequence[str]) -> CodeMetrics:
        """Aggregate the issue list and line count into metrics.

        ``duplicate_lines`` is always zero: no duplicate detection is done.
        """
        lines_of_code = sum(1 for line in lines if line.strip())
        issue_count = len(issues)
        complexity = min(lines_of_code // 10 + issue_count, MAX_COMPLEXITY)
        serious = sum(
            1 for issue in issues if issue.severity in (IssueSeverity.MAJOR, IssueSeverity.CRITICAL)
        )
        smells = sum(
            1 for issue in issues if issue.kind in (IssueType.WARNING, IssueType.SUGGESTION)
        )
        return CodeMetrics(
            complexity=complexity,
            maintainability_index=max(100 - complexity * 2 - issue_count, 0),
            technical_debt=serious * 2,
            code_smells=smells,
            duplicate_lines=0,
            lines_of_code=lines_of_code,
        )

    def score_analysis(self, issues: Sequence[Issue], metrics: CodeMetrics) -> int:
        return _clamp(100 - len(issues) * 5 - metrics.complexity)

    def analysis_suggestions(self, score: int, metrics: CodeMetrics, issue_count: int) -> list[str]:
        suggestions = []
        if score < 60:
            suggestions.append("Code quality needs major rework; consider refactoring")
        elif score < 80:
            suggestions.append("Code quality is good, but there is room to improve")
        else:
            suggestions.append("Code quality is excellent; keep it up")

        if metrics.complexity > 10:
            suggestions.append("Reduce code complexity, for example by applying design patterns")
        if issue_count > 10:
            suggestions.append("Fix the existing issues to make the code more robust")
        return suggestions

    # ========================================
    # OPTIMIZATION
    # ========================================

    def readability_score(self, suggestions: Sequence[OptimizationSuggestion]) -> int:
        readability = _count_category(suggestions, OptimizationCategory.READABILITY)
        return max(85 - readability * 5, 60)

    def performance_gains(self, suggestions: Sequence[OptimizationSuggestion]) -> str:
        count = _count_category(suggestions, OptimizationCategory.PERFORMANCE)
        if count == 0:
            return "No performance improvements"
        return f"{count} performance optimization{'s' if count != 1 else ''}"

    def security_improvements(self, suggestions: Sequence[OptimizationSuggestion]) -> int:
        return _count_category(suggestions, OptimizationCategory.SECURITY)

    # ========================================
    # REVIEW
    # ========================================

    def score_review(self, comments: Sequence[ReviewComment]) -> int:
        penalty = sum(self.REVIEW_PENALTIES.get(comment.severity, 0) for comment in comments)
        return _clamp(100 - penalty)

    def classify(self, score: int) -> ReviewStatus:
        if score >= self.APPROVAL_THRESHOLD:
            return ReviewStatus.APPROVED
        if score >= self.REJECTION_THRESHOLD:
            return ReviewStatus.NEEDS_WORK
        return ReviewStatus.REJECTED

    def approval_required(self, score: int) -> bool:
        return score < self.APPROVAL_THRESHOLD

    def review_recommendations(self, score: int, comments: Sequence[ReviewComment]) -> list[str]:
        if score >= 90:
            recommendations = [
                "Excellent code quality; ready to merge",
                "Keep up this high coding standard",
            ]
        elif score >= 75:
            recommendations = [
                "Good code quality; fix the minor problems before merging",
                "Consider improving comments and naming in the next change",
            ]
        elif score >= 60:
            recommendations = [
                "Several problems must be fixed before merging",
                "Focus on error handling and code structure",
            ]
        else:
            recommendations = [
                "The code needs significant improvement; revisit the design",
                "Consider asking teammates for help and advice",
            ]

        issues = _count_type(comments, CommentType.ISSUE)
        if issues > 0:
            recommendations.append(f"Fix {issues} important issue{'s' if issues != 1 else ''}")
        if _count_type(comments, CommentType.SUGGESTION) > 5:
            recommendations.append("Consider adopting some of the suggestions to improve code quality")
        return recommendations

    def review_summary(self, score: int, comments: Sequence[ReviewComment]) -> str:
        issues = _count_type(comments, CommentType.ISSUE)
        return (
            f"Review complete. Score: {score}/100. "
            f"{len(comments)} comment(s), {issues} issue(s) to fix."
        )


def _clamp(score: int) -> int:
    return max(0, min(100, score))


def _count_category(suggestions: Sequence[OptimizationSuggestion], category: OptimizationCategory) -> int:
    return sum(1 for suggestion in suggestions if suggestion.category == category)


def _count_type(comments: Sequence[ReviewComment], comment_type: CommentType) -> int:
    return sum(1 for comment in comments if comment.kind == comment_type)
