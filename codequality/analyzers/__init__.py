"""Analyzer registry."""

from codequality.analyzers.base import LineContext, LineRule, SourceFile, run_rules, split_lines
from codequality.analyzers.diagnostic_analyzer import (
    AnalysisOptions,
    DiagnosticAnalyzer,
    Issue,
    IssueSeverity,
    IssueType,
)
from codequality.analyzers.optimization_analyzer import (
    OPTIMIZATION_TYPES,
    Impact,
    OptimizationAnalyzer,
    OptimizationCategory,
    OptimizationSuggestion,
    OptimizationType,
)
from codequality.analyzers.review_analyzer import (
    CommentSeverity,
    CommentType,
    ReviewAnalyzer,
    ReviewComment,
)

__all__ = [
    "LineContext",
    "LineRule",
    "SourceFile",
    "run_rules",
    "split_lines",
    "AnalysisOptions",
    "DiagnosticAnalyzer",
    "Issue",
    "IssueSeverity",
    "IssueType",
    "OPTIMIZATION_TYPES",
    "Impact",
    "OptimizationAnalyzer",
    "OptimizationCategory",
    "OptimizationSuggestion",
    "OptimizationType",
    "CommentSeverity",
    "CommentType",
    "ReviewAnalyzer",
    "ReviewComment",
]
