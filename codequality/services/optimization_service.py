"""Code optimization service."""

import logging
from dataclasses import dataclass

from codequality.analyzers.optimization_analyzer import OptimizationAnalyzer, OptimizationSuggestion
from codequality.services.scoring_service import ScoringService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptimizationSummary:
    total_changes: int
    performance_gains_text: str
    readability_score: int
    security_improvements_count: int


@dataclass(frozen=True)
class OptimizationResult:
    """Original and optimized code with the suggestions behind the changes."""

    original_code: str
    optimized_code: str
    suggestions: list[OptimizationSuggestion]
    summary: OptimizationSummary


class OptimizationService:
    """Runs the optimization rules and summarizes the changes."""

    def __init__(
        self,
        analyzer: OptimizationAnalyzer | None = None,
        scoring: ScoringService | None = None,
    ) -> None:
        self.analyzer = analyzer or OptimizationAnalyzer()
        self.scoring = scoring or ScoringService()

    def optimize(
        self,
        code: str,
        language: str,
        optimization_type: str = "all",
        preserve_comments: bool = True,
    ) -> OptimizationResult:
        optimization = self.analyzer.analyze(code, optimization_type, preserve_comments)
        suggestions = optimization.suggestions
        summary = OptimizationSummary(
            total_changes=len(suggestions),
            performance_gains_text=self.scoring.performance_gains(suggestions),
            readability_score=self.scoring.readability_score(suggestions),
            security_improvements_count=self.scoring.security_improvements(suggestions),
        )

        logger.info(
            f"Optimized {language} code ({optimization_type}): {summary.total_changes} suggestions"
        )
        return OptimizationResult(
            original_code=code,
            optimized_code=optimization.optimized_code,
            suggestions=suggestions,
            summary=summary,
        )
