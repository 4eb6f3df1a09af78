"""Code analysis service."""

import logging
from dataclasses import dataclass

from codequality.analyzers.base import SourceFile
from codequality.analyzers.diagnostic_analyzer import AnalysisOptions, DiagnosticAnalyzer, Issue
from codequality.services.scoring_service import CodeMetrics, ScoringService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Diagnostics, metrics and score for one source file."""

    findings: list[Issue]
    metrics: CodeMetrics
    score: int
    suggestions: list[str]


class AnalysisService:
    """Runs the diagnostic rules and scores the result."""

    def __init__(
        self,
        analyzer: DiagnosticAnalyzer | None = None,
        scoring: ScoringService | None = None,
    ) -> None:
        self.analyzer = analyzer or DiagnosticAnalyzer()
        self.scoring = scoring or ScoringService()

    def analyze(
        self,
        code: str,
        language: str,
        options: AnalysisOptions | None = None,
    ) -> AnalysisResult:
        """Analyze source code.

        Args:
            code: Source text
            language: Language label supplied by the caller
            options: Rule group switches, all enabled by default

        Returns:
            AnalysisResult for this call
        """
        source = SourceFile.from_code(code)
        issues = self.analyzer.analyze(source, options)
        metrics = self.scoring.compute_metrics(issues, source.lines)
        score = self.scoring.score_analysis(issues, metrics)
        suggestions = self.scoring.analysis_suggestions(score, metrics, len(issues))

        logger.info(
            f"Analyzed {source.line_count} {language} lines: {len(issues)} issues, score {score}"
        )
        return AnalysisResult(
            findings=issues,
            metrics=metrics,
            score=score,
            suggestions=suggestions,
        )
