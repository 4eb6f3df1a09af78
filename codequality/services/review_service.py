"""Automated code review service."""

import logging
from dataclasses import dataclass
from typing import Callable

from codequality.analyzers.base import SourceFile
from codequality.analyzers.review_analyzer import ReviewAnalyzer, ReviewComment, new_id
from codequality.services.scoring_service import ReviewStatus, ScoringService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReviewResult:
    """Outcome of one automated review."""

    id: str
    title: str
    status: ReviewStatus
    score: int
    comments: list[ReviewComment]
    summary_text: str
    recommendations: list[str]
    approval_required: bool


class ReviewService:
    """Reviews a snippet and derives the verdict from its score."""

    def __init__(
        self,
        analyzer: ReviewAnalyzer | None = None,
        scoring: ScoringService | None = None,
        id_factory: Callable[[str], str] = new_id,
    ) -> None:
        self.analyzer = analyzer or ReviewAnalyzer()
        self.scoring = scoring or ScoringService()
        self.id_factory = id_factory

    def review(
        self,
        code: str,
        language: str,
        title: str,
        author: str,
        description: str | None = None,
    ) -> ReviewResult:
        """Review code submitted by ``author``.

        The description is accepted for the record but does not affect rules.
        """
        source = SourceFile.from_code(code)
        comments = self.analyzer.analyze(source)
        score = self.scoring.score_review(comments)
        status = self.scoring.classify(score)

        result = ReviewResult(
            id=self.id_factory("review"),
            title=title,
            status=status,
            score=score,
            comments=comments,
            summary_text=self.scoring.review_summary(score, comments),
            recommendations=self.scoring.review_recommendations(score, comments),
            approval_required=self.scoring.approval_required(score),
        )
        logger.info(
            f"Review {result.id} of '{title}' by {author} ({language}): "
            f"{status.value}, score {score}, {len(comments)} comments"
        )
        return result
