"""In-process review history.

Keeps aggregate counters for reviews produced since the process started. The
review engine never reads from here; the API records each finished review.
"""

import threading
from collections import Counter
from dataclasses import dataclass, field

from codequality.analyzers.review_analyzer import CommentType
from codequality.services.review_service import ReviewResult
from codequality.services.scoring_service import ReviewStatus

COMMON_ISSUE_LIMIT = 4


@dataclass(frozen=True)
class ReviewStatistics:
    total_reviews: int
    average_score: int
    approval_rate: int
    common_issues: list[str] = field(default_factory=list)


class ReviewHistoryService:
    """Thread-safe aggregate of recorded reviews."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._total = 0
        self._score_sum = 0
        self._approved = 0
        self._rule_counts: Counter[str] = Counter()

    def record(self, result: ReviewResult) -> None:
        rule_ids = [
            comment.rule_id
            for comment in result.comments
            if comment.kind in (CommentType.ISSUE, CommentType.SUGGESTION)
        ]
        with self._lock:
            self._total += 1
            self._score_sum += result.score
            if result.status == ReviewStatus.APPROVED:
                self._approved += 1
            self._rule_counts.update(rule_ids)

    def statistics(self) -> ReviewStatistics:
        with self._lock:
            if not self._total:
                return ReviewStatistics(total_reviews=0, average_score=0, approval_rate=0)
            return ReviewStatistics(
                total_reviews=self._total,
                average_score=round(self._score_sum / self._total),
                approval_rate=round(self._approved * 100 / self._total),
                common_issues=[rule for rule, _ in self._rule_counts.most_common(COMMON_ISSUE_LIMIT)],
            )
