"""Code review schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from codequality.analyzers.review_analyzer import CommentSeverity, CommentType
from codequality.services.scoring_service import ReviewStatus


class ReviewRequest(BaseModel):
    """Code review request model."""

    code: str = Field(..., min_length=1)
    language: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str | None = None
    author: str = Field(..., min_length=1)


class ReviewCommentResponse(BaseModel):
    """Review comment response model."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    kind: CommentType
    severity: CommentSeverity
    message: str
    line: int
    column: int
    rule_id: str
    author: str
    created_at: datetime


class ReviewResultResponse(BaseModel):
    """Code review response model."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    status: ReviewStatus
    score: int = Field(..., ge=0, le=100)
    comments: list[ReviewCommentResponse]
    summary_text: str
    recommendations: list[str]
    approval_required: bool


class ReviewStatisticsResponse(BaseModel):
    """Aggregate review history response model."""

    model_config = ConfigDict(from_attributes=True)

    total_reviews: int
    average_score: int
    approval_rate: int
    common_issues: list[str]
