"""Code review routes."""

import logging

from fastapi import APIRouter, HTTPException, status

from codequality.api.deps import Review, ReviewHistory
from codequality.schemas.common import ApiResponse
from codequality.schemas.review import ReviewRequest, ReviewResultResponse, ReviewStatisticsResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ApiResponse[ReviewResultResponse])
def create_review(review_data: ReviewRequest, service: Review, history: ReviewHistory):
    """Run an automated review.

    The result carries a verdict and is added to the review statistics.
    """
    try:
        result = service.review(
            code=review_data.code,
            language=review_data.language,
            title=review_data.title,
            author=review_data.author,
            description=review_data.description,
        )
        data = ReviewResultResponse.model_validate(result)
    except Exception:
        logger.exception("Code review failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Code review failed",
        )

    history.record(result)
    return ApiResponse[ReviewResultResponse](success=True, data=data)


@router.get("", response_model=ApiResponse[ReviewStatisticsResponse])
def review_statistics(history: ReviewHistory):
    """Aggregate statistics over reviews recorded by this process."""
    data = ReviewStatisticsResponse.model_validate(history.statistics())
    return ApiResponse[ReviewStatisticsResponse](success=True, data=data)
