"""Code analysis routes."""

import logging

from fastapi import APIRouter, HTTPException, status

from codequality.api.deps import Analysis
from codequality.schemas.analysis import AnalysisRequest, AnalysisResultResponse
from codequality.schemas.common import ApiResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ApiResponse[AnalysisResultResponse])
def analyze_code(analysis_data: AnalysisRequest, service: Analysis):
    """Analyze code quality.

    Returns diagnostics, metrics, a 0-100 score and improvement suggestions.
    """
    try:
        result = service.analyze(
            code=analysis_data.code,
            language=analysis_data.language,
            options=analysis_data.options.to_options(),
        )
        data = AnalysisResultResponse.model_validate(result)
    except Exception:
        logger.exception("Code analysis failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Code analysis failed",
        )

    return ApiResponse[AnalysisResultResponse](success=True, data=data)
