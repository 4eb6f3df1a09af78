"""Code optimization routes."""

import logging

from fastapi import APIRouter, HTTPException, status

from codequality.api.deps import Optimization
from codequality.schemas.common import ApiResponse
from codequality.schemas.optimization import OptimizationRequest, OptimizationResultResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ApiResponse[OptimizationResultResponse])
def optimize_code(optimization_data: OptimizationRequest, service: Optimization):
    """Suggest optimizations and return the rewritten code."""
    try:
        result = service.optimize(
            code=optimization_data.code,
            language=optimization_data.language,
            optimization_type=optimization_data.optimization_type,
            preserve_comments=optimization_data.preserve_comments,
        )
        data = OptimizationResultResponse.model_validate(result)
    except Exception:
        logger.exception("Code optimization failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Code optimization failed",
        )

    return ApiResponse[OptimizationResultResponse](success=True, data=data)
