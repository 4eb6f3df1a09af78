"""Code optimization schemas."""

from pydantic import BaseModel, ConfigDict, Field

from codequality.analyzers.optimization_analyzer import Impact, OptimizationCategory, OptimizationType


class OptimizationRequest(BaseModel):
    """Code optimization request model."""

    code: str = Field(..., min_length=1)
    language: str = Field(..., min_length=1)
    optimization_type: OptimizationType
    preserve_comments: bool = True


class OptimizationSuggestionResponse(BaseModel):
    """Optimization suggestion response model."""

    model_config = ConfigDict(from_attributes=True)

    rule_id: str
    line: int
    column: int
    original_line: str
    optimized_line: str
    reason: str
    impact: Impact
    category: OptimizationCategory
    applied: bool


class OptimizationSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_changes: int
    performance_gains_text: str
    readability_score: int
    security_improvements_count: int


class OptimizationResultResponse(BaseModel):
    """Code optimization response model."""

    model_config = ConfigDict(from_attributes=True)

    original_code: str
    optimized_code: str
    suggestions: list[OptimizationSuggestionResponse]
    summary: OptimizationSummaryResponse
