"""API dependencies for dependency injection."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from codequality.analyzers.review_analyzer import ReviewAnalyzer
from codequality.config import Settings, get_settings
from codequality.services.analysis_service import AnalysisService
from codequality.services.optimization_service import OptimizationService
from codequality.services.review_history_service import ReviewHistoryService
from codequality.services.review_service import ReviewService


def get_analysis_service() -> AnalysisService:
    return AnalysisService()


def get_optimization_service() -> OptimizationService:
    return OptimizationService()


def get_review_service(settings: Annotated[Settings, Depends(get_settings)]) -> ReviewService:
    """Review service attributing comments to the configured reviewer."""
    return ReviewService(analyzer=ReviewAnalyzer(reviewer=settings.reviewer_name))


@lru_cache
def get_review_history() -> ReviewHistoryService:
    """Process-wide review history."""
    return ReviewHistoryService()


# Type aliases for cleaner signatures
Analysis = Annotated[AnalysisService, Depends(get_analysis_service)]
Optimization = Annotated[OptimizationService, Depends(get_optimization_service)]
Review = Annotated[ReviewService, Depends(get_review_service)]
ReviewHistory = Annotated[ReviewHistoryService, Depends(get_review_history)]
