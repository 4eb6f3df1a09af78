"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from codequality import __version__
from codequality.api.errors import register_exception_handlers
from codequality.api.routes import analysis, optimization, review
from codequality.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Code Quality API",
    description="Heuristic code analysis, optimization and review",
    version=__version__,
    docs_url="/docs" if not settings.is_production else None,
    redoc_url="/redoc" if not settings.is_production else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(analysis.router, prefix="/api/code-analysis", tags=["Analysis"])
app.include_router(optimization.router, prefix="/api/code-optimization", tags=["Optimization"])
app.include_router(review.router, prefix="/api/code-review", tags=["Review"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
