"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from src.mockview.config import settings
from src.mockview.features.feedback import router as feedback_router
from src.mockview.features.interviews import router as interviews_router

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Mock Interview Feedback API",
    description="Scores mock interview transcripts and serves interview and feedback records",
    version="0.1.0",
    debug=settings.debug,
)

origins = settings.cors_origins.split(",")
logger.info(f"Origins : {origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(interviews_router, prefix=settings.api_v1_prefix, tags=["interviews"])
app.include_router(feedback_router, prefix=settings.api_v1_prefix, tags=["feedback"])


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: str


@app.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Health check endpoint."""
    return HealthCheckResponse(status="healthy")
