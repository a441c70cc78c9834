"""API routes implementation."""

from typing import Optional

from fastapi import APIRouter, Query, Request, HTTPException, status
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    MetricsResponse,
    DomainStatResponse,
    HealthResponse,
    ErrorResponse,
    StatisticsResponse,
)
from shortener.errors import InvalidURLError
from shortener.common.url_builder import build_short_url
from shortener.common.logging_config import get_logger

router = APIRouter()

logger = get_logger("api")


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid URL or request body"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create short URL",
    description="Create a shortened URL. Shortening the same URL again returns the same code.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create a shortened URL."""
    service = request.app.state.service
    config = request.app.state.config

    try:
        code = service.shorten(body.url)
    except InvalidURLError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"shorten error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal error",
        )

    short_url = build_short_url(
        code=code,
        base_url=config.base_url,
        path_prefix=config.path_prefix,
    )

    return ShortenResponse(short_url=short_url, code=code)


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get top domains",
    description="Get the most frequently shortened domains.",
)
async def get_metrics(
    request: Request,
    limit: Optional[int] = Query(None, ge=0, description="Number of domains to return"),
):
    """Get the most frequently shortened domains."""
    service = request.app.state.service
    config = request.app.state.config

    if limit is None:
        limit = config.top_domains_limit

    top_domains = service.get_top_domains(limit)

    return MetricsResponse(
        top_domains=[DomainStatResponse(**stat.to_dict()) for stat in top_domains],
    )


@router.get(
    "/stats",
    response_model=StatisticsResponse,
    summary="Get statistics",
    description="Get service-wide statistics.",
)
async def get_statistics(request: Request):
    """Get service statistics."""
    service = request.app.state.service

    stats = service.get_statistics()

    return StatisticsResponse(**stats)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for monitoring."""
    service = request.app.state.service

    health = service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        store="healthy" if health["store"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
