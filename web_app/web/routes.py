"""Web routes: healthcheck root and short code redirects."""

from fastapi import APIRouter, Request, HTTPException, status
from fastapi.responses import PlainTextResponse, RedirectResponse

from shortener.errors import NotFoundError

router = APIRouter()

HEALTHCHECK_MESSAGE = "URL Shortener Service Healthcheck service is running"


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def homepage():
    """Plain text healthcheck for load balancers."""
    return PlainTextResponse(content=HEALTHCHECK_MESSAGE)


@router.get("/{short_code}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL."""
    service = request.app.state.service

    try:
        original_url = service.resolve(short_code)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Short code '{short_code}' not found",
        )

    # Mappings never change, so the redirect is permanent
    return RedirectResponse(url=original_url, status_code=status.HTTP_301_MOVED_PERMANENTLY)
