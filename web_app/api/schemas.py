"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import List
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""

    # Validity is checked by the service so every rejection maps to 400
    url: str = Field(..., description="The URL to shorten")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"},
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    short_url: str = Field(..., description="The complete short URL")
    code: str = Field(..., description="The generated short code")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "short_url": "http://localhost:8080/1C",
                    "code": "1C"
                }
            ]
        }
    }


class DomainStatResponse(BaseModel):
    """Occurrence count for one domain."""

    domain: str
    count: int


class MetricsResponse(BaseModel):
    """Most frequently shortened domains."""

    top_domains: List[DomainStatResponse] = Field(
        ..., description="Domains sorted by count descending, then name ascending"
    )


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    store: str = Field(..., description="Store status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str = Field(..., description="Error message")


class StatisticsResponse(BaseModel):
    """Statistics response."""

    total_urls: int
    total_domains: int
    last_id: int
