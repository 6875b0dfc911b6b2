"""Pydantic schemas for API request/response."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models import AnalysisResult


class AnalyzeRequest(BaseModel):
    """Request body for POST /api/analyze."""

    url: str = ""

    @field_validator("url", mode="before")
    @classmethod
    def normalize_text_fields(cls, value: object) -> str:
        return str(value or "").strip()


class AnalyzeResponse(BaseModel):
    """Response for POST /api/analyze."""

    status: Literal["success"] = "success"
    data: AnalysisResult
    cached: bool


class ErrorResponse(BaseModel):
    """Error envelope shared by every endpoint."""

    status: Literal["error"] = "error"
    message: str


class CacheStats(BaseModel):
    keys: int
    hits: int
    misses: int


class HealthResponse(BaseModel):
    """Response for GET /api/health."""

    model_config = ConfigDict(populate_by_name=True)

    status: Literal["ok"] = "ok"
    timestamp: datetime
    cache_stats: CacheStats = Field(alias="cacheStats")


class ServiceInfo(BaseModel):
    """Static service metadata returned by GET /."""

    name: str
    version: str
    description: str
    endpoints: dict[str, str]
