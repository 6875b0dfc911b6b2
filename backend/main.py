"""Eco-Score Web API – FastAPI app exposing the page carbon analysis."""

import logging
import sys
from datetime import datetime, timezone

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from analyzer import analyze_with_cache
from cache import ResultCache
from config import CORS_ORIGINS, HOST, LOG_LEVEL, PORT
from errors import InvalidURLError, PageFetchError
from schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    CacheStats,
    ErrorResponse,
    HealthResponse,
    ServiceInfo,
)
from urls import normalize_url

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

API_NAME = "Eco-Score Web API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "API for estimating the carbon footprint of web pages"
ANALYSIS_FAILED_MESSAGE = "The page could not be retrieved, so it could not be analysed."
INTERNAL_ERROR_MESSAGE = "Internal server error"
INVALID_BODY_MESSAGE = 'Request body must be a JSON object with a "url" field.'

app = FastAPI(
    title=API_NAME,
    description=API_DESCRIPTION,
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def startup() -> None:
    app.state.cache = ResultCache()
    logger.info("%s %s ready, CORS origins: %s", API_NAME, API_VERSION, ", ".join(CORS_ORIGINS))


@app.on_event("shutdown")
def shutdown() -> None:
    app.state.cache.clear()


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("%s %s", request.method, request.url.path)
    return await call_next(request)


def get_cache(request: Request) -> ResultCache:
    return request.app.state.cache


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404 and exc.detail == "Not Found":
        return _error_response(404, "Route not found")
    if exc.status_code == 405:
        return _error_response(405, "Method not allowed")
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(400, INVALID_BODY_MESSAGE)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(500, INTERNAL_ERROR_MESSAGE)


@app.get("/", response_model=ServiceInfo)
def root() -> ServiceInfo:
    """Static service metadata."""
    return ServiceInfo(
        name=API_NAME,
        version=API_VERSION,
        description=API_DESCRIPTION,
        endpoints={
            "analyze": "POST /api/analyze",
            "health": "GET /api/health",
        },
    )


@app.post(
    "/api/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def analyze(body: AnalyzeRequest, cache: ResultCache = Depends(get_cache)) -> AnalyzeResponse:
    """
    Pipeline: validate URL -> cache lookup -> hosting + page weight -> carbon -> score -> cache.
    """
    try:
        url = normalize_url(body.url)
    except InvalidURLError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    try:
        result, cached = analyze_with_cache(url, cache)
    except PageFetchError as exc:
        logger.error("Analysis failed for %s: %s", url, exc)
        raise HTTPException(status_code=500, detail=ANALYSIS_FAILED_MESSAGE) from exc

    return AnalyzeResponse(data=result, cached=cached)


@app.get("/api/health", response_model=HealthResponse)
def health(cache: ResultCache = Depends(get_cache)) -> HealthResponse:
    """Health check for deployment."""
    return HealthResponse(
        timestamp=datetime.now(timezone.utc),
        cache_stats=CacheStats(**cache.stats()),
    )


def run() -> None:
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
