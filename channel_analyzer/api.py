"""
FastAPI app for YouTube channel analysis.

Exposes:
- POST /api/ai-analyze: AI report for channel data supplied by the client
- POST /api/analyze: fetch a channel by URL and return statistics, optionally
  with the AI report

Every failure is returned as {"error", "debug"?, "timestamp"} with the status
of the error type; "debug" is only included in development.
"""
from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
import logging

from channel_analyzer.agents.analysis import ChannelAnalyzer
from channel_analyzer.config import get_settings
from channel_analyzer.constants import (
    ReportVariant,
    API_VERSION,
    MAX_VIDEOS_MIN,
    MAX_VIDEOS_MAX,
    MAX_VIDEOS_DEFAULT,
)
from channel_analyzer.core.auth import verify_api_key
from channel_analyzer.core.workflow import analyze_channel_data, analyze_channel_url
from channel_analyzer.schemas import AIAnalyzeRequest, AnalyzeRequest
from channel_analyzer.services.apify import ApifyVideoFetcher
from channel_analyzer.services.llm import OpenAIClient
from channel_analyzer.utils.api_helpers import (
    APIError,
    InsufficientDataError,
    build_error_response,
)

# Logging configuration
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="YouTube Channel Analyzer API",
    description="Collects recent channel videos and produces AI trend reports",
    version=API_VERSION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# DEPENDENCIES
# ============================================================================


def get_analyzer(request: Request) -> ChannelAnalyzer:
    """Channel analyzer built once from settings and kept on app.state."""
    analyzer = getattr(request.app.state, "analyzer", None)
    if analyzer is None:
        settings = get_settings()
        analyzer = ChannelAnalyzer(
            OpenAIClient.from_settings(settings),
            language=settings.report_language,
        )
        request.app.state.analyzer = analyzer
    return analyzer


def get_fetcher(request: Request) -> ApifyVideoFetcher:
    """Video fetcher built once from settings and kept on app.state."""
    fetcher = getattr(request.app.state, "fetcher", None)
    if fetcher is None:
        fetcher = ApifyVideoFetcher.from_settings(get_settings())
        request.app.state.fetcher = fetcher
    return fetcher


# ============================================================================
# ERROR HANDLING
# ============================================================================


def _error_response(error: Exception, status_code: int) -> JSONResponse:
    body = build_error_response(error, include_debug=get_settings().is_development)
    return JSONResponse(status_code=status_code, content=body)


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    logger.error(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc}")
    return _error_response(exc, exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    error = InsufficientDataError(
        f"Invalid request body: {exc.errors()}",
        user_message="Invalid request. Please check the request body.",
    )
    return _error_response(error, error.status_code)


def _as_api_error(error: Exception) -> APIError:
    """Wrap an unexpected exception so it is reported with the generic 500 message."""
    logger.error(f"Unexpected error: {error}", exc_info=True)
    return APIError(f"{type(error).__name__}: {error}")


# ============================================================================
# ENDPOINTS
# ============================================================================


@app.get("/")
async def root():
    """Root endpoint to check the API is running."""
    return {
        "message": "YouTube Channel Analyzer API",
        "version": API_VERSION,
        "endpoints": {
            "analyze": "/api/analyze",
            "ai_analyze": "/api/ai-analyze",
            "health": "/health",
            "docs": "/docs"
        }
    }


@app.get("/health")
async def health_check():
    """Health endpoint reporting which backends are configured."""
    settings = get_settings()
    return {
        "status": "healthy",
        "openai_configured": bool(settings.openai_api_key),
        "apify_configured": bool(settings.apify_api_token)
    }


@app.post("/api/ai-analyze", dependencies=[Depends(verify_api_key)])
async def ai_analyze(
    request: AIAnalyzeRequest,
    analyzer: ChannelAnalyzer = Depends(get_analyzer),
):
    """
    Generate an AI report for channel data supplied by the client.

    Args:
        request: channel_info, videos and report variant

    Returns:
        {"success": true, "data": {...}}

    Raises:
        APIError: Mapped to its status by the exception handler
    """
    try:
        channel, videos = request.to_records()
    except ValidationError as e:
        raise InsufficientDataError(
            f"Invalid video data: {e}",
            user_message="Channel information and video data are required.",
        ) from e

    try:
        data = await analyze_channel_data(analyzer, channel, videos, request.variant)
    except APIError:
        raise
    except Exception as e:
        raise _as_api_error(e) from e

    return {"success": True, "data": data}


@app.get("/api/ai-analyze")
async def ai_analyze_usage():
    """Usage description for the AI analysis endpoint."""
    return {
        "message": "YouTube channel AI analysis API",
        "usage": "POST /api/ai-analyze",
        "parameters": {
            "channel_info": "Channel information object (required)",
            "videos": "Array of video data (required)",
            "variant": {v.value: v.description for v in ReportVariant}
        },
        "features": [
            "Channel overview",
            "Title pattern analysis",
            "High/low performer analysis",
            "Content strategy recommendations",
            "Executive summary"
        ]
    }


@app.post("/api/analyze", dependencies=[Depends(verify_api_key)])
async def analyze_channel(
    request: AnalyzeRequest,
    fetcher: ApifyVideoFetcher = Depends(get_fetcher),
    analyzer: ChannelAnalyzer = Depends(get_analyzer),
):
    """
    Fetch a channel by URL and analyze it.

    Args:
        request: url, maxVideos, includeAIAnalysis and report variant

    Returns:
        {"success": true, "data": {...}}; a failed AI step is embedded as
        data.ai_analysis = {"error": ...} with the statistics intact

    Raises:
        APIError: Fetch-side failures, mapped to their status
    """
    settings = get_settings()
    transcript_languages = (
        settings.transcript_languages_list if settings.transcript_fallback_enabled else None
    )

    try:
        data = await analyze_channel_url(
            request.url,
            request.max_videos,
            fetcher,
            analyzer,
            include_ai_analysis=request.include_ai_analysis,
            variant=request.variant,
            transcript_languages=transcript_languages,
            script_ranges=settings.keyword_script_ranges,
        )
    except APIError:
        raise
    except Exception as e:
        raise _as_api_error(e) from e

    return {"success": True, "data": data}


@app.get("/api/analyze")
async def analyze_usage():
    """Usage description for the channel analysis endpoint."""
    return {
        "message": "YouTube channel analysis API",
        "usage": "POST /api/analyze",
        "parameters": {
            "url": "YouTube channel or video URL (required)",
            "maxVideos": f"Number of videos to analyze ({MAX_VIDEOS_MIN}-{MAX_VIDEOS_MAX}, default: {MAX_VIDEOS_DEFAULT})",
            "includeAIAnalysis": "Include the AI report (default: false)",
            "variant": {v.value: v.description for v in ReportVariant}
        },
        "features": [
            "Video list and statistics",
            "Caption coverage",
            "Keyword frequency",
            "View distribution",
            "Optional AI report"
        ]
    }
