"""
Error types and response helpers shared by the API and the analysis pipeline.

Every failure the pipeline can report is an APIError subclass carrying:
- the HTTP status it maps to
- a user-facing message (the raw exception text is debug detail only)

No error in this module is retried automatically; callers surface them
synchronously.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class APIError(Exception):
    """Base exception for pipeline and collaborator errors."""
    status_code: int = 500
    user_message: str = "An error occurred during channel analysis."

    def __init__(self, detail: Optional[str] = None, user_message: Optional[str] = None):
        super().__init__(detail or self.user_message)
        if user_message:
            self.user_message = user_message


class BackendUnavailableError(APIError):
    """A required credential is missing or was rejected (operator issue)."""
    status_code = 500
    user_message = "The analysis service is not configured. Please contact the administrator."


class InsufficientDataError(APIError):
    """No videos to analyze, or the request input failed validation."""
    status_code = 400
    user_message = "Not enough video data to analyze."


class UpstreamNotFoundError(APIError):
    """The fetch service found no videos for the channel."""
    status_code = 404
    user_message = "No videos were found for this channel. Please check the channel URL."


class UpstreamFetchError(APIError):
    """The fetch service failed for transient reasons."""
    status_code = 503
    user_message = "Failed to collect YouTube data. Please try again shortly."


class QuotaExceededError(APIError):
    """The LLM service reported that the usage limit was exceeded."""
    status_code = 429
    user_message = "The AI analysis quota has been exceeded. Please try again later."


class ModelUnavailableError(APIError):
    """The configured model cannot be reached with this credential."""
    status_code = 503
    user_message = "The AI model is currently unavailable."


class LLMServiceError(APIError):
    """The LLM service failed for a reason other than credentials, quota or model access."""
    status_code = 503
    user_message = "The AI analysis service returned an error. Please try again shortly."


class EmptyReportError(APIError):
    """The LLM service returned no usable content."""
    status_code = 503
    user_message = "No response was received from the AI analysis service. Please try again."


class MalformedReportError(APIError):
    """The LLM output could not be parsed into the structured report schema."""
    status_code = 503
    user_message = "The AI analysis response could not be interpreted. Please try again."


GENERIC_ERROR_MESSAGE = APIError.user_message


def status_code_for(error: Exception) -> int:
    """Map an exception to the HTTP status reported to the client."""
    if isinstance(error, APIError):
        return error.status_code
    return 500


def user_message_for(error: Exception) -> str:
    """User-facing message for an exception; unknown errors get the generic one."""
    if isinstance(error, APIError):
        return error.user_message
    return GENERIC_ERROR_MESSAGE


def utc_timestamp() -> str:
    """ISO-8601 timestamp in UTC with a trailing Z."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def build_error_response(error: Exception, include_debug: bool = False, **extra: Any) -> Dict[str, Any]:
    """
    Build the JSON body returned for a failed request.

    Args:
        error: Exception that ended the request
        include_debug: Add the raw exception text (development only)
        **extra: Additional top-level fields (e.g. data_source)

    Returns:
        Dictionary with "error", optional "debug", extra fields and "timestamp"
    """
    body: Dict[str, Any] = {"error": user_message_for(error)}
    if include_debug:
        body["debug"] = str(error)
    body.update(extra)
    body["timestamp"] = utc_timestamp()
    return body


def build_inline_error(error: Exception) -> Dict[str, Any]:
    """
    Error object embedded in place of a failed AI section.

    Used by the combined flow so that one collaborator's failure does not
    discard the results of the others.
    """
    return {
        "error": user_message_for(error),
        "error_type": type(error).__name__,
        "status_code": status_code_for(error),
    }
