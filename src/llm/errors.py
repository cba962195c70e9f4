"""
Failure taxonomy for remote-model calls.

analyze_task, generate_task_suggestions and generate_productivity_insights
convert every one of these into a heuristic fallback result; only voice
parsing lets ServiceUnavailableError / VoiceProcessingError reach the caller.
"""

from __future__ import annotations


class AIServiceError(Exception):
    """Base error for the AI analysis layer."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class RemoteUnavailableError(AIServiceError):
    """No provider configured (usually: no API key)."""

    status_code = 503


class RemoteCallError(AIServiceError):
    """Timeout, network, quota or auth failure from the provider."""

    status_code = 502


class EmptyResponseError(AIServiceError):
    """The provider answered but the completion had no content."""

    status_code = 502


class ResponseParseError(AIServiceError):
    """No JSON region in the reply, or the region is not valid JSON."""

    status_code = 502


class ServiceUnavailableError(AIServiceError):
    status_code = 503


class VoiceProcessingError(AIServiceError):
    status_code = 500
